"""
Verdict model representing the outcome of a single rule evaluation (ephemeral).
"""

from pydantic import BaseModel, Field, field_validator


class Verdict(BaseModel):
    """
    Pass/fail outcome of one rule applied to one field value.

    Attributes:
        ok: Whether the rule passed
        message: Failure message (may contain the ``:attribute`` placeholder);
                 always empty when the rule passed
    """

    ok: bool
    message: str = Field("", validate_default=True)

    @field_validator("message")
    @classmethod
    def check_message_consistency(cls, v, info):
        """Validate that a passing verdict carries no message and a failing one does."""
        ok = info.data.get("ok")
        if ok and v:
            raise ValueError("ok=True but message is not empty")
        if ok is False and not v:
            raise ValueError("ok=False requires a failure message")
        return v

    @classmethod
    def passed(cls) -> "Verdict":
        return cls(ok=True)

    @classmethod
    def fail(cls, message: str) -> "Verdict":
        return cls(ok=False, message=message)

    def __bool__(self) -> bool:
        return self.ok

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "ok": False,
                "message": "The :attribute must be between 1 and 10",
            }
        }

"""
Report models returned by a validation run (ephemeral).
"""

from typing import Literal, Union

from pydantic import BaseModel, Field, field_validator


class ValidationReport(BaseModel):
    """
    Aggregate result of a validation run that completed.

    Attributes:
        ok: True when no field recorded a failure
        errors: Field name -> ordered failure messages (only failing fields)
        successes: Fields that passed every rule (excluded fields are omitted)
    """

    ok: bool
    errors: dict[str, list[str]] = Field(default_factory=dict, validate_default=True)
    successes: list[str] = Field(default_factory=list)

    @field_validator("errors")
    @classmethod
    def check_ok_consistency(cls, v, info):
        """Validate that ok=True implies errors is empty."""
        ok = info.data.get("ok")
        if ok and v:
            raise ValueError("ok=True but errors is not empty")
        if ok is False and not v:
            raise ValueError("ok=False but no field has errors")
        return v

    def messages_for(self, field: str) -> list[str]:
        """Failure messages recorded for a field (empty when it has none)."""
        return list(self.errors.get(field, []))

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "ok": False,
                "errors": {"email": ["The email must be an email"]},
                "successes": ["name", "age"],
            }
        }


class ValidationFailure(BaseModel):
    """
    Result of a validation request that could not be run at all
    (malformed arguments or an orchestration fault).
    """

    ok: Literal[False] = False
    message: str = Field(..., min_length=1)

    class Config:
        frozen = True


ValidationOutcome = Union[ValidationReport, ValidationFailure]

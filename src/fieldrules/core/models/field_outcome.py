"""
FieldOutcome model: the result of running one field's rules (ephemeral).
"""

from typing import Literal

from pydantic import BaseModel, Field

FieldStatus = Literal["passed", "failed", "excluded", "skipped"]


class FieldOutcome(BaseModel):
    """
    Per-field result folded into a ValidationReport.

    Attributes:
        field: Field name
        status: passed (counts as success), failed, excluded (passed but kept
                out of successes) or skipped (absent optional field)
        messages: Failure messages in rule order (only when failed)
    """

    field: str
    status: FieldStatus
    messages: tuple[str, ...] = Field(default_factory=tuple)

    class Config:
        frozen = True

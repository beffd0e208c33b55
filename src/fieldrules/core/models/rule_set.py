"""
RuleSet model bundling a rule spec with its custom error messages.
"""

from pydantic import BaseModel, Field, field_validator


class RuleSet(BaseModel):
    """
    Rule declarations for every field plus optional message overrides.

    Attributes:
        rules: Field name -> ordered rule tokens ("required", "between:1,10")
        messages: Field name -> rule name -> override message
    """

    rules: dict[str, list[str]]
    messages: dict[str, dict[str, str]] = Field(default_factory=dict)

    @field_validator("rules")
    @classmethod
    def check_tokens_not_blank(cls, v):
        """Validate that no field declares a blank rule token."""
        for field_name, tokens in v.items():
            if any(not token.strip() for token in tokens):
                raise ValueError(f"Rules for field '{field_name}' contain a blank token")
        return v

    @property
    def fields(self) -> list[str]:
        return list(self.rules)

    class Config:
        json_schema_extra = {
            "example": {
                "rules": {
                    "email": ["required", "email"],
                    "age": ["nullable", "integer", "between:18,120"],
                },
                "messages": {"email": {"required": "We need your email address"}},
            }
        }

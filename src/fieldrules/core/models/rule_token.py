"""
RuleToken model representing one parsed rule declaration such as ``between:1,10``.
"""

from pydantic import BaseModel, Field

# Rules whose single parameter is a free-form pattern that may itself contain commas
PATTERN_RULES = frozenset({"regex", "not_regex"})


class RuleToken(BaseModel):
    """
    A rule declaration split into its name and ordered string parameters.

    Attributes:
        raw: The token exactly as declared
        name: Rule name as written (used for custom error lookup)
        params: Ordered parameter strings, possibly empty
    """

    raw: str
    name: str = Field(..., min_length=1)
    params: tuple[str, ...] = ()

    @property
    def key(self) -> str:
        """Case-insensitive dispatch key."""
        return self.name.lower()

    @classmethod
    def parse(cls, raw: str) -> "RuleToken":
        """
        Parse a ``name`` or ``name:arg1,arg2`` token.

        Only the first ``:`` separates name from parameters, so parameter
        values (times, patterns) may contain colons.

        Args:
            raw: Rule token string

        Returns:
            Parsed RuleToken

        Raises:
            ValueError: If the token is not a string or has an empty name
        """
        if not isinstance(raw, str):
            raise ValueError(f"Rule token must be a string, got {type(raw).__name__}")

        name, separator, rest = raw.partition(":")
        name = name.strip()
        if not name:
            raise ValueError(f"Rule token '{raw}' has no rule name")

        params: tuple[str, ...] = ()
        if separator:
            if name.lower() in PATTERN_RULES:
                params = (rest,)
            else:
                params = tuple(rest.split(","))

        return cls(raw=raw, name=name, params=params)

    class Config:
        frozen = True

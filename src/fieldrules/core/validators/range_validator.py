"""
Range and literal rules: between, between_exclusive, max, min, equal, not_equal.

``between`` compares numerically and requires a numeric value; the other
rules use the permissive comparator on the raw values.
"""

from collections.abc import Sequence
from typing import Any

from fieldrules.core.messages import CONFIG_MESSAGES, MESSAGES
from fieldrules.core.models import Verdict

from .base_validator import RuleConfigurationError, require_params, rule
from .coercion import format_number, to_number
from .comparator import compare


@rule("between")
def between(value: Any, params: Sequence[str], *_: Any) -> Verdict:
    """Inclusive numeric range ``between:min,max``."""
    number = to_number(value)
    if number is None:
        return Verdict.fail(MESSAGES["between_number"])
    require_params(params, 2, CONFIG_MESSAGES["value_range_missing"])

    minimum, maximum = to_number(params[0]), to_number(params[1])
    if minimum is None or maximum is None:
        raise RuleConfigurationError(CONFIG_MESSAGES["value_range_invalid"])

    if minimum <= number <= maximum:
        return Verdict.passed()
    return Verdict.fail(
        MESSAGES["between"].format(min=format_number(minimum), max=format_number(maximum))
    )


@rule("between_exclusive")
def between_exclusive(value: Any, params: Sequence[str], *_: Any) -> Verdict:
    """Exclusive range ``between_exclusive:min,max`` on the raw value."""
    if len(params) != 2:
        raise RuleConfigurationError(CONFIG_MESSAGES["value_range_missing"])
    minimum, maximum = params
    if compare(value, ">", minimum) and compare(value, "<", maximum):
        return Verdict.passed()
    return Verdict.fail(MESSAGES["between_exclusive"].format(min=minimum, max=maximum))


def _literal_rule(name: str, operator: str):
    """Register a rule comparing the value with a single literal parameter."""

    def check(value: Any, params: Sequence[str], *_: Any) -> Verdict:
        require_params(params, 1, CONFIG_MESSAGES["expected_value_missing"])
        expected = params[0]
        if compare(value, operator, expected):
            return Verdict.passed()
        return Verdict.fail(MESSAGES[name].format(value=expected))

    check.__name__ = name
    return rule(name)(check)


max_value = _literal_rule("max", "<=")
min_value = _literal_rule("min", ">=")
equal = _literal_rule("equal", "==")
not_equal = _literal_rule("not_equal", "!=")

"""
Presence rules: required, required_if, accepted/declined and their
conditional forms, boolean, plus the nullable/exclude modifiers.
"""

from collections.abc import Mapping, Sequence
from typing import Any, NamedTuple

from fieldrules.core.messages import CONFIG_MESSAGES, INVALID_OPERATOR, MESSAGES, OPERATORS
from fieldrules.core.models import Verdict

from .base_validator import RuleConfigurationError, rule
from .coercion import is_absent
from .comparator import compare, is_operator

ACCEPTED_TOKENS = frozenset({"true", "yes", "1", "y", "t", "on"})
DECLINED_TOKENS = frozenset({"false", "no", "0", "n", "f", "off"})


class Condition(NamedTuple):
    """Resolved ``other[,operator][,expected]`` parameters of a conditional rule."""

    other: str
    operator: str | None
    expected: str | None

    def holds(self, request: Mapping[str, Any]) -> bool:
        if self.operator is None:
            return not is_absent(request.get(self.other))
        return compare(request.get(self.other), self.operator, self.expected)

    def message(self, prefix: str) -> str:
        """Failure message for a conditional rule family (required, accepted, declined)."""
        if self.operator is None:
            return MESSAGES[f"{prefix}_if_present"].format(other=self.other)
        return MESSAGES[f"{prefix}_if"].format(
            other=self.other, operator=OPERATORS[self.operator], expected=self.expected
        )


def parse_condition(params: Sequence[str]) -> Condition:
    """
    Resolve conditional parameters.

    One param means "if the other field is present", two params compare the
    other field with ``==`` against the expected value, three params name
    the operator explicitly.

    Raises:
        RuleConfigurationError: If the other field is missing or the operator is unknown
    """
    other = params[0].strip() if params else ""
    operator = params[1].strip() if len(params) > 1 else ""
    expected = params[2] if len(params) > 2 else ""

    if not other:
        raise RuleConfigurationError(CONFIG_MESSAGES["other_field_missing"])
    if not operator and not expected:
        return Condition(other, None, None)
    if operator and not expected:
        operator, expected = "==", operator
    if not is_operator(operator):
        raise RuleConfigurationError(INVALID_OPERATOR)
    return Condition(other, operator, expected)


def _is_accepted(value: Any) -> bool:
    return isinstance(value, str) and value.lower() in ACCEPTED_TOKENS


def _is_declined(value: Any) -> bool:
    # Any string that is not an "accepted" token counts as declined
    return isinstance(value, str) and value.lower() not in ACCEPTED_TOKENS


@rule("required")
def required(value: Any, *_: Any) -> Verdict:
    if is_absent(value):
        return Verdict.fail(MESSAGES["required"])
    return Verdict.passed()


@rule("required_if")
def required_if(value: Any, params: Sequence[str], request: Mapping[str, Any], field: str) -> Verdict:
    condition = parse_condition(params)
    if condition.holds(request) and is_absent(value):
        return Verdict.fail(condition.message("required"))
    return Verdict.passed()


@rule("accepted")
def accepted(value: Any, *_: Any) -> Verdict:
    if _is_accepted(value):
        return Verdict.passed()
    return Verdict.fail(MESSAGES["accepted"])


@rule("accepted_if")
def accepted_if(value: Any, params: Sequence[str], request: Mapping[str, Any], field: str) -> Verdict:
    condition = parse_condition(params)
    if condition.holds(request) and not _is_accepted(value):
        return Verdict.fail(condition.message("accepted"))
    return Verdict.passed()


@rule("declined")
def declined(value: Any, *_: Any) -> Verdict:
    if _is_declined(value):
        return Verdict.passed()
    return Verdict.fail(MESSAGES["declined"])


@rule("declined_if")
def declined_if(value: Any, params: Sequence[str], request: Mapping[str, Any], field: str) -> Verdict:
    condition = parse_condition(params)
    if condition.holds(request) and not _is_declined(value):
        return Verdict.fail(condition.message("declined"))
    return Verdict.passed()


@rule("boolean")
def boolean(value: Any, *_: Any) -> Verdict:
    if isinstance(value, str) and value.lower() in ACCEPTED_TOKENS | DECLINED_TOKENS:
        return Verdict.passed()
    return Verdict.fail(MESSAGES["boolean"])


@rule("nullable")
def nullable(value: Any, *_: Any) -> Verdict:
    """Modifier consumed by the field orchestrator; never fails on its own."""
    return Verdict.passed()


@rule("exclude")
def exclude(value: Any, *_: Any) -> Verdict:
    """Modifier that keeps a field out of the successes list; never fails."""
    return Verdict.passed()

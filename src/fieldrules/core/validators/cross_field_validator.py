"""
Cross-field rules: comparisons against other fields, different, confirmed,
in_array and not_in_array.

These rules read other fields from the full request. A referenced field
that is absent from the request fails the rule with a message naming it.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from fieldrules.core.messages import CONFIG_MESSAGES, MESSAGES
from fieldrules.core.models import Verdict

from .base_validator import RuleConfigurationError, require_params, rule
from .coercion import is_absent, parse_json_array
from .comparator import compare


def _field_comparison_rule(name: str, operator: str):
    """Register a rule comparing the value with another field's current value."""

    def check(value: Any, params: Sequence[str], request: Mapping[str, Any], field: str) -> Verdict:
        require_params(params, 1, CONFIG_MESSAGES["other_field_missing"])
        other = params[0].strip()
        target = request.get(other)
        if is_absent(target):
            return Verdict.fail(CONFIG_MESSAGES["other_field_absent"].format(other=other))
        if compare(value, operator, target):
            return Verdict.passed()
        return Verdict.fail(MESSAGES[name].format(other=other))

    check.__name__ = name
    return rule(name)(check)


greater_than = _field_comparison_rule("greater_than", ">")
greater_than_or_equal = _field_comparison_rule("greater_than_or_equal", ">=")
less_than = _field_comparison_rule("less_than", "<")
less_than_or_equal = _field_comparison_rule("less_than_or_equal", "<=")


@rule("different")
def different(value: Any, params: Sequence[str], request: Mapping[str, Any], field: str) -> Verdict:
    """Value must differ from every listed field, each of which must be present."""
    require_params(params, 1, CONFIG_MESSAGES["other_field_missing"])
    for other in (p.strip() for p in params):
        target = request.get(other)
        if is_absent(target):
            return Verdict.fail(CONFIG_MESSAGES["other_field_absent_named"].format(other=other))
        if value == target:
            return Verdict.fail(MESSAGES["different"].format(other=other))
    return Verdict.passed()


@rule("confirmed")
def confirmed(value: Any, params: Sequence[str], request: Mapping[str, Any], field: str) -> Verdict:
    """
    Value must equal its confirmation field.

    Without parameters the confirmation field is ``<field>_confirmation``;
    ``confirmed:other`` names it explicitly.
    """
    confirmation = params[0].strip() if params and params[0].strip() else f"{field}_confirmation"
    target = request.get(confirmation)
    if is_absent(target):
        return Verdict.fail(CONFIG_MESSAGES["confirmation_absent"].format(other=confirmation))
    if value == target:
        return Verdict.passed()
    return Verdict.fail(MESSAGES["confirmed"])


def _target_array(params: Sequence[str], request: Mapping[str, Any]) -> tuple[str, list]:
    require_params(params, 1, CONFIG_MESSAGES["target_field_missing"])
    other = params[0].strip()
    raw = request.get(other)
    if is_absent(raw):
        raise RuleConfigurationError(CONFIG_MESSAGES["target_field_absent"].format(other=other))
    items = parse_json_array(raw)
    if items is None:
        raise RuleConfigurationError(CONFIG_MESSAGES["target_field_not_array"].format(other=other))
    return other, items


def _contains(items: list, value: Any) -> bool:
    return any(
        item == value if isinstance(item, (list, dict)) else compare(item, "==", value)
        for item in items
    )


@rule("in_array")
def in_array(value: Any, params: Sequence[str], request: Mapping[str, Any], field: str) -> Verdict:
    other, items = _target_array(params, request)
    if _contains(items, value):
        return Verdict.passed()
    return Verdict.fail(MESSAGES["in_array"].format(other=other))


@rule("not_in_array")
def not_in_array(value: Any, params: Sequence[str], request: Mapping[str, Any], field: str) -> Verdict:
    other, items = _target_array(params, request)
    if _contains(items, value):
        return Verdict.fail(MESSAGES["not_in_array"].format(other=other))
    return Verdict.passed()

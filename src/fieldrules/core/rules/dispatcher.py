"""
Rule dispatcher: maps a rule name to its registered implementation.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from fieldrules.core.messages import CONFIG_MESSAGES
from fieldrules.core.models import Verdict
from fieldrules.core.validators import RULE_REGISTRY


def is_known_rule(name: str) -> bool:
    """Whether a rule name (any case) has an implementation."""
    return name.lower() in RULE_REGISTRY


def dispatch(
    rule_name: str,
    value: Any,
    params: Sequence[str] = (),
    request: Mapping[str, Any] | None = None,
    field: str = "",
) -> Verdict:
    """
    Evaluate a rule by name.

    Args:
        rule_name: Rule name, matched case-insensitively
        value: Value of the field under validation
        params: Rule parameters as strings
        request: Full request (for cross-field rules)
        field: Name of the field under validation

    Returns:
        The rule's Verdict, or a failing Verdict naming the rule when no
        rule with that name exists
    """
    func = RULE_REGISTRY.get(rule_name.lower())
    if func is None:
        return Verdict.fail(CONFIG_MESSAGES["rule_not_found"].format(name=rule_name))
    return func(value, params, request, field)

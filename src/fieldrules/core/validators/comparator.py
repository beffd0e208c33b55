"""
Relational comparison between two raw values.

Values that both look numeric are compared as numbers; anything else is
compared as text. Used by every conditional and cross-field rule.
"""

import operator as _op
from typing import Any, Callable

from .coercion import as_text, to_number

_OPERATIONS: dict[str, Callable[[Any, Any], bool]] = {
    "==": _op.eq,
    "!=": _op.ne,
    "<": _op.lt,
    ">": _op.gt,
    "<=": _op.le,
    ">=": _op.ge,
}


def is_operator(token: str) -> bool:
    """Whether a token is one of the six supported comparison operators."""
    return token in _OPERATIONS


def compare(lhs: Any, operator: str, rhs: Any) -> bool:
    """
    Evaluate ``lhs <operator> rhs`` with permissive coercion.

    Args:
        lhs: Left-hand raw value (usually another field's value)
        operator: One of ==, !=, <, >, <=, >=
        rhs: Right-hand raw value (usually a rule parameter)

    Returns:
        Result of the comparison; False for an unknown operator or when
        the values have no common ordering. Never raises.
    """
    operation = _OPERATIONS.get(operator)
    if operation is None:
        return False

    left_number, right_number = to_number(lhs), to_number(rhs)
    if left_number is not None and right_number is not None:
        return operation(left_number, right_number)

    left_text, right_text = as_text(lhs), as_text(rhs)
    if left_text is not None and right_text is not None:
        return operation(left_text, right_text)

    # None or container on one side: only (in)equality is meaningful
    if operator == "==":
        return lhs == rhs
    if operator == "!=":
        return lhs != rhs
    return False

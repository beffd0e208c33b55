"""
Type rules: array, distinct, numeric, integer and decimal.

Array-shaped fields are strings holding serialized JSON; ``array`` and
``distinct`` decode the string value rather than accepting native lists.
"""

import json
import re
from collections.abc import Sequence
from decimal import Decimal, InvalidOperation
from typing import Any

from fieldrules.core.messages import CONFIG_MESSAGES, MESSAGES
from fieldrules.core.models import Verdict

from .base_validator import RuleConfigurationError, require_params, rule
from .coercion import parse_json_array, to_number

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")


def _distinct_key(item: Any) -> str:
    """Equality key for JSON values: numbers compare by value, containers by content."""
    if isinstance(item, (int, float)) and not isinstance(item, bool):
        return f"number:{float(item)!r}"
    return json.dumps(item, sort_keys=True)


@rule("array")
def array(value: Any, *_: Any) -> Verdict:
    if parse_json_array(value) is None:
        return Verdict.fail(MESSAGES["array"])
    return Verdict.passed()


@rule("distinct")
def distinct(value: Any, *_: Any) -> Verdict:
    items = parse_json_array(value)
    if items is None:
        return Verdict.fail(MESSAGES["array"])

    keys = [_distinct_key(item) for item in items]
    if len(set(keys)) != len(keys):
        return Verdict.fail(MESSAGES["distinct"])
    return Verdict.passed()


@rule("numeric")
def numeric(value: Any, *_: Any) -> Verdict:
    if to_number(value) is None:
        return Verdict.fail(MESSAGES["numeric"])
    return Verdict.passed()


@rule("integer")
def integer(value: Any, *_: Any) -> Verdict:
    """Accept whole numbers: ints, integral floats and digit strings."""
    if isinstance(value, bool):
        return Verdict.fail(MESSAGES["integer"])
    if isinstance(value, int):
        return Verdict.passed()
    if isinstance(value, float) and value.is_integer():
        return Verdict.passed()
    if isinstance(value, str) and _INTEGER_PATTERN.fullmatch(value.strip()):
        return Verdict.passed()
    return Verdict.fail(MESSAGES["integer"])


def _digit_bound(param: str) -> int:
    try:
        return int(param.strip())
    except ValueError:
        raise RuleConfigurationError(CONFIG_MESSAGES["decimal_digits_invalid"])


def _fraction_digits(value: Any) -> int:
    """Digits after the decimal point once exponent notation is expanded."""
    try:
        exponent = Decimal(str(value).strip()).as_tuple().exponent
    except InvalidOperation:
        return 0
    # Infinity and radix literals have no fractional part
    return -exponent if isinstance(exponent, int) and exponent < 0 else 0


@rule("decimal")
def decimal(value: Any, params: Sequence[str], *_: Any) -> Verdict:
    """
    Check the number of digits after the decimal point.

    ``decimal:2`` allows at most two fractional digits; ``decimal:1,3``
    requires between one and three.
    """
    require_params(params, 1, CONFIG_MESSAGES["decimal_digits_missing"])
    if to_number(value) is None:
        return Verdict.fail(MESSAGES["decimal"])

    digits = _fraction_digits(value)

    if len(params) == 1:
        maximum = _digit_bound(params[0])
        if digits > maximum:
            return Verdict.fail(MESSAGES["decimal_max"].format(max=maximum))
        return Verdict.passed()

    minimum, maximum = _digit_bound(params[0]), _digit_bound(params[1])
    if digits < minimum or digits > maximum:
        return Verdict.fail(MESSAGES["decimal_range"].format(min=minimum, max=maximum))
    return Verdict.passed()

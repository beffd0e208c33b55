"""
Date rules: date, after/before comparisons, date_equals and date ranges.

Dates are parsed with python-dateutil; a value that does not parse fails
the rule, a reference date that does not parse is a configuration failure.
"""

import operator
from collections.abc import Sequence
from datetime import datetime
from typing import Any, Callable

from fieldrules.core.messages import CONFIG_MESSAGES, MESSAGES
from fieldrules.core.models import Verdict

from .base_validator import RuleConfigurationError, require_params, rule
from .coercion import parse_date


def _reference(param: str) -> datetime:
    parsed = parse_date(param)
    if parsed is None:
        raise RuleConfigurationError(CONFIG_MESSAGES["expected_date_invalid"].format(date=param))
    return parsed


@rule("date")
def date(value: Any, *_: Any) -> Verdict:
    if parse_date(value) is None:
        return Verdict.fail(MESSAGES["date"])
    return Verdict.passed()


def _comparison_rule(name: str, relation: Callable[[datetime, datetime], bool]):
    """Register a rule comparing the value with a single reference date."""

    def check(value: Any, params: Sequence[str], *_: Any) -> Verdict:
        require_params(params, 1, CONFIG_MESSAGES["expected_date_missing"])
        expected = params[0]
        reference = _reference(expected)
        parsed = parse_date(value)
        if parsed is not None and relation(parsed, reference):
            return Verdict.passed()
        return Verdict.fail(MESSAGES[name].format(date=expected))

    check.__name__ = name
    return rule(name)(check)


after = _comparison_rule("after", operator.gt)
after_or_equal = _comparison_rule("after_or_equal", operator.ge)
before = _comparison_rule("before", operator.lt)
before_or_equal = _comparison_rule("before_or_equal", operator.le)
date_equals = _comparison_rule("date_equals", operator.eq)


def _date_range(params: Sequence[str]) -> tuple[datetime, datetime]:
    if len(params) != 2:
        raise RuleConfigurationError(CONFIG_MESSAGES["date_range_missing"])
    require_params(params, 2, CONFIG_MESSAGES["date_range_missing"])
    return _reference(params[0]), _reference(params[1])


@rule("between_date")
def between_date(value: Any, params: Sequence[str], *_: Any) -> Verdict:
    earliest, latest = _date_range(params)
    parsed = parse_date(value)
    if parsed is not None and earliest <= parsed <= latest:
        return Verdict.passed()
    return Verdict.fail(MESSAGES["between_date"].format(min=params[0], max=params[1]))


@rule("between_date_exclusive")
def between_date_exclusive(value: Any, params: Sequence[str], *_: Any) -> Verdict:
    earliest, latest = _date_range(params)
    parsed = parse_date(value)
    if parsed is not None and earliest < parsed < latest:
        return Verdict.passed()
    return Verdict.fail(MESSAGES["between_date_exclusive"].format(min=params[0], max=params[1]))

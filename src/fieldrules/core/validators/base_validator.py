"""
Base rule interface and registry for all validation rules.

Every rule is a plain function registered with the ``@rule`` decorator.
The decorator normalizes arguments and isolates faults: an exception raised
inside a rule becomes a failing Verdict for that rule only.
"""

import functools
from collections.abc import Mapping, Sequence
from typing import Any, Callable

from fieldrules.core.models import Verdict
from fieldrules.core.messages import UNEXPECTED_ERROR
from fieldrules.observability.logger import get_logger
from fieldrules.observability.metrics import record_rule_fault

logger = get_logger(__name__)

# (value, params, request, field) -> Verdict
RuleFunc = Callable[[Any, Sequence[str], Mapping[str, Any], str], Verdict]

RULE_REGISTRY: dict[str, RuleFunc] = {}


class RuleConfigurationError(Exception):
    """
    Raised inside a rule when its parameters cannot be used.

    The message is reported as that rule's failure for the field, so
    configuration mistakes surface in the report instead of crashing the run.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


def require_params(params: Sequence[str], count: int, message: str) -> None:
    """Raise RuleConfigurationError unless at least `count` non-blank params are given."""
    if len(params) < count or any(not p.strip() for p in params[:count]):
        raise RuleConfigurationError(message)


def rule(name: str) -> Callable[[RuleFunc], RuleFunc]:
    """
    Register a function as the implementation of a named rule.

    The registered callable accepts ``(value, params=(), request=None, field="")``
    so rules can be called directly with only the arguments they need.

    Args:
        name: Rule name as written in rule tokens (lower case)

    Raises:
        ValueError: If a rule with the same name is already registered
    """

    def decorator(func: RuleFunc) -> RuleFunc:
        if name in RULE_REGISTRY:
            raise ValueError(f"Rule '{name}' is already registered")

        @functools.wraps(func)
        def evaluate(
            value: Any,
            params: Sequence[str] = (),
            request: Mapping[str, Any] | None = None,
            field: str = "",
        ) -> Verdict:
            try:
                return func(value, tuple(params), request if request is not None else {}, field)
            except RuleConfigurationError as e:
                logger.debug("Rule misconfigured", extra={"rule": name, "field": field, "reason": e.message})
                return Verdict.fail(e.message)
            except Exception:
                logger.exception(
                    "Rule raised during evaluation",
                    extra={"rule": name, "field": field},
                )
                record_rule_fault(name)
                return Verdict.fail(UNEXPECTED_ERROR)

        RULE_REGISTRY[name] = evaluate
        return evaluate

    return decorator


"""
Rule engine for orchestrating validation rules on request fields.

The rule engine takes a rule spec (field -> rule tokens) and optional custom
error messages, evaluates every declared field of a request and folds the
per-field outcomes into a ValidationReport.
"""

from collections import Counter
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from fieldrules.core.messages import CONFIG_MESSAGES, UNEXPECTED_ERROR, format_message
from fieldrules.core.models import (
    FieldOutcome,
    RuleSet,
    RuleToken,
    ValidationFailure,
    ValidationOutcome,
    ValidationReport,
    Verdict,
)
from fieldrules.core.validators.coercion import is_absent
from fieldrules.observability.logger import get_logger
from fieldrules.observability.metrics import (
    record_rule_failure,
    record_validation_run,
    track_duration,
    validation_duration_seconds,
)

from .dispatcher import dispatch, is_known_rule

logger = get_logger(__name__)


def _rule_name(raw: str) -> str:
    """Lower-cased rule name of a token, empty when the token names no rule."""
    return raw.partition(":")[0].strip().lower()


def _parse_token(raw: str) -> RuleToken | None:
    try:
        return RuleToken.parse(raw)
    except ValueError:
        logger.debug("Unparseable rule token", extra={"token": raw})
        return None


def evaluate_field(
    field: str,
    raw_tokens: Sequence[str],
    request: Mapping[str, Any],
    overrides: Mapping[str, str] | None = None,
) -> FieldOutcome:
    """
    Run one field's rules.

    Order of evaluation:
    1. ``required`` (or else the first ``required_if``) runs first as a gate;
       a gate failure is the field's only message.
    2. ``nullable`` with the key present and holding "" or None passes the
       field without running anything else.
    3. An absent value that is not required skips the field.
    4. Otherwise every rule runs and every failure is collected.

    Args:
        field: Field name
        raw_tokens: Rule tokens declared for the field, in order
        request: Full request mapping
        overrides: Rule name -> custom failure message for this field

    Returns:
        FieldOutcome for the field
    """
    overrides = overrides or {}
    tokens = [_parse_token(raw) for raw in raw_tokens]
    keys = {token.key for token in tokens if token is not None}
    value = request.get(field)

    def failure_message(token: RuleToken, verdict: Verdict) -> str:
        record_rule_failure(token.key)
        override = overrides.get(token.name, overrides.get(token.key))
        if override is not None:
            return override
        return format_message(verdict.message, field)

    gate = next((t for t in tokens if t is not None and t.key == "required"), None)
    if gate is None:
        gate = next((t for t in tokens if t is not None and t.key == "required_if"), None)
    if gate is not None:
        verdict = dispatch(gate.name, value, gate.params, request, field)
        if not verdict.ok:
            return FieldOutcome(field=field, status="failed", messages=(failure_message(gate, verdict),))

    excluded = "exclude" in keys
    if "nullable" in keys and field in request and (value is None or value == ""):
        return FieldOutcome(field=field, status="excluded" if excluded else "passed")

    if "required" not in keys and is_absent(value):
        return FieldOutcome(field=field, status="skipped")

    messages = []
    for raw, token in zip(raw_tokens, tokens):
        if token is None:
            name = _rule_name(raw)
            record_rule_failure(name)
            messages.append(CONFIG_MESSAGES["rule_not_found"].format(name=name))
            continue
        verdict = dispatch(token.name, value, token.params, request, field)
        if not verdict.ok:
            messages.append(failure_message(token, verdict))

    if messages:
        return FieldOutcome(field=field, status="failed", messages=tuple(messages))
    return FieldOutcome(field=field, status="excluded" if excluded else "passed")


def build_report(outcomes: Sequence[FieldOutcome]) -> ValidationReport:
    """Fold per-field outcomes into a report."""
    errors = {o.field: list(o.messages) for o in outcomes if o.status == "failed"}
    successes = [o.field for o in outcomes if o.status == "passed"]
    return ValidationReport(ok=not errors, errors=errors, successes=successes)


class RuleEngine:
    """
    Orchestrates validation rules on request fields.

    Holds a rule spec and custom errors and applies them to requests,
    collecting every field's failures and successes.
    """

    def __init__(
        self,
        rules: Mapping[str, Sequence[str]],
        custom_errors: Mapping[str, Mapping[str, str]] | None = None,
    ):
        """
        Initialize the rule engine.

        Args:
            rules: Field name -> ordered rule tokens, e.g. {"age": ["required", "between:18,120"]}
            custom_errors: Field name -> rule name -> override message
        """
        self.rules = rules
        self.custom_errors = {} if custom_errors is None else custom_errors

    @classmethod
    def from_rule_set(cls, rule_set: RuleSet) -> "RuleEngine":
        return cls(rule_set.rules, rule_set.messages)

    @classmethod
    def from_config(cls, config_path: str | Path) -> "RuleEngine":
        """Build an engine from a YAML rule file (see RuleConfigLoader)."""
        from .rule_config import RuleConfigLoader

        return cls.from_rule_set(RuleConfigLoader(config_path).load_rule_set())

    def _structure_error(self, request: Any) -> str | None:
        """Describe the first structural problem with the inputs, if any."""
        if not isinstance(request, Mapping):
            return "Request body should be an object"
        if not isinstance(self.rules, Mapping):
            return "Validation rules should be an object"
        if not isinstance(self.custom_errors, Mapping):
            return "Custom errors should be an object"

        for field, tokens in self.rules.items():
            if isinstance(tokens, (str, bytes)) or not isinstance(tokens, Sequence):
                return "Validation rules should be an array"
            if not all(isinstance(token, str) and token.strip() for token in tokens):
                return f"Validation rules for {field} should be non-empty strings"

        for field, overrides in self.custom_errors.items():
            if not isinstance(overrides, Mapping):
                return f"Custom errors for {field} should be an object"
            if not all(isinstance(text, str) for text in overrides.values()):
                return f"Custom errors for {field} should be strings"
        return None

    def validate(self, request: Any) -> ValidationOutcome:
        """
        Validate a request against all rules.

        Args:
            request: Field name -> raw value

        Returns:
            ValidationReport when validation ran, ValidationFailure when the
            inputs were malformed or the run hit an unexpected fault
        """
        try:
            with track_duration(validation_duration_seconds):
                problem = self._structure_error(request)
                if problem is not None:
                    logger.warning("Validation request rejected", extra={"reason": problem})
                    record_validation_run("error")
                    return ValidationFailure(message=problem)

                outcomes = []
                for field, tokens in self.rules.items():
                    outcome = evaluate_field(field, tokens, request, self.custom_errors.get(field))
                    logger.debug(
                        "Field evaluated",
                        extra={"field": field, "status": outcome.status, "failures": len(outcome.messages)},
                    )
                    outcomes.append(outcome)

                report = build_report(outcomes)
        except Exception as e:
            logger.exception("Validation run failed")
            record_validation_run("error")
            return ValidationFailure(message=str(e) or UNEXPECTED_ERROR)

        record_validation_run("passed" if report.ok else "failed")
        logger.info(
            "Validation completed",
            extra={
                "passed": report.ok,
                "failed_fields": len(report.errors),
                "successes": len(report.successes),
            },
        )
        return report

    def validate_batch(self, requests: Sequence[Any]) -> list[ValidationOutcome]:
        """
        Validate a batch of requests with the same rules.

        Args:
            requests: List of request mappings

        Returns:
            List of outcomes, one per request
        """
        return [self.validate(request) for request in requests]

    def get_rule_summary(self) -> dict[str, Any]:
        """
        Get summary of loaded rules.

        Returns:
            Dictionary with field and rule counts, rule usage by name and
            any rule names with no implementation
        """
        names = [_rule_name(token) for tokens in self.rules.values() for token in tokens]
        return {
            "total_fields": len(self.rules),
            "total_rules": len(names),
            "rules_by_name": dict(Counter(names)),
            "unknown_rules": sorted({name for name in names if not is_known_rule(name)}),
        }


def validate(
    request: Any,
    rules: Mapping[str, Sequence[str]],
    custom_errors: Mapping[str, Mapping[str, str]] | None = None,
) -> ValidationOutcome:
    """
    Validate a request against a rule spec.

    Example:
        >>> validate({"age": "15"}, {"age": ["required", "between:18,120"]}).ok
        False

    Args:
        request: Field name -> raw value
        rules: Field name -> ordered rule tokens
        custom_errors: Field name -> rule name -> override message

    Returns:
        ValidationReport or ValidationFailure; never raises
    """
    return RuleEngine(rules, custom_errors).validate(request)

"""
fieldrules: declarative request-field validation.

Example:
    >>> from fieldrules import validate
    >>> report = validate(
    ...     {"email": "a@b.com", "age": "15"},
    ...     {"email": ["required", "email"], "age": ["required", "between:18,120"]},
    ... )
    >>> report.ok, report.errors["age"]
    (False, ['The age must be between 18 and 120'])
"""

from fieldrules.core.models import (
    RuleSet,
    RuleToken,
    ValidationFailure,
    ValidationOutcome,
    ValidationReport,
    Verdict,
)
from fieldrules.core.rules import RuleConfigLoader, RuleEngine, RuleSetBuilder, dispatch, validate

__version__ = "0.1.0"

__all__ = [
    "validate",
    "dispatch",
    "RuleEngine",
    "RuleConfigLoader",
    "RuleSetBuilder",
    "RuleSet",
    "RuleToken",
    "Verdict",
    "ValidationReport",
    "ValidationFailure",
    "ValidationOutcome",
]

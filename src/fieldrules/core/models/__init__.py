"""
Core data models for the field validation engine.

All models use Pydantic for runtime validation and type safety.
"""

from .field_outcome import FieldOutcome
from .rule_set import RuleSet
from .rule_token import RuleToken
from .validation_report import ValidationFailure, ValidationOutcome, ValidationReport
from .verdict import Verdict

__all__ = [
    "Verdict",
    "RuleToken",
    "RuleSet",
    "FieldOutcome",
    "ValidationReport",
    "ValidationFailure",
    "ValidationOutcome",
]

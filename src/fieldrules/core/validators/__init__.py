"""
Validation rule library.

Importing this package registers every rule in RULE_REGISTRY. Rules cover
presence, types, formats, dates, ranges and cross-field relations.
"""

from . import cross_field_validator, date_validator, presence_validator, range_validator, regex_validator, type_validator
from .base_validator import RULE_REGISTRY, RuleConfigurationError, RuleFunc, rule
from .comparator import compare, is_operator

__all__ = [
    "RULE_REGISTRY",
    "RuleConfigurationError",
    "RuleFunc",
    "rule",
    "compare",
    "is_operator",
    "cross_field_validator",
    "date_validator",
    "presence_validator",
    "range_validator",
    "regex_validator",
    "type_validator",
]

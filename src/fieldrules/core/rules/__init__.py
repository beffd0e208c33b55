"""
Validation rule engine, dispatcher and configuration management.
"""

from .dispatcher import dispatch, is_known_rule
from .rule_config import RuleConfigLoader, RuleSetBuilder
from .rule_engine import RuleEngine, build_report, evaluate_field, validate

__all__ = [
    "RuleEngine",
    "RuleConfigLoader",
    "RuleSetBuilder",
    "dispatch",
    "is_known_rule",
    "evaluate_field",
    "build_report",
    "validate",
]

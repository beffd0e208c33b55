"""
Rule configuration management.

Loads rule specs and custom error messages from YAML files and provides
a builder for assembling them programmatically.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from fieldrules.core.models import RuleSet, RuleToken


class RuleConfigLoader:
    """
    Loads validation rules from YAML configuration files.

    Expected YAML format:
    ```yaml
    rules:
      email:
        - required
        - email
      age:
        - nullable
        - integer
        - between:18,120

    messages:
      email:
        required: "We need your email address"
    ```
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the rule config loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Rule configuration file not found: {config_path}")

    def load_rule_set(self) -> RuleSet:
        """
        Load and parse the rule set from the YAML file.

        Returns:
            RuleSet with rules and custom messages

        Raises:
            ValueError: If YAML is invalid or missing required sections
        """
        with open(self.config_path) as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {self.config_path}: {e}")

        if not isinstance(config, dict) or "rules" not in config:
            raise ValueError("Configuration file must contain 'rules' section")

        rules = {}
        for field_name, field_rules in (config["rules"] or {}).items():
            if not isinstance(field_rules, list):
                raise ValueError(f"Rules for field '{field_name}' must be a list")
            rules[str(field_name)] = [self._parse_rule(field_name, rule_def) for rule_def in field_rules]

        messages = config.get("messages") or {}
        if not isinstance(messages, dict):
            raise ValueError("'messages' section must map fields to rule messages")

        try:
            return RuleSet(rules=rules, messages=messages)
        except ValidationError as e:
            raise ValueError(f"Invalid rule configuration in {self.config_path}: {e}")

    def _parse_rule(self, field_name: str, rule_def: Any) -> str:
        """
        Normalize a single rule definition to a rule token.

        Accepts either a token string (``between:1,10``) or a mapping with
        ``type`` and optional ``params`` list.

        Raises:
            ValueError: If rule definition is invalid
        """
        if isinstance(rule_def, str):
            RuleToken.parse(rule_def)
            return rule_def

        if isinstance(rule_def, dict):
            if "type" not in rule_def:
                raise ValueError(f"Rule for field '{field_name}' is missing 'type'")
            params = rule_def.get("params") or []
            if not isinstance(params, list):
                params = [params]
            token = str(rule_def["type"])
            if params:
                token += ":" + ",".join(str(p) for p in params)
            return token

        raise ValueError(f"Rule for field '{field_name}' must be a string or a mapping, got {type(rule_def).__name__}")


class RuleSetBuilder:
    """
    Programmatically build rule sets (for testing or dynamic rules).
    """

    def __init__(self):
        """Initialize empty rule set."""
        self.rules: dict[str, list[str]] = {}
        self.messages: dict[str, dict[str, str]] = {}

    def add(self, field_name: str, *tokens: str) -> "RuleSetBuilder":
        """Append rule tokens to a field."""
        self.rules.setdefault(field_name, []).extend(tokens)
        return self

    def add_required(self, field_name: str, *tokens: str) -> "RuleSetBuilder":
        """Declare a required field followed by further rules."""
        return self.add(field_name, "required", *tokens)

    def add_between(self, field_name: str, min_value: float, max_value: float) -> "RuleSetBuilder":
        """Add a numeric range rule."""
        return self.add(field_name, f"between:{min_value},{max_value}")

    def message(self, field_name: str, rule_name: str, text: str) -> "RuleSetBuilder":
        """Override the failure message of one rule on one field."""
        self.messages.setdefault(field_name, {})[rule_name] = text
        return self

    def build(self) -> RuleSet:
        """Build and return the rule set."""
        return RuleSet(
            rules={field: list(tokens) for field, tokens in self.rules.items()},
            messages={field: dict(texts) for field, texts in self.messages.items()},
        )

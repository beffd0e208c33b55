"""
Pytest configuration and fixtures for fieldrules tests

This module provides shared fixtures for unit and integration tests.
"""
from pathlib import Path

import pytest


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual rules and components"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that exercise config files and the CLI end to end"
    )


# =======================
# RULE FIXTURES
# =======================

@pytest.fixture
def signup_rules() -> dict[str, list[str]]:
    """Rule spec for a typical signup request"""
    return {
        "name": ["required", "alpha_dash"],
        "email": ["required", "email"],
        "password": ["required", "confirmed"],
        "age": ["nullable", "integer", "between:18,120"],
        "plan": ["required", "regex:^(basic|premium)$"],
        "seats": ["required_if:plan,premium", "integer"],
    }


@pytest.fixture
def valid_signup() -> dict[str, str]:
    """Signup request that passes every rule in signup_rules"""
    return {
        "name": "jane_doe",
        "email": "jane@example.com",
        "password": "s3cret",
        "password_confirmation": "s3cret",
        "age": "34",
        "plan": "premium",
        "seats": "5",
    }


RULES_YAML = """
rules:
  email:
    - required
    - email
  age:
    - nullable
    - type: between
      params: [18, 120]
  tags:
    - array
    - distinct

messages:
  email:
    required: "We need your email address"
"""


@pytest.fixture
def rules_file(tmp_path) -> Path:
    """YAML rule file with rules and one custom message"""
    path = tmp_path / "rules.yaml"
    path.write_text(RULES_YAML)
    return path

"""
Unit tests for Pydantic data models.

Tests verdict and report invariants and rule token parsing.
"""

import pytest
from pydantic import ValidationError

from fieldrules.core.models import (
    FieldOutcome,
    RuleSet,
    RuleToken,
    ValidationFailure,
    ValidationReport,
    Verdict,
)


class TestVerdict:
    """Tests for Verdict model"""

    def test_passed_has_empty_message(self):
        verdict = Verdict.passed()
        assert verdict.ok is True
        assert verdict.message == ""
        assert bool(verdict) is True

    def test_fail_keeps_message(self):
        verdict = Verdict.fail("The :attribute is required")
        assert verdict.ok is False
        assert verdict.message == "The :attribute is required"
        assert bool(verdict) is False

    def test_passing_verdict_with_message_rejected(self):
        """Test that ok=True with a message raises ValidationError"""
        with pytest.raises(ValidationError):
            Verdict(ok=True, message="unexpected")

    def test_failing_verdict_without_message_rejected(self):
        """Test that ok=False requires a message, including the default"""
        with pytest.raises(ValidationError):
            Verdict(ok=False)
        with pytest.raises(ValidationError):
            Verdict(ok=False, message="")

    def test_verdict_is_frozen(self):
        verdict = Verdict.passed()
        with pytest.raises(ValidationError):
            verdict.ok = False


class TestRuleToken:
    """Tests for RuleToken parsing"""

    def test_parse_bare_name(self):
        token = RuleToken.parse("required")
        assert token.name == "required"
        assert token.params == ()

    def test_parse_with_params(self):
        token = RuleToken.parse("between:1,10")
        assert token.name == "between"
        assert token.params == ("1", "10")

    def test_parse_keeps_case_but_key_is_lower(self):
        token = RuleToken.parse("Required_If:plan,premium")
        assert token.name == "Required_If"
        assert token.key == "required_if"

    def test_only_first_colon_separates_params(self):
        token = RuleToken.parse("after:2024-01-01 10:30:00")
        assert token.params == ("2024-01-01 10:30:00",)

    def test_regex_pattern_keeps_commas(self):
        token = RuleToken.parse(r"regex:^\d{1,3}$")
        assert token.params == (r"^\d{1,3}$",)

    def test_empty_param_list_after_colon(self):
        token = RuleToken.parse("ip:")
        assert token.params == ("",)

    @pytest.mark.parametrize("raw", ["", ":1,2", "   "])
    def test_blank_name_rejected(self, raw):
        with pytest.raises(ValueError):
            RuleToken.parse(raw)

    def test_non_string_rejected(self):
        with pytest.raises(ValueError):
            RuleToken.parse(5)


class TestValidationReport:
    """Tests for ValidationReport and ValidationFailure"""

    def test_passing_report(self):
        report = ValidationReport(ok=True, successes=["email"])
        assert report.errors == {}
        assert report.messages_for("email") == []

    def test_ok_with_errors_rejected(self):
        with pytest.raises(ValidationError):
            ValidationReport(ok=True, errors={"email": ["bad"]})

    def test_not_ok_without_errors_rejected(self):
        with pytest.raises(ValidationError):
            ValidationReport(ok=False)

    def test_failure_shape(self):
        failure = ValidationFailure(message="Request body should be an object")
        assert failure.ok is False
        assert failure.model_dump() == {"ok": False, "message": "Request body should be an object"}

    def test_failure_requires_message(self):
        with pytest.raises(ValidationError):
            ValidationFailure(message="")


class TestRuleSet:
    """Tests for RuleSet and FieldOutcome"""

    def test_rule_set_fields(self):
        rule_set = RuleSet(rules={"a": ["required"], "b": ["email"]})
        assert rule_set.fields == ["a", "b"]
        assert rule_set.messages == {}

    def test_blank_token_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            RuleSet(rules={"a": ["required", " "]})
        assert "blank" in str(exc_info.value)

    def test_field_outcome_status_is_constrained(self):
        with pytest.raises(ValidationError):
            FieldOutcome(field="a", status="unknown")

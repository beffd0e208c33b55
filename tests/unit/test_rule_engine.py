"""
Unit tests for the rule dispatcher, field orchestration and rule engine.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from fieldrules import validate
from fieldrules.core.messages import UNEXPECTED_ERROR
from fieldrules.core.models import ValidationFailure, ValidationReport
from fieldrules.core.rules import RuleEngine, RuleSetBuilder, build_report, dispatch, evaluate_field, is_known_rule
from fieldrules.core.validators import RULE_REGISTRY, rule


@pytest.fixture
def exploding_rule():
    """Temporarily register a rule that always raises"""

    @rule("test_engine_exploding")
    def exploding(value, *_):
        raise TypeError("boom")

    yield "test_engine_exploding"
    RULE_REGISTRY.pop("test_engine_exploding")


class TestDispatcher:
    """Tests for dispatch()"""

    def test_dispatch_known_rule(self):
        assert dispatch("between", "5", ["1", "10"]).ok is True

    def test_dispatch_is_case_insensitive(self):
        assert dispatch("EMAIL", "a@b.com").ok is True
        assert is_known_rule("Between")

    def test_unknown_rule(self):
        verdict = dispatch("shiny", "x")
        assert verdict.ok is False
        assert verdict.message == "shiny Rule not found"
        assert not is_known_rule("shiny")


class TestEvaluateField:
    """Tests for per-field orchestration"""

    def test_absent_optional_field_is_skipped(self):
        outcome = evaluate_field("age", ["integer"], {})
        assert outcome.status == "skipped"

    def test_required_gate_stops_other_rules(self):
        outcome = evaluate_field("email", ["email", "required", "alpha"], {"email": ""})
        assert outcome.status == "failed"
        assert outcome.messages == ("The email is required",)

    def test_required_if_gate(self):
        """Test required_if fails on the gate and never reaches numeric"""
        outcome = evaluate_field("seats", ["required_if:plan,premium", "numeric"], {"plan": "premium"})
        assert outcome.status == "failed"
        assert outcome.messages == ("The seats is required if the plan is equal to premium",)

    def test_required_if_condition_not_met_skips_absent_field(self):
        outcome = evaluate_field("seats", ["required_if:plan,premium", "numeric"], {"plan": "basic"})
        assert outcome.status == "skipped"

    def test_single_required_if_token_is_enough(self):
        outcome = evaluate_field("seats", ["required_if:plan"], {"plan": "basic"})
        assert outcome.status == "failed"

    def test_required_takes_precedence_over_required_if(self):
        outcome = evaluate_field("seats", ["required_if:plan,premium", "required"], {"plan": "basic"})
        assert outcome.messages == ("The seats is required",)

    def test_nullable_empty_value_is_success(self):
        outcome = evaluate_field("email", ["nullable", "email"], {"email": ""})
        assert outcome.status == "passed"

    def test_nullable_none_value_is_success(self):
        outcome = evaluate_field("email", ["email", "nullable"], {"email": None})
        assert outcome.status == "passed"

    def test_nullable_with_exclude(self):
        outcome = evaluate_field("email", ["nullable", "exclude", "email"], {"email": ""})
        assert outcome.status == "excluded"

    def test_nullable_does_not_bypass_required(self):
        outcome = evaluate_field("email", ["required", "nullable"], {"email": ""})
        assert outcome.status == "failed"

    def test_sweep_collects_every_failure(self):
        outcome = evaluate_field("code", ["alpha", "min:50", "email"], {"code": "12"})
        assert outcome.messages == (
            "The code must contain only alphabets",
            "The code must be greater than or equal to 50",
            "The code must be an email",
        )

    def test_exclude_keeps_passing_field_out_of_successes(self):
        outcome = evaluate_field("token", ["required", "exclude"], {"token": "abc"})
        assert outcome.status == "excluded"

    def test_unknown_rule_is_a_field_failure(self):
        outcome = evaluate_field("name", ["required", "shiny"], {"name": "x"})
        assert outcome.messages == ("shiny Rule not found",)

    def test_custom_message_override(self):
        outcome = evaluate_field("email", ["required"], {}, {"required": "Email please"})
        assert outcome.messages == ("Email please",)

    def test_custom_message_only_for_matching_rule(self):
        outcome = evaluate_field("code", ["alpha", "min:50"], {"code": "12"}, {"min": "Too small"})
        assert outcome.messages == ("The code must contain only alphabets", "Too small")


class TestValidate:
    """Tests for the public validate() entry point"""

    def test_valid_request(self, signup_rules, valid_signup):
        report = validate(valid_signup, signup_rules)
        assert isinstance(report, ValidationReport)
        assert report.ok is True
        assert report.errors == {}
        assert report.successes == ["name", "email", "password", "age", "plan", "seats"]

    def test_one_failing_one_passing_field(self):
        report = validate({"b": "ok"}, {"a": ["required"], "b": ["required", "alpha"]})
        assert report.ok is False
        assert report.errors == {"a": ["The a is required"]}
        assert report.successes == ["b"]

    def test_successes_follow_declaration_order(self):
        request = {"z": "1", "a": "2"}
        report = validate(request, {"z": ["numeric"], "a": ["numeric"]})
        assert report.successes == ["z", "a"]

    def test_confirmed_without_confirmation_field(self):
        report = validate({"password": "s3cret"}, {"password": ["required", "confirmed"]})
        assert report.ok is False
        assert report.errors["password"] == ["The password_confirmation is not present in the request"]

    def test_custom_errors_override_required(self):
        report = validate({}, {"email": ["required"]}, {"email": {"required": "We need your email address"}})
        assert report.errors == {"email": ["We need your email address"]}

    def test_fields_not_in_rules_are_ignored(self):
        report = validate({"extra": "x"}, {})
        assert report.ok is True
        assert report.successes == []

    @pytest.mark.parametrize("request_data,rules,custom_errors,message", [
        ("not a mapping", {"a": ["required"]}, None, "Request body should be an object"),
        ({}, ["required"], None, "Validation rules should be an object"),
        ({}, {"a": ["required"]}, ["x"], "Custom errors should be an object"),
        ({}, {"a": "required"}, None, "Validation rules should be an array"),
        ({}, {"a": ["required", 5]}, None, "Validation rules for a should be non-empty strings"),
        ({}, {"a": ["required"]}, {"a": "oops"}, "Custom errors for a should be an object"),
        ({}, {"a": ["required"]}, {"a": {"required": 5}}, "Custom errors for a should be strings"),
    ])
    def test_malformed_inputs(self, request_data, rules, custom_errors, message):
        outcome = validate(request_data, rules, custom_errors)
        assert isinstance(outcome, ValidationFailure)
        assert outcome.ok is False
        assert outcome.message == message

    def test_rule_fault_does_not_stop_other_fields(self, exploding_rule):
        """Test that a rule raising on one field leaves the other fields validated"""
        report = validate({"a": "x", "b": "y"}, {"a": [exploding_rule], "b": ["required"]})

        assert isinstance(report, ValidationReport)
        assert report.errors == {"a": [UNEXPECTED_ERROR]}
        assert report.successes == ["b"]

    def test_token_without_rule_name_fails_only_its_field(self):
        report = validate({"a": "x", "b": "y"}, {"a": [":5"], "b": ["required"]})

        assert isinstance(report, ValidationReport)
        assert report.errors == {"a": [" Rule not found"]}
        assert report.successes == ["b"]

    def test_orchestration_fault_is_contained(self):
        """Test that a fault outside any rule yields a top-level failure"""

        class ExplodingRequest(dict):
            def get(self, key, default=None):
                raise RuntimeError("storage offline")

        outcome = validate(ExplodingRequest(), {"a": ["required"]})
        assert isinstance(outcome, ValidationFailure)
        assert outcome.message == "storage offline"

    def test_inputs_not_mutated(self, signup_rules, valid_signup):
        rules_before = {field: list(tokens) for field, tokens in signup_rules.items()}
        request_before = dict(valid_signup)
        validate(valid_signup, signup_rules)
        assert signup_rules == rules_before
        assert valid_signup == request_before

    @settings(max_examples=50)
    @given(st.dictionaries(
        st.sampled_from(["name", "email", "age", "plan", "seats", "password"]),
        st.one_of(st.none(), st.text(max_size=12), st.sampled_from(["premium", "basic", "42", "a@b.com"])),
    ))
    def test_property_idempotent(self, request_data):
        """Property test: validating the same inputs twice gives the same report"""
        rules = {
            "name": ["required", "alpha_dash"],
            "email": ["nullable", "email"],
            "age": ["integer", "between:18,120"],
            "plan": ["required", "regex:^(basic|premium)$"],
            "seats": ["required_if:plan,premium", "integer"],
            "password": ["confirmed"],
        }
        first = validate(request_data, rules)
        second = validate(request_data, rules)
        assert first == second
        assert isinstance(first, ValidationReport)
        assert first.ok == (not first.errors)
        assert not set(first.errors) & set(first.successes)


class TestRuleEngine:
    """Tests for RuleEngine"""

    def test_from_rule_set(self):
        rule_set = RuleSetBuilder() \
            .add_required("email", "email") \
            .add_between("age", 18, 120) \
            .message("email", "email", "That is not an email") \
            .build()

        engine = RuleEngine.from_rule_set(rule_set)
        report = engine.validate({"email": "nope", "age": "30"})

        assert report.ok is False
        assert report.errors == {"email": ["That is not an email"]}
        assert report.successes == ["age"]

    def test_validate_batch(self):
        engine = RuleEngine({"id": ["required", "integer"]})
        results = engine.validate_batch([{"id": "1"}, {"id": "x"}, {}, "bad"])

        assert [r.ok for r in results] == [True, False, False, False]
        assert isinstance(results[3], ValidationFailure)

    def test_get_rule_summary(self):
        engine = RuleEngine({
            "email": ["required", "email"],
            "name": ["Required", "shiny:1"],
        })
        summary = engine.get_rule_summary()

        assert summary["total_fields"] == 2
        assert summary["total_rules"] == 4
        assert summary["rules_by_name"] == {"required": 2, "email": 1, "shiny": 1}
        assert summary["unknown_rules"] == ["shiny"]

    def test_get_rule_summary_with_unnamed_token(self):
        summary = RuleEngine({"a": [":5", "required"]}).get_rule_summary()
        assert summary["rules_by_name"] == {"": 1, "required": 1}
        assert summary["unknown_rules"] == [""]

    def test_build_report_folds_outcomes(self):
        outcomes = [
            evaluate_field("a", ["required"], {"a": "x"}),
            evaluate_field("b", ["required"], {}),
            evaluate_field("c", ["exclude"], {"c": "x"}),
            evaluate_field("d", ["numeric"], {}),
        ]
        report = build_report(outcomes)
        assert report.errors == {"b": ["The b is required"]}
        assert report.successes == ["a"]

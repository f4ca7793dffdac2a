"""
Tests for the rule evaluators

Each evaluator is checked against string, integer and unsupported fields.
"""
import pytest
from record_validator.errors import RuleViolationError
from record_validator.field_descriptor import FieldDescriptor, FieldKind
from record_validator.rule_parser import ParsedRule
from record_validator.rules import (
    EVALUATORS,
    InRule,
    LenRule,
    MaxRule,
    MinRule,
    create_evaluator,
)


def string_field(name="Name"):
    return FieldDescriptor(name=name, kind=FieldKind.STRING, exported=True, annotation="")


def integer_field(name="Age"):
    return FieldDescriptor(name=name, kind=FieldKind.INTEGER, exported=True, annotation="")


def other_field(name="Ratio"):
    return FieldDescriptor(name=name, kind=FieldKind.OTHER, exported=True, annotation="")


def messages(violations):
    return [v.message for v in violations]


class TestMinRule:
    """Test the min evaluator."""

    def test_string_at_bound_passes(self):
        assert MinRule("2", 2).check(string_field(), "ok") == []

    def test_string_below_bound_fails(self):
        violations = MinRule("2", 2).check(string_field(), "o")
        assert messages(violations) == ["field Name is less than 2"]
        assert isinstance(violations[0], RuleViolationError)
        assert violations[0].field == "Name"
        assert violations[0].rule == "min"

    def test_string_length_counts_code_points(self):
        """Test that non-ASCII text is measured in characters, not bytes."""
        assert MinRule("3", 3).check(string_field(), "héé") == []
        assert MaxRule("3", 3).check(string_field(), "日本語") == []

    def test_integer_below_bound_fails(self):
        assert messages(MinRule("18", 18).check(integer_field(), 17)) == [
            "field Age is less than 18"
        ]

    def test_integer_at_bound_passes(self):
        assert MinRule("18", 18).check(integer_field(), 18) == []

    def test_negative_bound(self):
        assert MinRule("-5", -5).check(integer_field(), -5) == []
        assert len(MinRule("-5", -5).check(integer_field(), -6)) == 1

    def test_other_kind_is_noop(self):
        assert MinRule("100", 100).check(other_field(), 1.5) == []


class TestMaxRule:
    """Test the max evaluator."""

    def test_string_above_bound_fails(self):
        assert messages(MaxRule("5", 5).check(string_field(), "toolong")) == [
            "field Name is greater than 5"
        ]

    def test_string_at_bound_passes(self):
        assert MaxRule("5", 5).check(string_field(), "exact") == []

    def test_integer_above_bound_fails(self):
        assert messages(MaxRule("10", 10).check(integer_field(), 11)) == [
            "field Age is greater than 10"
        ]

    def test_other_kind_is_noop(self):
        assert MaxRule("0", 0).check(other_field(), [1, 2, 3]) == []


class TestLenRule:
    """Test the len evaluator."""

    def test_integer_not_equal_yields_less_than(self):
        """Test that len on a small integer reports the lower bound only."""
        assert messages(LenRule("3", 3).check(integer_field(), 2)) == [
            "field Age is less than 3"
        ]

    def test_integer_not_equal_yields_greater_than(self):
        assert messages(LenRule("3", 3).check(integer_field(), 5)) == [
            "field Age is greater than 3"
        ]

    def test_integer_equal_passes(self):
        assert LenRule("3", 3).check(integer_field(), 3) == []

    def test_string_exact_length_passes(self):
        assert LenRule("4", 4).check(string_field(), "abcd") == []

    def test_string_wrong_length_fails(self):
        assert messages(LenRule("4", 4).check(string_field(), "abc")) == [
            "field Name is less than 4"
        ]

    def test_other_kind_is_noop(self):
        assert LenRule("4", 4).check(other_field(), (1,)) == []


class TestInRule:
    """Test the in evaluator."""

    def test_string_member_passes(self):
        assert InRule("A,B,C").check(string_field("Code"), "B") == []

    def test_string_non_member_fails(self):
        violations = InRule("A,B,C").check(string_field("Code"), "D")
        assert messages(violations) == ["value of field Code is not in A,B,C"]
        assert violations[0].rule == "in"

    def test_match_is_exact(self):
        """Test that membership is case and whitespace sensitive."""
        assert len(InRule("A,B").check(string_field("Code"), "a")) == 1
        assert len(InRule("A, B").check(string_field("Code"), "B")) == 1

    def test_integer_compared_as_text(self):
        assert InRule("1,2,3").check(integer_field(), 2) == []
        assert messages(InRule("1,2,3").check(integer_field(), 4)) == [
            "value of field Age is not in 1,2,3"
        ]

    def test_integer_text_has_no_leading_zeros(self):
        assert len(InRule("01,02").check(integer_field(), 1)) == 1

    @pytest.mark.parametrize("value", ["", "anything"])
    def test_empty_list_rejects_everything(self, value):
        assert messages(InRule("").check(string_field("Code"), value)) == [
            "value of field Code is not in "
        ]

    def test_empty_string_member(self):
        """Test that "a," admits the empty string."""
        assert InRule("a,").check(string_field("Code"), "") == []

    def test_other_kind_is_noop(self):
        assert InRule("").check(other_field(), None) == []


class TestKindMismatch:
    """Test values that do not match the declared kind."""

    def test_bool_in_integer_field_is_skipped(self):
        assert MinRule("5", 5).check(integer_field(), True) == []

    def test_string_in_integer_field_is_skipped(self):
        assert MaxRule("1", 1).check(integer_field(), "long string") == []

    def test_none_in_string_field_is_skipped(self):
        assert InRule("a").check(string_field(), None) == []


class TestCreateEvaluator:
    """Test the evaluator registry."""

    def test_registry_covers_known_rules(self):
        assert set(EVALUATORS) == {"min", "max", "len", "in"}

    def test_creates_matching_evaluator(self):
        evaluator = create_evaluator(ParsedRule("len", "3", 3))
        assert isinstance(evaluator, LenRule)
        assert evaluator.bound == 3

    def test_description(self):
        assert "A,B" in create_evaluator(ParsedRule("in", "A,B")).description()

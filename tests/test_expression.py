"""Tests for rule_engine/expression.py — legacy condition tokenizer and evaluator."""

from __future__ import annotations

import pytest

from fieldcheck.rule_engine.expression import (
    Condition,
    ExpressionError,
    evaluate_condition,
    parse_condition,
)


class TestParseCondition:
    def test_splits_on_operator(self):
        assert parse_condition("age >= 18") == Condition(left="age", operator=">=", right="18")

    def test_priority_prefers_double_equals(self):
        # Contains both "==" and ">"; "==" is searched first.
        assert parse_condition("a == b > c").operator == "=="

    def test_greater_equal_before_greater(self):
        assert parse_condition("x >= 1").operator == ">="

    def test_includes_keyword(self):
        assert parse_condition("tags includes vip") == Condition(
            left="tags", operator="includes", right="vip"
        )

    def test_no_operator(self):
        assert parse_condition("just text") is None

    def test_missing_operand_raises(self):
        with pytest.raises(ExpressionError, match="Missing right-hand operand"):
            parse_condition("x ==   ")

    def test_unbalanced_reference_raises(self):
        with pytest.raises(ExpressionError, match="Unbalanced field reference"):
            parse_condition("x == {other")


class TestEvaluateCondition:
    def test_numeric_comparison(self):
        assert evaluate_condition("age >= 18", "21", {}) is True
        assert evaluate_condition("age < 18", 21, {}) is False

    def test_loose_equality(self):
        assert evaluate_condition("count == 3", 3, {}) is True
        assert evaluate_condition("count != 3", "3", {}) is False

    def test_field_reference_resolves_from_record(self):
        record = {"max": 10}
        assert evaluate_condition("value <= {max}", 7, record) is True

    def test_missing_reference_is_none(self):
        assert evaluate_condition("value == {absent}", None, {}) is True

    def test_includes(self):
        assert evaluate_condition("notes includes urgent", "very urgent task", {}) is True

    def test_left_side_is_ignored(self):
        assert evaluate_condition("whatever == 5", 5, {}) is True

    def test_boolean_expressions(self):
        assert evaluate_condition(True, None, {}) is True
        assert evaluate_condition(False, "x", {}) is False

    def test_operator_free_text_is_truthy(self):
        assert evaluate_condition("always", None, {}) is True

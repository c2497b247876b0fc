"""Tests for rule_engine/dispatcher.py — rule kind routing."""

from __future__ import annotations

import logging

from fieldcheck.rule_engine.custom import CustomFunctionRegistry
from fieldcheck.rule_engine.dispatcher import RuleDispatcher


class TestDispatch:
    def test_routes_by_rule_type(self, make_rule):
        dispatcher = RuleDispatcher()
        rule = make_rule("range", "age", {"min": 0, "max": 10})
        assert dispatcher.dispatch(rule, 11, {"age": 11}).passed is False

    def test_unknown_rule_type(self, make_rule):
        outcome = RuleDispatcher().dispatch(make_rule("checksum"), "x", {"a": "x"})
        assert outcome.passed is False
        assert outcome.message == "Unknown rule type: checksum"

    def test_custom_without_registry_passes(self, make_rule):
        rule = make_rule("custom", "a", {"functionName": "luhn"})
        assert RuleDispatcher().dispatch(rule, "4111", {"a": "4111"}).passed is True

    def test_custom_uses_registry(self, make_rule):
        registry = CustomFunctionRegistry()
        registry.register("luhn", lambda v, r, p: False)
        rule = make_rule("custom", "a", {"functionName": "luhn"})
        assert RuleDispatcher(registry).dispatch(rule, "4111", {"a": "4111"}).passed is False

    def test_unusable_configuration_fails_open(self, make_rule, caplog):
        rule = make_rule("range", "age", {"min": "not-a-number"})
        with caplog.at_level(logging.WARNING):
            outcome = RuleDispatcher().dispatch(rule, 5, {"age": 5})
        assert outcome.passed is True
        assert "unusable range configuration" in caplog.text

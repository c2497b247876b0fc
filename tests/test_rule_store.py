"""Tests for store/rule_store.py — JSON persistence and structure checks."""

from __future__ import annotations

import json

import pytest

from fieldcheck.rule_engine.models import RuleDefinition
from fieldcheck.store.rule_store import (
    DuplicateRuleError,
    RuleNotFoundError,
    RuleStore,
    RuleStoreError,
    validate_rule_structure,
)


def _wire_rule(rule_id: str = "r1", **overrides):
    rule = {
        "id": rule_id,
        "name": "Rule",
        "ruleType": "format",
        "target": {"field": "email"},
        "configuration": {"dataType": "email"},
    }
    rule.update(overrides)
    return rule


class TestValidateRuleStructure:
    def test_valid(self):
        assert validate_rule_structure(_wire_rule()) is True

    @pytest.mark.parametrize("missing", ["id", "name", "ruleType", "target"])
    def test_missing_key(self, missing):
        rule = _wire_rule()
        del rule[missing]
        assert validate_rule_structure(rule) is False

    def test_missing_target_field(self):
        assert validate_rule_structure(_wire_rule(target={})) is False

    def test_unknown_rule_type(self):
        assert validate_rule_structure(_wire_rule(ruleType="checksum")) is False

    def test_non_dict(self):
        assert validate_rule_structure(["not", "a", "rule"]) is False


class TestLoadRules:
    def test_missing_file_is_empty(self, tmp_path):
        assert RuleStore(tmp_path / "none.json").load_rules() == []

    def test_invalid_json_is_empty(self, tmp_path):
        path = tmp_path / "rules.json"
        path.write_text("{broken")
        assert RuleStore(path).load_rules() == []

    def test_loads_rules(self, rules_file):
        rules = RuleStore(rules_file).load_rules()
        assert [r.id for r in rules] == ["email-format", "age-range", "name-required"]
        assert rules[1].severity == "warning"

    def test_skips_malformed_entries(self, tmp_path):
        path = tmp_path / "rules.json"
        path.write_text(json.dumps({"rules": [_wire_rule(), {"name": "no id"}]}))
        assert [r.id for r in RuleStore(path).load_rules()] == ["r1"]


class TestSaveRules:
    def test_round_trips_camel_case(self, tmp_path):
        path = tmp_path / "nested" / "rules.json"
        store = RuleStore(path)
        store.save_rules([RuleDefinition.model_validate(_wire_rule())])

        data = json.loads(path.read_text())
        assert data["rules"][0]["ruleType"] == "format"
        assert store.load_rules()[0].configuration == {"dataType": "email"}


class TestCrud:
    @pytest.fixture
    def store(self, tmp_path):
        store = RuleStore(tmp_path / "rules.json")
        store.save_rules([RuleDefinition.model_validate(_wire_rule("r1"))])
        return store

    def test_get_rule(self, store):
        assert store.get_rule("r1").id == "r1"
        assert store.get_rule("r2") is None

    def test_add_rule(self, store):
        store.add_rule(RuleDefinition.model_validate(_wire_rule("r2")))
        assert [r.id for r in store.load_rules()] == ["r1", "r2"]

    def test_add_duplicate_raises(self, store):
        with pytest.raises(DuplicateRuleError):
            store.add_rule(RuleDefinition.model_validate(_wire_rule("r1")))

    def test_update_rule(self, store):
        store.update_rule("r1", RuleDefinition.model_validate(_wire_rule("r1", name="Renamed")))
        assert store.get_rule("r1").name == "Renamed"

    def test_update_id_mismatch_raises(self, store):
        with pytest.raises(RuleStoreError, match="does not match"):
            store.update_rule("r1", RuleDefinition.model_validate(_wire_rule("other")))

    def test_update_missing_raises(self, store):
        with pytest.raises(RuleNotFoundError):
            store.update_rule("r9", RuleDefinition.model_validate(_wire_rule("r9")))

    def test_delete_rule(self, store):
        store.delete_rule("r1")
        assert store.load_rules() == []

    def test_delete_missing_raises(self, store):
        with pytest.raises(RuleNotFoundError):
            store.delete_rule("r9")


class TestShippedRules:
    def test_default_rules_file_loads(self):
        from pathlib import Path

        path = Path(__file__).resolve().parent.parent / "rules" / "validation-rules.json"
        raw = json.loads(path.read_text())["rules"]
        assert all(validate_rule_structure(r) for r in raw)
        assert len(RuleStore(path).load_rules()) == len(raw)

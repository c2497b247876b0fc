"""RuleStore: JSON-file persistence and structural checks for rule definitions."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from fieldcheck.rule_engine.models import RuleDefinition, RuleType

logger = logging.getLogger(__name__)

VALID_RULE_TYPES = frozenset(RuleType)


class RuleStoreError(Exception):
    """Raised for rule store operations that cannot be completed."""


class RuleNotFoundError(RuleStoreError):
    pass


class DuplicateRuleError(RuleStoreError):
    pass


def validate_rule_structure(data: Any) -> bool:
    """Shallow shape check applied before a rule is stored."""
    if not isinstance(data, dict):
        return False
    if not all(data.get(key) for key in ("id", "name", "ruleType", "target")):
        return False
    target = data["target"]
    if not isinstance(target, dict) or not target.get("field"):
        return False
    rule_type = data["ruleType"]
    return isinstance(rule_type, str) and rule_type in VALID_RULE_TYPES


class RuleStore:
    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load_rules(self) -> list[RuleDefinition]:
        """Read all rules. A missing or unreadable file yields an empty list."""
        if not self._path.exists():
            return []
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Failed to read rules from {self._path}: {e}")
            return []

        entries = data.get("rules", []) if isinstance(data, dict) else []
        rules: list[RuleDefinition] = []
        for entry in entries:
            try:
                rules.append(RuleDefinition.model_validate(entry))
            except ValidationError as e:
                logger.warning(f"Skipping malformed rule in {self._path}: {e.error_count()} error(s)")
        return rules

    def save_rules(self, rules: list[RuleDefinition]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"rules": [r.model_dump(by_alias=True) for r in rules]}
        self._path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        logger.info(f"Saved {len(rules)} rule(s) to {self._path}")

    def get_rule(self, rule_id: str) -> RuleDefinition | None:
        return next((r for r in self.load_rules() if r.id == rule_id), None)

    def add_rule(self, rule: RuleDefinition) -> RuleDefinition:
        rules = self.load_rules()
        if any(r.id == rule.id for r in rules):
            raise DuplicateRuleError(f"Rule with ID '{rule.id}' already exists")
        rules.append(rule)
        self.save_rules(rules)
        return rule

    def update_rule(self, rule_id: str, rule: RuleDefinition) -> RuleDefinition:
        if rule.id != rule_id:
            raise RuleStoreError("Rule ID in body does not match URL parameter")
        rules = self.load_rules()
        for i, existing in enumerate(rules):
            if existing.id == rule_id:
                rules[i] = rule
                self.save_rules(rules)
                return rule
        raise RuleNotFoundError(f"Rule '{rule_id}' not found")

    def delete_rule(self, rule_id: str) -> None:
        rules = self.load_rules()
        remaining = [r for r in rules if r.id != rule_id]
        if len(remaining) == len(rules):
            raise RuleNotFoundError(f"Rule '{rule_id}' not found")
        self.save_rules(remaining)

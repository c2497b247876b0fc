"""Rule persistence: JSON file store and structural checks."""

from fieldcheck.store.rule_store import (
    DuplicateRuleError,
    RuleNotFoundError,
    RuleStore,
    RuleStoreError,
    validate_rule_structure,
)

__all__ = [
    "DuplicateRuleError",
    "RuleNotFoundError",
    "RuleStore",
    "RuleStoreError",
    "validate_rule_structure",
]

"""ValidationEngine: hold the active rule set and validate records against it."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from fieldcheck.rule_engine.custom import CustomFunctionRegistry
from fieldcheck.rule_engine.dispatcher import RuleDispatcher
from fieldcheck.rule_engine.models import RuleDefinition, ValidationResult
from fieldcheck.rule_engine.resolver import resolve_fields

logger = logging.getLogger(__name__)


class ValidationEngine:
    _rules: tuple[RuleDefinition, ...]

    def __init__(
        self,
        rules: Iterable[RuleDefinition] = (),
        *,
        custom_functions: CustomFunctionRegistry | None = None,
    ) -> None:
        self._dispatcher = RuleDispatcher(custom_functions)
        self._rules = tuple(rules)

    @property
    def rules(self) -> tuple[RuleDefinition, ...]:
        return self._rules

    @property
    def custom_functions(self) -> CustomFunctionRegistry:
        return self._dispatcher.custom_functions

    def load_rules(self, rules: Iterable[RuleDefinition | Mapping[str, Any]]) -> None:
        """Replace the active rule set wholesale."""
        loaded = tuple(
            rule if isinstance(rule, RuleDefinition) else RuleDefinition.model_validate(rule)
            for rule in rules
        )
        # Single reference swap; validate() reads the reference once.
        self._rules = loaded
        logger.info(f"Loaded {len(loaded)} validation rule(s)")

    def validate(self, record: Mapping[str, Any]) -> list[ValidationResult]:
        """Apply every enabled rule to every field its target matches."""
        rules = self._rules
        data = dict(record)
        results: list[ValidationResult] = []

        for rule in rules:
            if not rule.enabled:
                continue
            for field in resolve_fields(rule.target.field, data):
                value = data.get(field)
                outcome = self._dispatcher.dispatch(rule, value, data)
                logger.debug(
                    f"Rule '{rule.id}' on field '{field}': {'pass' if outcome.passed else 'fail'}"
                )
                results.append(
                    ValidationResult(
                        rule_id=rule.id,
                        rule_name=rule.name,
                        field=field,
                        value=value,
                        severity=rule.severity,
                        passed=outcome.passed,
                        message=outcome.message,
                    )
                )

        return results

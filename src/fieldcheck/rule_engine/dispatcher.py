"""Route a (rule, value, record) triple to the validator for the rule's kind."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from fieldcheck.rule_engine.custom import CustomFunctionRegistry
from fieldcheck.rule_engine.models import Outcome, Record, RuleDefinition, RuleType
from fieldcheck.rule_engine.validators import (
    validate_completeness,
    validate_cross_field,
    validate_format,
    validate_range,
    validate_uniqueness,
)

logger = logging.getLogger(__name__)

Validator = Callable[[dict[str, Any], Any, Record], Outcome]


class RuleDispatcher:
    _handlers: dict[str, Validator]

    def __init__(self, custom_functions: CustomFunctionRegistry | None = None) -> None:
        self.custom_functions = custom_functions or CustomFunctionRegistry()
        self._handlers = {
            RuleType.FORMAT: validate_format,
            RuleType.RANGE: validate_range,
            RuleType.COMPLETENESS: validate_completeness,
            RuleType.UNIQUENESS: validate_uniqueness,
            RuleType.CROSS_FIELD: validate_cross_field,
            RuleType.CUSTOM: self.custom_functions.validate,
        }

    def dispatch(self, rule: RuleDefinition, value: Any, record: Record) -> Outcome:
        """Return the validator's outcome; unusable configurations pass."""
        handler = self._handlers.get(rule.rule_type)
        if handler is None:
            return Outcome.fail(f"Unknown rule type: {rule.rule_type}")

        try:
            return handler(rule.configuration, value, record)
        except ValidationError as e:
            logger.warning(
                f"Rule '{rule.id}' has an unusable {rule.rule_type} configuration, "
                f"skipping check: {e.error_count()} error(s)"
            )
            return Outcome.ok()

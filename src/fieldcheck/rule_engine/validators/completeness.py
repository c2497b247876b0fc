"""Completeness validator: required, not-empty and minimum length checks."""

from __future__ import annotations

from typing import Any

from fieldcheck.rule_engine.coercion import to_text
from fieldcheck.rule_engine.models import CompletenessConfig, Outcome, Record


def validate_completeness(configuration: dict[str, Any], value: Any, record: Record) -> Outcome:
    """Checks run in order required -> notEmpty -> minLength; first failure wins."""
    config = CompletenessConfig.model_validate(configuration)

    if config.required and value is None:
        return Outcome.fail("Required field is missing")

    if config.not_empty and (value is None or to_text(value).strip() == ""):
        return Outcome.fail("Field must not be empty")

    if config.min_length is not None and value is not None:
        length = len(to_text(value))
        if length < config.min_length:
            return Outcome.fail(
                f"Field length {length} is below minimum required length of {config.min_length}"
            )

    return Outcome.ok()

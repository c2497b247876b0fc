"""Uniqueness validator: duplicate values across the fields of one record."""

from __future__ import annotations

from typing import Any

from fieldcheck.rule_engine.coercion import strict_equals, to_text
from fieldcheck.rule_engine.models import Outcome, Record, UniquenessConfig


def validate_uniqueness(configuration: dict[str, Any], value: Any, record: Record) -> Outcome:
    # Scope is parsed but not acted on: only the current record is inspected.
    UniquenessConfig.model_validate(configuration)
    if value is None:
        return Outcome.ok()

    occurrences = sum(1 for other in record.values() if strict_equals(other, value))
    if occurrences > 1:
        return Outcome.fail(f"Value '{to_text(value)}' is not unique within the dataset")
    return Outcome.ok()

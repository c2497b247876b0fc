"""Range validator: numeric bounds with inclusive or exclusive limits."""

from __future__ import annotations

import math
from typing import Any

from fieldcheck.rule_engine.coercion import format_number, to_number, to_text
from fieldcheck.rule_engine.models import Outcome, RangeConfig, Record


def validate_range(configuration: dict[str, Any], value: Any, record: Record) -> Outcome:
    if value is None:
        return Outcome.ok()

    number = to_number(value)
    if not math.isfinite(number):
        return Outcome.fail(f"Value '{to_text(value)}' is not a valid number for range validation")

    config = RangeConfig.model_validate(configuration)
    qualifier = "" if config.inclusive else "exclusive "
    shown = format_number(number)

    if config.min is not None:
        below = number < config.min if config.inclusive else number <= config.min
        if below:
            return Outcome.fail(
                f"Value {shown} is below minimum {qualifier}limit of {format_number(config.min)}"
            )

    if config.max is not None:
        above = number > config.max if config.inclusive else number >= config.max
        if above:
            return Outcome.fail(
                f"Value {shown} is above maximum {qualifier}limit of {format_number(config.max)}"
            )

    return Outcome.ok()

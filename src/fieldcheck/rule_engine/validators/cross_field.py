"""Cross-field validator: predicates spanning more than one field of a record.

``configuration.type`` selects the mode (conditional, comparison, dependency,
businessRule); a configuration without a type is a legacy free-form condition.
Incomplete configurations pass.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from typing import Any

from fieldcheck.rule_engine.coercion import (
    format_number,
    is_blank,
    loose_equals,
    to_datetime,
    to_number,
    to_text,
)
from fieldcheck.rule_engine.expression import ExpressionError, evaluate_condition
from fieldcheck.rule_engine.models import (
    BusinessRuleConfig,
    ComparisonConfig,
    ConditionalConfig,
    CrossFieldType,
    DependencyConfig,
    LegacyConditionConfig,
    Outcome,
    Record,
    TargetCondition,
)
from fieldcheck.rule_engine.validators.business_rules import apply_business_rule
from fieldcheck.rule_engine.validators.format import compile_pattern

logger = logging.getLogger(__name__)

_Predicate = Callable[[Any, Any], bool]

CONDITION_OPERATORS: dict[str, _Predicate] = {
    "equals": loose_equals,
    "notEquals": lambda a, b: not loose_equals(a, b),
    "greaterThan": lambda a, b: to_number(a) > to_number(b),
    "lessThan": lambda a, b: to_number(a) < to_number(b),
    "greaterThanOrEqual": lambda a, b: to_number(a) >= to_number(b),
    "lessThanOrEqual": lambda a, b: to_number(a) <= to_number(b),
    "contains": lambda a, b: to_text(b) in to_text(a),
    "startsWith": lambda a, b: to_text(a).startswith(to_text(b)),
    "endsWith": lambda a, b: to_text(a).endswith(to_text(b)),
}

ORDERING_OPERATORS: dict[str, _Predicate] = {
    "greaterThan": lambda a, b: a > b,
    "lessThan": lambda a, b: a < b,
    "greaterThanOrEqual": lambda a, b: a >= b,
    "lessThanOrEqual": lambda a, b: a <= b,
}

SUM_OPERATORS: dict[str, _Predicate] = {
    "sumEquals": lambda total, expected: total == expected,
    "sumLessThan": lambda total, expected: total < expected,
    "sumGreaterThan": lambda total, expected: total > expected,
}


# --- conditional -----------------------------------------------------------


def check_target_condition(value: Any, condition: TargetCondition) -> Outcome:
    """Apply a conditional rule's target condition. Unknown types pass."""
    if condition.type == "required":
        if is_blank(value):
            return Outcome.fail(
                condition.message or "Field is required based on conditional rule"
            )
    elif condition.type == "format":
        if condition.pattern:
            regex = compile_pattern(condition.pattern)
            if regex is not None and regex.search(to_text(value)) is None:
                return Outcome.fail(
                    condition.message
                    or f"Value does not match required format: {condition.pattern}"
                )
    elif condition.type == "range":
        number = to_number(value)
        if math.isnan(number):
            return Outcome.fail(condition.message or "Value must be a number")
        if condition.min is not None and number < condition.min:
            return Outcome.fail(
                condition.message
                or f"Value {format_number(number)} is below minimum {format_number(condition.min)}"
            )
        if condition.max is not None and number > condition.max:
            return Outcome.fail(
                condition.message
                or f"Value {format_number(number)} is above maximum {format_number(condition.max)}"
            )
    return Outcome.ok()


def validate_conditional(configuration: dict[str, Any], record: Record) -> Outcome:
    config = ConditionalConfig.model_validate(configuration)
    if not config.condition_field or not config.target_field:
        return Outcome.ok()

    predicate = CONDITION_OPERATORS.get(config.condition_operator or "equals", loose_equals)
    if not predicate(record.get(config.condition_field), config.condition_value):
        return Outcome.ok()
    if config.target_condition is None:
        return Outcome.ok()

    target = check_target_condition(record.get(config.target_field), config.target_condition)
    if not target.passed:
        return Outcome.fail(f"Conditional validation failed: {target.message}")
    return Outcome.ok()


# --- comparison ------------------------------------------------------------


def _ordered_operands(first: Any, second: Any) -> tuple[Any, Any]:
    """Compare as dates when both values are date-like, else as numbers."""
    first_date, second_date = to_datetime(first), to_datetime(second)
    if first_date is not None and second_date is not None:
        return first_date, second_date
    return to_number(first), to_number(second)


def compare_fields(operator: str, first: Any, second: Any, expected_sum: Any = None) -> bool:
    if operator in SUM_OPERATORS:
        total = to_number(first) + to_number(second)
        return SUM_OPERATORS[operator](total, to_number(expected_sum))
    if operator in ORDERING_OPERATORS:
        left, right = _ordered_operands(first, second)
        return ORDERING_OPERATORS[operator](left, right)
    if operator == "notEquals":
        return not loose_equals(first, second)
    return loose_equals(first, second)


def validate_comparison(configuration: dict[str, Any], record: Record) -> Outcome:
    config = ComparisonConfig.model_validate(configuration)
    if not config.field1 or not config.field2 or not config.comparison_operator:
        return Outcome.ok()

    holds = compare_fields(
        config.comparison_operator,
        record.get(config.field1),
        record.get(config.field2),
        config.expected_sum,
    )
    if not holds:
        return Outcome.fail(
            f"Comparison validation failed: {config.field1} {config.comparison_operator} "
            f"{config.field2} condition not met"
        )
    return Outcome.ok()


# --- dependency ------------------------------------------------------------


def validate_dependency(configuration: dict[str, Any], record: Record) -> Outcome:
    config = DependencyConfig.model_validate(configuration)
    if not config.dependent_field or not config.target_field:
        return Outcome.ok()

    if loose_equals(record.get(config.dependent_field), config.required_value):
        if is_blank(record.get(config.target_field)):
            return Outcome.fail(
                f"When {config.dependent_field} is {to_text(config.required_value)}, "
                f"{config.target_field} is required"
            )
    return Outcome.ok()


# --- business rules --------------------------------------------------------


def validate_business_rule(configuration: dict[str, Any], record: Record) -> Outcome:
    config = BusinessRuleConfig.model_validate(configuration)
    if not config.business_rule:
        return Outcome.ok()
    return apply_business_rule(config.business_rule, record)


# --- legacy ----------------------------------------------------------------


def validate_legacy(configuration: dict[str, Any], record: Record) -> Outcome:
    config = LegacyConditionConfig.model_validate(configuration)
    if not config.dependent_field or not config.condition:
        return Outcome.ok()

    try:
        holds = evaluate_condition(config.condition, record.get(config.dependent_field), record)
    except ExpressionError as e:
        logger.debug(f"Legacy condition {config.condition!r} could not be parsed: {e}")
        return Outcome.fail(f"Error evaluating cross-field condition: {e}")
    if not holds:
        return Outcome.fail(
            f"Cross-field condition '{config.condition}' not met for {config.dependent_field}"
        )
    return Outcome.ok()


CROSS_FIELD_MODES: dict[str, Callable[[dict[str, Any], Record], Outcome]] = {
    CrossFieldType.CONDITIONAL: validate_conditional,
    CrossFieldType.COMPARISON: validate_comparison,
    CrossFieldType.DEPENDENCY: validate_dependency,
    CrossFieldType.BUSINESS_RULE: validate_business_rule,
}


def validate_cross_field(configuration: dict[str, Any], value: Any, record: Record) -> Outcome:
    mode_name = configuration.get("type")
    mode = validate_legacy
    if isinstance(mode_name, str):
        mode = CROSS_FIELD_MODES.get(mode_name, validate_legacy)
    return mode(configuration, record)

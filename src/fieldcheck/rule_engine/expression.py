"""Minimal evaluator for legacy free-form cross-field conditions.

A condition is ``<left> <operator> <right>`` where the operator is one of a
fixed set, searched in priority order. The left side is descriptive only: the
dependent field's value is always the left operand. The right operand is a
literal or a ``{fieldName}`` reference resolved from the record.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from fieldcheck.rule_engine.coercion import loose_equals, to_number, to_text
from fieldcheck.rule_engine.models import Record


class ExpressionError(Exception):
    """Raised when a condition string cannot be parsed."""


_Compare = Callable[[Any, Any], bool]

# Priority order matters: "a >= b" must not be read as ">".
OPERATORS: list[tuple[str, _Compare]] = [
    ("==", lambda left, right: loose_equals(left, right)),
    ("!=", lambda left, right: not loose_equals(left, right)),
    (">=", lambda left, right: to_number(left) >= to_number(right)),
    ("<=", lambda left, right: to_number(left) <= to_number(right)),
    (">", lambda left, right: to_number(left) > to_number(right)),
    ("<", lambda left, right: to_number(left) < to_number(right)),
    ("includes", lambda left, right: to_text(right) in to_text(left)),
]
_COMPARATORS = dict(OPERATORS)


@dataclass(frozen=True)
class Condition:
    left: str
    operator: str
    right: str


def parse_condition(expression: str) -> Condition | None:
    """Split on the first operator found; None if the text has no operator."""
    for operator, _ in OPERATORS:
        if operator not in expression:
            continue
        left, _, rest = expression.partition(operator)
        # Anything after a second occurrence of the operator is ignored.
        right = rest.split(operator, 1)[0].strip()
        if not right:
            raise ExpressionError(f"Missing right-hand operand for '{operator}'")
        if right.startswith("{") != right.endswith("}"):
            raise ExpressionError(f"Unbalanced field reference '{right}'")
        return Condition(left=left.strip(), operator=operator, right=right)
    return None


def resolve_operand(operand: str, record: Record) -> Any:
    if operand.startswith("{") and operand.endswith("}"):
        return record.get(operand[1:-1])
    return operand


def evaluate_condition(expression: str | bool | None, dependent_value: Any, record: Record) -> bool:
    if isinstance(expression, bool):
        return expression
    if not isinstance(expression, str):
        return bool(expression)

    condition = parse_condition(expression)
    if condition is None:
        return bool(expression)
    compare = _COMPARATORS[condition.operator]
    return compare(dependent_value, resolve_operand(condition.right, record))

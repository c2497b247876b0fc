"""Rule engine: models, coercion, validators, dispatch, and the validation engine."""

from fieldcheck.rule_engine.custom import CustomFunctionRegistry
from fieldcheck.rule_engine.dispatcher import RuleDispatcher
from fieldcheck.rule_engine.engine import ValidationEngine
from fieldcheck.rule_engine.expression import ExpressionError
from fieldcheck.rule_engine.models import (
    CrossFieldType,
    Outcome,
    Record,
    RuleDefinition,
    RuleTarget,
    RuleType,
    ValidationResult,
)
from fieldcheck.rule_engine.resolver import resolve_fields

__all__ = [
    "CrossFieldType",
    "CustomFunctionRegistry",
    "ExpressionError",
    "Outcome",
    "Record",
    "RuleDefinition",
    "RuleDispatcher",
    "RuleTarget",
    "RuleType",
    "ValidationEngine",
    "ValidationResult",
    "resolve_fields",
]

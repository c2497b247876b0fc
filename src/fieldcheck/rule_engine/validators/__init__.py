"""One validator per rule kind, each ``(configuration, value, record) -> Outcome``."""

from fieldcheck.rule_engine.validators.completeness import validate_completeness
from fieldcheck.rule_engine.validators.cross_field import validate_cross_field
from fieldcheck.rule_engine.validators.format import validate_format
from fieldcheck.rule_engine.validators.range import validate_range
from fieldcheck.rule_engine.validators.uniqueness import validate_uniqueness

__all__ = [
    "validate_completeness",
    "validate_cross_field",
    "validate_format",
    "validate_range",
    "validate_uniqueness",
]

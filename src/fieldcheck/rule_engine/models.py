"""Pydantic models and enums for the rule engine layer."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Record = dict[str, Any]


class RuleType(StrEnum):
    FORMAT = "format"
    RANGE = "range"
    COMPLETENESS = "completeness"
    UNIQUENESS = "uniqueness"
    CROSS_FIELD = "crossField"
    CUSTOM = "custom"


class CrossFieldType(StrEnum):
    CONDITIONAL = "conditional"
    COMPARISON = "comparison"
    DEPENDENCY = "dependency"
    BUSINESS_RULE = "businessRule"


class _CamelModel(BaseModel):
    """Snake_case attributes, camelCase on the wire; both accepted on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RuleTarget(_CamelModel):
    field: str


class RuleDefinition(_CamelModel):
    id: str
    name: str = ""
    description: str = ""
    # Plain str so an unknown kind survives loading and is reported at dispatch.
    rule_type: str
    target: RuleTarget
    configuration: dict[str, Any] = Field(default_factory=dict)
    severity: str = "error"
    enabled: bool = True


class ValidationResult(_CamelModel):
    rule_id: str
    rule_name: str
    field: str
    value: Any = None
    severity: str = "error"
    passed: bool
    message: str = ""


class Outcome(BaseModel):
    """What a single validator reports for one (rule, field) pair."""

    passed: bool
    message: str = ""

    @classmethod
    def ok(cls) -> Outcome:
        return cls(passed=True)

    @classmethod
    def fail(cls, message: str) -> Outcome:
        return cls(passed=False, message=message)


# Per-kind configuration shapes. Parsed lazily by each validator.


class FormatConfig(_CamelModel):
    pattern: str | None = None
    data_type: str | None = None


class RangeConfig(_CamelModel):
    min: float | None = None
    max: float | None = None
    inclusive: bool = True


class CompletenessConfig(_CamelModel):
    required: bool = False
    not_empty: bool = False
    min_length: int | None = None


class UniquenessConfig(_CamelModel):
    scope: str = "dataset"


class TargetCondition(_CamelModel):
    type: str | None = None
    pattern: str | None = None
    min: float | None = None
    max: float | None = None
    message: str | None = None


class ConditionalConfig(_CamelModel):
    condition_field: str | None = None
    condition_value: Any = None
    condition_operator: str | None = "equals"
    target_field: str | None = None
    target_condition: TargetCondition | None = None


class ComparisonConfig(_CamelModel):
    field1: str | None = None
    field2: str | None = None
    comparison_operator: str | None = None
    expected_sum: Any = None


class DependencyConfig(_CamelModel):
    dependent_field: str | None = None
    required_value: Any = None
    target_field: str | None = None


class BusinessRuleConfig(_CamelModel):
    business_rule: str | None = None


class LegacyConditionConfig(_CamelModel):
    dependent_field: str | None = None
    condition: str | bool | None = None


class CustomConfig(_CamelModel):
    function_name: str | None = None
    parameters: dict[str, Any] = Field(default_factory=dict)

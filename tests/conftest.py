"""Shared fixtures for fieldcheck tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from fieldcheck.rule_engine.models import RuleDefinition

RuleFactory = Callable[..., RuleDefinition]


def _rule(
    rule_type: str,
    field: str = "*",
    configuration: dict[str, Any] | None = None,
    *,
    id: str = "rule-1",
    name: str = "Test rule",
    severity: str = "error",
    enabled: bool = True,
) -> RuleDefinition:
    return RuleDefinition(
        id=id,
        name=name,
        rule_type=rule_type,
        target={"field": field},
        configuration=configuration or {},
        severity=severity,
        enabled=enabled,
    )


@pytest.fixture
def make_rule() -> RuleFactory:
    """Build a RuleDefinition with sensible defaults."""
    return _rule


@pytest.fixture
def sample_rules() -> list[dict[str, Any]]:
    """Wire-format rule definitions covering several rule kinds."""
    return [
        {
            "id": "email-format",
            "name": "Email Format",
            "description": "Email must be a valid address",
            "ruleType": "format",
            "target": {"field": "email"},
            "configuration": {"dataType": "email"},
        },
        {
            "id": "age-range",
            "name": "Age Range",
            "ruleType": "range",
            "target": {"field": "age"},
            "configuration": {"min": 0, "max": 150, "inclusive": True},
            "severity": "warning",
        },
        {
            "id": "name-required",
            "name": "Name Required",
            "ruleType": "completeness",
            "target": {"field": "name"},
            "configuration": {"required": True, "notEmpty": True},
        },
    ]


@pytest.fixture
def rules_file(tmp_path: Path, sample_rules: list[dict[str, Any]]) -> Path:
    path = tmp_path / "rules" / "validation-rules.json"
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps({"rules": sample_rules}))
    return path


@pytest.fixture(autouse=True)
def _clear_fieldcheck_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "FIELDCHECK_RULES_PATH",
        "FIELDCHECK_HOST",
        "FIELDCHECK_PORT",
        "FIELDCHECK_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

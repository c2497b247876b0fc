"""Summaries of a validation run in the structured-text shape used at the boundary."""

from __future__ import annotations

from typing import Any

from fieldcheck.rule_engine.models import ValidationResult


def dump_results(results: list[ValidationResult]) -> list[dict[str, Any]]:
    return [r.model_dump(by_alias=True) for r in results]


def build_report(results: list[ValidationResult]) -> dict[str, Any]:
    """Split results into passed/failed with a summary block."""
    passed = [r for r in results if r.passed]
    failed = [r for r in results if not r.passed]
    return {
        "valid": not failed,
        "passed": dump_results(passed),
        "failed": dump_results(failed),
        "summary": {
            "total": len(results),
            "passed": len(passed),
            "failed": len(failed),
        },
    }

"""Starlette app factory wiring the rule store and validation engine."""

from __future__ import annotations

from pathlib import Path

from starlette.applications import Starlette

from fieldcheck.config import ValidationConfig, load_validation_config
from fieldcheck.rule_engine.custom import CustomFunctionRegistry
from fieldcheck.rule_engine.engine import ValidationEngine
from fieldcheck.server.routes_rules import routes as rules_routes
from fieldcheck.server.routes_system import routes as system_routes
from fieldcheck.server.routes_validate import routes as validate_routes
from fieldcheck.store.rule_store import RuleStore


def create_app(
    rules_path: str | Path | None = None,
    config: ValidationConfig | None = None,
    custom_functions: CustomFunctionRegistry | None = None,
) -> Starlette:
    """Create a Starlette app serving validation and rule management."""
    if config is None:
        config = load_validation_config()
    path = Path(rules_path) if rules_path is not None else config.rules_file

    app = Starlette(routes=system_routes + validate_routes + rules_routes)
    app.state.config = config
    app.state.rule_store = RuleStore(path)
    app.state.custom_functions = custom_functions or CustomFunctionRegistry()
    app.state.engine = ValidationEngine(custom_functions=app.state.custom_functions)
    return app

"""Rule management routes: CRUD, structure check, and single-rule test runs."""

from __future__ import annotations

from pydantic import ValidationError
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from fieldcheck.rule_engine.engine import ValidationEngine
from fieldcheck.rule_engine.models import RuleDefinition
from fieldcheck.rule_engine.report import dump_results
from fieldcheck.server._common import BadRequest, error, read_json_object
from fieldcheck.store.rule_store import (
    DuplicateRuleError,
    RuleNotFoundError,
    RuleStoreError,
    validate_rule_structure,
)


def _parse_rule(body: dict) -> RuleDefinition | None:
    if not validate_rule_structure(body):
        return None
    try:
        return RuleDefinition.model_validate(body)
    except ValidationError:
        return None


async def list_rules(request: Request) -> JSONResponse:
    """GET /api/rules — list all stored rules."""
    rules = request.app.state.rule_store.load_rules()
    return JSONResponse(
        {
            "rules": [r.model_dump(by_alias=True) for r in rules],
            "count": len(rules),
        }
    )


async def get_rule(request: Request) -> JSONResponse:
    """GET /api/rules/{rule_id} — fetch one rule."""
    rule = request.app.state.rule_store.get_rule(request.path_params["rule_id"])
    if rule is None:
        return error("Rule not found", 404)
    return JSONResponse({"rule": rule.model_dump(by_alias=True)})


async def create_rule(request: Request) -> JSONResponse:
    """POST /api/rules — store a new rule."""
    try:
        body = await read_json_object(request)
    except BadRequest as e:
        return error(str(e), 400)

    rule = _parse_rule(body)
    if rule is None:
        return error("Invalid rule structure", 400)
    try:
        request.app.state.rule_store.add_rule(rule)
    except DuplicateRuleError:
        return error("Rule with this ID already exists", 409)
    return JSONResponse({"rule": rule.model_dump(by_alias=True)}, status_code=201)


async def update_rule(request: Request) -> JSONResponse:
    """PUT /api/rules/{rule_id} — replace an existing rule."""
    try:
        body = await read_json_object(request)
    except BadRequest as e:
        return error(str(e), 400)

    rule = _parse_rule(body)
    if rule is None:
        return error("Invalid rule structure", 400)
    try:
        request.app.state.rule_store.update_rule(request.path_params["rule_id"], rule)
    except RuleNotFoundError:
        return error("Rule not found", 404)
    except RuleStoreError as e:
        return error(str(e), 400)
    return JSONResponse({"rule": rule.model_dump(by_alias=True)})


async def delete_rule(request: Request) -> Response:
    """DELETE /api/rules/{rule_id} — remove a rule."""
    try:
        request.app.state.rule_store.delete_rule(request.path_params["rule_id"])
    except RuleNotFoundError:
        return error("Rule not found", 404)
    return Response(status_code=204)


async def run_rule_test(request: Request) -> JSONResponse:
    """POST /api/rules/{rule_id}/test — run one stored rule against ``testData``."""
    try:
        body = await read_json_object(request)
    except BadRequest as e:
        return error(str(e), 400)

    test_data = body.get("testData")
    if not isinstance(test_data, dict):
        return error("Test data is required", 400)

    rule = request.app.state.rule_store.get_rule(request.path_params["rule_id"])
    if rule is None:
        return error("Rule not found", 404)

    engine = ValidationEngine([rule], custom_functions=request.app.state.custom_functions)
    return JSONResponse({"results": dump_results(engine.validate(test_data))})


async def check_rule_structure(request: Request) -> JSONResponse:
    """POST /api/rules/validate — report whether ``rule`` is structurally valid."""
    try:
        body = await read_json_object(request)
    except BadRequest as e:
        return error(str(e), 400)

    rule = body.get("rule")
    if not rule:
        return error("Rule definition is required", 400)
    return JSONResponse({"valid": validate_rule_structure(rule)})


routes = [
    Route("/api/rules", list_rules),
    Route("/api/rules", create_rule, methods=["POST"]),
    Route("/api/rules/validate", check_rule_structure, methods=["POST"]),
    Route("/api/rules/{rule_id}", get_rule),
    Route("/api/rules/{rule_id}", update_rule, methods=["PUT"]),
    Route("/api/rules/{rule_id}", delete_rule, methods=["DELETE"]),
    Route("/api/rules/{rule_id}/test", run_rule_test, methods=["POST"]),
]

"""Validation route: run the stored rule set against a submitted record."""

from __future__ import annotations

from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from fieldcheck.rule_engine.report import build_report
from fieldcheck.server._common import BadRequest, error, read_json_object


async def validate_record(request: Request) -> JSONResponse:
    """POST /validate — validate ``data`` against the current stored rules."""
    try:
        body = await read_json_object(request)
    except BadRequest as e:
        return error(str(e), 400)

    data = body.get("data")
    if not isinstance(data, dict):
        return error("Data is required for validation", 400)

    engine = request.app.state.engine
    engine.load_rules(request.app.state.rule_store.load_rules())
    results = engine.validate(data)
    return JSONResponse(build_report(results))


routes = [
    Route("/validate", validate_record, methods=["POST"]),
]

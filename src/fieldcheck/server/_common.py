"""Helpers shared by the HTTP route modules."""

from __future__ import annotations

import json
from typing import Any

from starlette.requests import Request
from starlette.responses import JSONResponse


class BadRequest(Exception):
    pass


async def read_json_object(request: Request) -> dict[str, Any]:
    try:
        body = await request.json()
    except json.JSONDecodeError as e:
        raise BadRequest(f"Invalid JSON body: {e.msg}") from e
    if not isinstance(body, dict):
        raise BadRequest("JSON body must be an object")
    return body


def error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)

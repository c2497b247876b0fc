"""System routes: health and version."""

from __future__ import annotations

from datetime import datetime, timezone

from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from fieldcheck import __version__ as VERSION


async def health(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()})


async def version(request: Request) -> JSONResponse:
    return JSONResponse({"version": VERSION})


routes = [
    Route("/health", health),
    Route("/api/version", version),
]

"""
Pre-route authorization hook for dashboard paths.

The gate runs before routing for every request under `prefix`. What it
enforces is decided by the policy passed in; the default admits everything.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from .errors import Unauthorized

logger = logging.getLogger(__name__)

DASHBOARD_PREFIX = "/dashboard"

GatePolicy = Callable[[Request], Awaitable[bool]]


async def allow_all(_: Request) -> bool:
    return True


def path_matches(path: str, prefix: str) -> bool:
    prefix = prefix.rstrip("/")
    return path == prefix or path.startswith(prefix + "/")


def install_request_gate(
    app: FastAPI,
    policy: GatePolicy = allow_all,
    *,
    prefix: str = DASHBOARD_PREFIX,
) -> None:
    @app.middleware("http")
    async def request_gate(request: Request, call_next: Callable) -> Response:
        path = request.url.path
        if not path_matches(path, prefix):
            return await call_next(request)

        logger.info("request gate checking %s", path)
        if not await policy(request):
            denied = Unauthorized()
            return JSONResponse(denied.to_dict(), status_code=denied.status_code)
        return await call_next(request)

"""
API error taxonomy and the JSON error shape.

Clients always receive `{"error": <message>}` (plus `code` for errors that
carry one) and a status code. Internal details stay in the server log.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


class ApiError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = INTERNAL_ERROR_MESSAGE

    def __init__(self, message: str | None = None, *, code: str | None = None) -> None:
        self.message = message or self.default_message
        self.code = code
        super().__init__(self.message)

    def to_dict(self) -> dict:
        body: dict = {"error": self.message}
        if self.code:
            body["code"] = self.code
        return body


class BadRequest(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Bad Request"


class Unauthorized(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class Forbidden(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Unauthorized"


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not Found"


class ServiceUnavailable(ApiError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_message = "Service Unavailable"


class InternalError(ApiError):
    pass


@contextmanager
def failure_boundary(operation: str) -> Iterator[None]:
    """
    Map unexpected failures inside the block to an opaque 500.

    ApiError subclasses pass through untouched so handlers can still return
    401/404/... from inside the block.
    """
    try:
        yield
    except ApiError:
        raise
    except Exception as exc:
        logger.exception("%s failed", operation)
        raise InternalError() from exc


async def _api_error_handler(_: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(exc.to_dict(), status_code=exc.status_code)


async def _validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    issues = [
        {
            "path": [str(part) for part in error.get("loc", ()) if part != "body"],
            "message": str(error.get("msg", "")),
        }
        for error in exc.errors()
    ]
    return JSONResponse({"error": issues}, status_code=status.HTTP_400_BAD_REQUEST)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, _api_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)

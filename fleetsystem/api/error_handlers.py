# This file maps failures to HTTP responses for every endpoint.
# Domain and query errors are returned as plain-text messages with an `x-error-code` header,
# request validation errors keep a JSON payload, and anything unexpected becomes a 500.

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any, TypeVar

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

from fleetsystem.api.services.results import ErrorKind, ServiceResult

LOGGER = logging.getLogger("fleet")

T = TypeVar("T")

UNEXPECTED_ERROR_PREFIX = "An unexpected error occurred: "

STATUS_BY_ERROR_KIND: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INVALID_STATUS: 400,
}


class APIError(Exception):
    """Error raised by routers once a failure has an HTTP status."""

    def __init__(self, *, status_code: int, error_code: str, message: str) -> None:
        self.status_code = status_code
        self.error_code = error_code
        self.message = message
        super().__init__(message)


def unwrap_result(result: ServiceResult[T]) -> T | None:
    """Return the result value, or raise `APIError` for the carried service error."""

    if result.error is None:
        return result.value
    raise APIError(
        status_code=STATUS_BY_ERROR_KIND.get(result.error.kind, 500),
        error_code=result.error.kind.value,
        message=result.error.message,
    )


def _request_id(request: Request) -> str:
    return str(getattr(request.state, "request_id", "unknown"))


def _error_body(
    *, request: Request, error_code: str, message: str, details: Any | None = None
) -> dict[str, Any]:
    return {
        "error_code": error_code,
        "message": message,
        "details": details,
        "request_id": _request_id(request),
        "timestamp": datetime.now(tz=UTC).isoformat(),
    }


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError) -> PlainTextResponse:
        return PlainTextResponse(
            exc.message,
            status_code=exc.status_code,
            headers={"x-error-code": exc.error_code},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content=_error_body(
                request=request,
                error_code="VALIDATION_ERROR",
                message="Invalid request parameters.",
                details=jsonable_errors(exc),
            ),
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> PlainTextResponse:
        return PlainTextResponse(
            str(exc.detail),
            status_code=exc.status_code,
            headers={"x-error-code": "HTTP_ERROR"},
        )

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError) -> PlainTextResponse:
        # Handled inside the middleware stack so CORS headers still apply.
        return _unexpected_error_response(request, exc)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
        return _unexpected_error_response(request, exc)


def _unexpected_error_response(request: Request, exc: Exception) -> PlainTextResponse:
    LOGGER.error(
        "unhandled error request_id=%s path=%s",
        _request_id(request),
        request.url.path,
        exc_info=exc,
    )
    return PlainTextResponse(
        f"{UNEXPECTED_ERROR_PREFIX}{exc}",
        status_code=500,
        headers={"x-error-code": "INTERNAL_SERVER_ERROR"},
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Drop non-serializable `ctx` entries from validation errors."""

    return [{key: value for key, value in error.items() if key != "ctx"} for error in exc.errors()]

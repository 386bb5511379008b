"""Translation of errors into HTTP responses."""

import traceback

import logfire
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from salonhub.config import Settings
from salonhub.domain.error import (
    DomainError,
    NotFoundError,
    RateLimitError,
)


def to_http_exception(error: DomainError) -> HTTPException:
    """Map a domain error to its HTTP status, keeping the message verbatim."""
    if isinstance(error, NotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, RateLimitError):
        code = status.HTTP_429_TOO_MANY_REQUESTS
    else:
        # ValidationError, BusinessRuleViolationError (nesting depth)
        code = status.HTTP_400_BAD_REQUEST
    return HTTPException(status_code=code, detail=str(error))


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Install handlers for malformed requests and unexpected failures.

    Malformed requests get 400 (not FastAPI's default 422) with one entry
    per offending field. Unexpected failures get 500; the stack trace is
    included everywhere except production.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = [
            {
                "path": ".".join(str(p) for p in err.get("loc", ()) if p != "body"),
                "message": err.get("msg", ""),
            }
            for err in exc.errors()
        ]
        logfire.warn("Request validation failed", path=request.url.path, errors=errors)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "Validation error", "errors": errors},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logfire.error(
            "Unhandled error",
            method=request.method,
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        content: dict[str, object] = {"detail": str(exc) or "Internal Server Error"}
        if not settings.is_production:
            content["stack"] = "".join(
                traceback.format_exception(type(exc), exc, exc.__traceback__)
            )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content
        )

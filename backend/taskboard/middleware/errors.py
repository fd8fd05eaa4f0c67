"""Centralized translation of exceptions into JSON error responses."""
from __future__ import annotations

import logging
import traceback
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskboard.core.config import Settings
from taskboard.core.exceptions import (
    InvalidTokenError,
    ModelValidationError,
    TaskboardError,
    TokenExpiredError,
)

logger = logging.getLogger(__name__)

_REQUEST_LOCATIONS = {"body", "query", "path", "header"}


def _format_validation_errors(exc: RequestValidationError) -> list[str]:
    messages = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ()) if part not in _REQUEST_LOCATIONS)
        messages.append(f"{field}: {error['msg']}" if field else error["msg"])
    return messages


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Install handlers that render every failure as ``{message, errors?, stack?}``."""

    def respond(status_code: int, message: str, exc: BaseException, errors: list[str] | None = None) -> JSONResponse:
        content: dict[str, Any] = {"message": message}
        if errors:
            content["errors"] = errors
        if settings.is_development:
            content["stack"] = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        return JSONResponse(status_code=status_code, content=content)

    async def handle_app_error(_: Request, exc: TaskboardError) -> JSONResponse:
        return respond(exc.status_code, exc.message, exc, exc.errors)

    async def handle_request_validation(_: Request, exc: RequestValidationError) -> JSONResponse:
        return respond(status.HTTP_400_BAD_REQUEST, "Validation failed", exc, _format_validation_errors(exc))

    async def handle_model_validation(_: Request, exc: ModelValidationError) -> JSONResponse:
        return respond(status.HTTP_400_BAD_REQUEST, "Validation Error", exc, exc.errors)

    async def handle_integrity(_: Request, exc: IntegrityError) -> JSONResponse:
        logger.warning("Integrity error: %s", exc.orig)
        return respond(status.HTTP_400_BAD_REQUEST, "Validation Error", exc, [str(exc.orig)])

    async def handle_token(_: Request, exc: InvalidTokenError) -> JSONResponse:
        message = "Token expired" if isinstance(exc, TokenExpiredError) else "Invalid token"
        return respond(status.HTTP_401_UNAUTHORIZED, message, exc)

    async def handle_http(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return respond(exc.status_code, f"Route {request.url.path} not found", exc)
        return respond(exc.status_code, str(exc.detail), exc)

    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return respond(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error", exc)

    app.add_exception_handler(TaskboardError, handle_app_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(ModelValidationError, handle_model_validation)
    app.add_exception_handler(IntegrityError, handle_integrity)
    app.add_exception_handler(InvalidTokenError, handle_token)
    app.add_exception_handler(StarletteHTTPException, handle_http)
    app.add_exception_handler(Exception, handle_unexpected)

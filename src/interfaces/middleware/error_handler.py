from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.application.errors import AppError, InfrastructureError, ValidationError

logger = logging.getLogger(__name__)


def request_validation_error(errors: Sequence[dict[str, Any]]) -> ValidationError:
    """Translate FastAPI's request validation errors into an ``AppError``.

    Body errors mean the submitted animal itself is malformed and get the same
    message as a record rejected by the catalog rules. Anything else (query or
    path parameters) is reported as a bad request.
    """
    body_fields: list[str] = []
    other_fields: list[str] = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] == "body":
            body_fields.append(".".join(loc[1:]) or "body")
        else:
            other_fields.append(".".join(loc))
    if body_fields:
        return ValidationError("Invalid animal!", details={"fields": body_fields})
    return ValidationError("Invalid request parameters", details={"fields": other_fields})


def _app_error_response(request: Request, exc: AppError) -> JSONResponse:
    logger.info(
        "Application error handled: %s - %s (status: %d)",
        exc.code,
        exc.message,
        exc.status_code,
        extra={"path": request.url.path, "method": request.method},
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:  # noqa: WPS430
        return _app_error_response(request, exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(  # noqa: WPS430
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return _app_error_response(request, request_validation_error(exc.errors()))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:  # noqa: WPS430
        payload = {"code": "http_error", "message": exc.detail}
        return JSONResponse(status_code=exc.status_code, content=payload)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:  # noqa: WPS430
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        error = InfrastructureError("Unexpected server error")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=error.to_payload()
        )

# api/errors.py
"""
Error envelope ``{"error": ..., "details": ...}`` and the FastAPI
exception handlers that render it.
"""
from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.errors import InvalidInput

_LOG = logging.getLogger(__name__)


class APIError(Exception):
    def __init__(self, status_code: int, message: str, details: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.details = details


def _envelope(status_code: int, message: str, details: Any = None) -> JSONResponse:
    content: dict[str, Any] = {"error": message}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


# ───────────────────────── handlers ─────────────────────────
async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    return _envelope(exc.status_code, exc.message, exc.details)


async def invalid_input_handler(request: Request, exc: InvalidInput) -> JSONResponse:
    return _envelope(status.HTTP_400_BAD_REQUEST, str(exc))


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return _envelope(
        status.HTTP_400_BAD_REQUEST,
        "Invalid request body",
        jsonable_encoder(exc.errors()),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    _LOG.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=True)
    return _envelope(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error", str(exc)
    )


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(InvalidInput, invalid_input_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

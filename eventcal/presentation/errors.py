from __future__ import annotations

import logging

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from eventcal.core.repositories.event_repository import StoreUnavailableError

logger = logging.getLogger(__name__)


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "invalid input")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "invalid request"


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse({"error": exc.detail}, status_code=exc.status_code, headers=exc.headers)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Malformed JSON, missing fields and unparseable dates are client errors: 400, not FastAPI's 422.
    """
    message = _describe_validation_errors(exc)
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse({"error": message}, status_code=400)


async def store_unavailable_handler(request: Request, exc: StoreUnavailableError) -> Response:
    logger.error("Event store unavailable for %s %s: %s", request.method, request.url.path, exc)
    return Response(status_code=500)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StoreUnavailableError, store_unavailable_handler)

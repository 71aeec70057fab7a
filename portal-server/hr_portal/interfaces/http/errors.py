"""Translate portal domain errors into HTTP responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from hr_portal.modules.common.exceptions import (
    AuthenticationError,
    AuthenticationRequiredError,
    ConflictError,
    DanglingReferenceError,
    NotFoundError,
    PermissionDeniedError,
    PortalError,
    StorageError,
    ValidationError,
)
from hr_portal.schemas import ErrorResponse

logger = logging.getLogger(__name__)

# Checked in order; subclasses must precede their bases.
STATUS_BY_ERROR: tuple[tuple[type[PortalError], int], ...] = (
    (ValidationError, 422),
    (DanglingReferenceError, 422),
    (ConflictError, 409),
    (NotFoundError, 404),
    (AuthenticationError, 401),
    (AuthenticationRequiredError, 401),
    (PermissionDeniedError, 403),
    (StorageError, 500),
)


def status_for(exc: PortalError) -> int:
    for error_type, code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return code
    return 400


async def portal_error_handler(request: Request, exc: PortalError) -> JSONResponse:
    code = status_for(exc)
    if code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    body = ErrorResponse(detail=str(exc), error=type(exc).__name__)
    return JSONResponse(status_code=code, content=body.model_dump())


def error_responses() -> dict[int | str, dict]:
    """OpenAPI entries for every status a domain error can map to."""
    return {code: {"model": ErrorResponse} for code in sorted({code for _, code in STATUS_BY_ERROR})}


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PortalError, portal_error_handler)


__all__ = ["error_responses", "register_error_handlers", "status_for"]

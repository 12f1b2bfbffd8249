#!/usr/bin/env python3
"""
Custom exceptions and error handlers for the web application.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.matcher.exceptions import MatchingError, NotFound, DuplicateRegistration

logger = logging.getLogger(__name__)


class ServiceException(Exception):
    """Base exception for service layer errors."""
    pass


class EventNotFoundException(ServiceException):
    """Raised when an event is not found."""
    pass


class VolunteerNotFoundException(ServiceException):
    """Raised when a volunteer profile is not found."""
    pass


class ValidationException(ServiceException):
    """Raised when input passes schema checks but fails a business rule."""
    pass


def _error_response(status_code: int, error, error_type: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": error,
            "type": error_type
        }
    )


async def service_exception_handler(
    request: Request,
    exc: ServiceException
) -> JSONResponse:
    """
    Handle service layer exceptions.

    Args:
        request: The FastAPI request.
        exc: The service exception.

    Returns:
        JSONResponse with error details.
    """
    status_code = 500
    if isinstance(exc, (EventNotFoundException, VolunteerNotFoundException)):
        status_code = 404
    elif isinstance(exc, ValidationException):
        status_code = 400

    if status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.info(f"Rejected request to {request.url.path}: {exc}")

    return _error_response(status_code, str(exc), exc.__class__.__name__)


async def matching_exception_handler(
    request: Request,
    exc: MatchingError
) -> JSONResponse:
    """
    Handle errors raised by the matching engine.

    NotFound maps to 404 and DuplicateRegistration to 409.
    """
    status_code = 500
    if isinstance(exc, NotFound):
        status_code = 404
    elif isinstance(exc, DuplicateRegistration):
        status_code = 409

    if status_code >= 500:
        logger.error(f"Matching error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.info(f"Matching request to {request.url.path} rejected: {exc}")

    return _error_response(status_code, str(exc), exc.__class__.__name__)


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Report request body/query validation failures as 400 with per-field messages.
    """
    errors = {}
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(loc) or "request"
        errors.setdefault(field, err.get("msg", "Invalid value"))

    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "error": "Validation failed",
            "type": "ValidationException",
            "errors": jsonable_encoder(errors)
        }
    )


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """
    Handle FastAPI HTTP exceptions with consistent format.

    Args:
        request: The FastAPI request.
        exc: The HTTP exception.

    Returns:
        JSONResponse with error details.
    """
    return _error_response(exc.status_code, exc.detail, "HTTPException")


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions.

    Args:
        request: The FastAPI request.
        exc: The exception.

    Returns:
        JSONResponse with error details.
    """
    logger.exception(f"Unexpected error in {request.url.path}")

    return _error_response(500, "Internal server error", "InternalError")

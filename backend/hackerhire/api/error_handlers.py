"""Error Handlers — global exception handlers for the HackerHire API.

Invariants:
    - HackerHireError → its own http_status and to_response() envelope
    - RequestValidationError → 400 VALIDATION_ERROR listing every violated field
    - Exception (catch-all) → 500 INTERNAL_ERROR, never leaks internal details
    - All three envelopes share {"error": {code, message, category, severity, timestamp}}

Design Decisions:
    - Three-layer handler: domain (HackerHireError), validation (Pydantic), catch-all (Exception)
    - Session user id stamped onto the error context and log record when present,
      so 401/403 noise can be traced to an account
    - Extracted from main.py (ADR: ExMA import fan-out < 10)
"""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from hackerhire.api.dependencies import SESSION_USER_KEY
from hackerhire.core.errors import ErrorCategory, ErrorSeverity, HackerHireError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(HackerHireError, _handle_domain_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)


def _session_user_id(request: Request) -> int | None:
    # SessionMiddleware populates scope["session"]; absent in bare ASGI tests
    if "session" not in request.scope:
        return None
    return request.session.get(SESSION_USER_KEY)


def _envelope(
    code: str, message: str, category: ErrorCategory, severity: ErrorSeverity,
    **extra,
) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            **extra,
        },
    }


async def _handle_domain_error(request: Request, exc: HackerHireError):
    user_id = _session_user_id(request)
    if exc.context.user_id is None:
        exc.context.user_id = user_id
    log = logger.error if exc.http_status >= 500 else logger.warning
    log(
        f"{exc.code} on {request.method} {request.url.path}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path, "user_id": user_id},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def _handle_validation_error(request: Request, exc: RequestValidationError):
    details = [
        {
            "field": ".".join(str(part) for part in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]
    logger.warning(
        f"Validation failed on {request.url.path}: "
        f"{', '.join(d['field'] for d in details)}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            "VALIDATION_ERROR", "Validation error",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR,
            details=details,
        ),
    )


async def _handle_unexpected_error(request: Request, exc: Exception):
    logger.error(
        f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}",
        exc_info=exc,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )

"""Middleware for error handling, logging, and request IDs."""

from __future__ import annotations

import logging
import time
import uuid
from typing import Callable

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from whisper_diary.core.exceptions import (
    WhisperDiaryError,
    ParseError,
    ParseReason,
    EmptyInputError,
    EmptyResultError,
)
from whisper_diary.api.schemas import ErrorResponse

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Error processing files."

# User-facing copy per parse failure reason
PARSE_ERROR_DETAILS: dict[ParseReason, tuple[str, str]] = {
    ParseReason.QUOTING: (
        "INVALID_QUOTING",
        "One of your CSV files has invalid quote formatting. Please check for "
        "mismatched quotes or try re-exporting the file.",
    ),
    ParseReason.COLUMNS: (
        "INVALID_COLUMNS",
        "The CSV files appear to have an incorrect column structure. Please "
        "ensure they match the expected format.",
    ),
    ParseReason.HEADER: (
        "INVALID_COLUMNS",
        "The CSV files appear to have an incorrect column structure. Please "
        "ensure they match the expected format.",
    ),
}
DEFAULT_PARSE_DETAIL = ("INVALID_CSV", "Please ensure they are valid CSV files.")


# ============================================================================
# Request ID Middleware
# ============================================================================

class RequestIDMiddleware(BaseHTTPMiddleware):
    """Add X-Request-ID header to all requests/responses."""
    
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        request.state.request_id = request_id
        request.state.started_at = time.perf_counter()
        
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        
        return response


# ============================================================================
# Logging Middleware
# ============================================================================

class LoggingMiddleware(BaseHTTPMiddleware):
    """Log all requests with timing information."""
    
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        
        request_id = getattr(request.state, "request_id", "unknown")
        client_ip = request.client.host if request.client else "unknown"
        
        response = await call_next(request)
        
        duration_ms = (time.perf_counter() - start_time) * 1000
        status_code = response.status_code
        log_msg = (
            f"{request.method} {request.url.path} - {status_code} - {duration_ms:.1f}ms "
            f"[{request_id}] from {client_ip}"
        )
        
        if status_code >= 500:
            logger.error(log_msg)
        elif status_code >= 400:
            logger.warning(log_msg)
        else:
            logger.info(log_msg)
        
        response.headers["X-Response-Time-Ms"] = f"{duration_ms:.1f}"
        
        return response


# ============================================================================
# Exception Handlers
# ============================================================================

def create_error_response(
    status_code: int,
    error: str,
    code: str,
    request_id: str | None = None,
    details: dict | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Create consistent error response."""
    content = ErrorResponse(
        error=error,
        code=code,
        status=status_code,
        request_id=request_id,
        details=details or None,
    )
    
    return JSONResponse(
        status_code=status_code,
        content=content.model_dump(exclude_none=True),
        headers=headers,
    )


async def merge_error_handler(request: Request, exc: WhisperDiaryError) -> JSONResponse:
    """Map merge failures to classified 422 responses."""
    request_id = getattr(request.state, "request_id", None)
    
    if isinstance(exc, EmptyInputError):
        return create_error_response(
            status_code=422,
            error="Files appear to be empty",
            code="EMPTY_INPUT",
            request_id=request_id,
            details={"message": "Please check that your CSV files contain valid data."},
        )
    
    if isinstance(exc, EmptyResultError):
        return create_error_response(
            status_code=422,
            error="No valid segments were found to merge",
            code="NO_SEGMENTS",
            request_id=request_id,
            details={
                "message": "Please check that your CSV files have the correct "
                "format and contain valid data.",
            },
        )
    
    if isinstance(exc, ParseError):
        code, message = PARSE_ERROR_DETAILS.get(exc.reason, DEFAULT_PARSE_DETAIL)
        logger.warning(f"Parse failure ({exc.reason.value}) [{request_id}]: {exc}")
        details = {"message": message, "reason": exc.reason.value}
        if exc.line is not None:
            details["line"] = exc.line
        return create_error_response(
            status_code=422,
            error=GENERIC_ERROR,
            code=code,
            request_id=request_id,
            details=details,
        )
    
    logger.error(f"Merge error [{request_id}]: {exc}")
    return create_error_response(
        status_code=500,
        error=GENERIC_ERROR,
        code="MERGE_ERROR",
        request_id=request_id,
        details={"message": DEFAULT_PARSE_DETAIL[1]},
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions.
    
    Runs outside the request middleware, so the tracing headers are set here.
    """
    request_id = getattr(request.state, "request_id", None)
    started_at = getattr(request.state, "started_at", None)
    
    logger.exception(f"Unhandled exception [{request_id}]: {exc}")
    
    headers = {}
    if request_id:
        headers["X-Request-ID"] = request_id
    if started_at is not None:
        headers["X-Response-Time-Ms"] = f"{(time.perf_counter() - started_at) * 1000:.1f}"
    
    return create_error_response(
        status_code=500,
        error="Internal server error",
        code="INTERNAL_ERROR",
        request_id=request_id,
        headers=headers,
    )


# ============================================================================
# Setup Function
# ============================================================================

def setup_middleware(app: FastAPI) -> None:
    """Add all middleware to the app.
    
    Middleware is executed in reverse order of addition.
    """
    app.add_exception_handler(WhisperDiaryError, merge_error_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
    
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

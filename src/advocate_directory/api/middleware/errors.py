"""
Error handlers: map exceptions to ``{"success": false, "error": ...}`` responses.

Only generic messages leave the server.  Storage detail (SQL text, driver
messages, tracebacks) stays in the logs written by the ops layer.
"""

from __future__ import annotations

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from advocate_directory.api.schemas.advocates import ErrorEnvelope
from advocate_directory.core.errors import DirectoryError, ErrorCategory
from advocate_directory.core.logging import get_logger

logger = get_logger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred."
INVALID_REQUEST_MESSAGE = "Invalid request parameters."

CATEGORY_TO_STATUS: dict[ErrorCategory, int] = {
    ErrorCategory.STORAGE: 500,
    ErrorCategory.NETWORK: 502,
    ErrorCategory.VALIDATION: 400,
    ErrorCategory.INTERNAL: 500,
}


def status_for_category(category: ErrorCategory) -> int:
    """Resolve an error category to an HTTP status, defaulting to 500."""
    return CATEGORY_TO_STATUS.get(category, 500)


def error_response(*, status: int, message: str) -> JSONResponse:
    """Build a failure envelope response."""
    body = ErrorEnvelope(error=message)
    return JSONResponse(status_code=status, content=body.model_dump())


async def directory_error_handler(request: Request, exc: DirectoryError) -> JSONResponse:
    """Known directory failures: the error's own generic message."""
    logger.warning(
        "request_failed",
        path=request.url.path,
        request_id=getattr(request.state, "request_id", None),
        **exc.to_dict(),
    )
    return error_response(status=status_for_category(exc.category), message=exc.message)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unhandled exceptions: 500 with a generic message."""
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        request_id=getattr(request.state, "request_id", None),
        error_type=type(exc).__name__,
        error=str(exc),
    )
    detail = str(exc) if request.app.state.settings.debug else GENERIC_ERROR_MESSAGE
    return error_response(status=500, message=detail)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Rejected query parameters: 422 in the failure envelope."""
    logger.info(
        "request_invalid",
        path=request.url.path,
        request_id=getattr(request.state, "request_id", None),
        errors=[".".join(str(part) for part in err.get("loc", ())) for err in exc.errors()],
    )
    return error_response(status=422, message=INVALID_REQUEST_MESSAGE)

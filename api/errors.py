"""
API error handling.

Routes catch failures at their boundary and re-raise them as ApiError
with a route-specific ``details`` text; the handlers below render every
failure as ``{success: false, error, details}``.

Responsibility: Uniform error responses for the API
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from api.v1.schemas.attendance import ErrorResponse

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """A request failure to report to the caller."""

    def __init__(self, message: str, details: Optional[str] = None, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.details = details
        self.status_code = status_code


def _error_response(status_code: int, message: str, details: Optional[str]) -> JSONResponse:
    body = ErrorResponse(error=message, details=details)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
    )


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """Render an ApiError raised by a route."""
    return _error_response(exc.status_code, exc.message, exc.details)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global exception handler."""
    logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
    return _error_response(500, str(exc), None)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)

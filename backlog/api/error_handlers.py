"""Error Handlers — maps raised errors to the JSON error envelope of /api/v1.

Invariants:
    - A BacklogError answers with its own http_status and to_response() body;
      5xx codes log at ERROR, 4xx at WARNING, both tagged with tool_name
    - A malformed request envelope answers 400 with one entry per bad field
    - Anything else answers 500 INTERNAL_ERROR and the traceback stays in the log
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from backlog.core.errors import BacklogError, ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_backlog_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_backlog_error_handler(app: FastAPI) -> None:

    @app.exception_handler(BacklogError)
    async def backlog_error_handler(request: Request, exc: BacklogError):
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"BacklogError: {exc.message}",
            extra={
                "error_code": exc.code,
                "tool_name": exc.context.tool_name,
                "path": request.url.path,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": ErrorCategory.INTERNAL.value,
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": ErrorCategory.VALIDATION.value,
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }

"""Error Handlers — turn every failure into the states API error envelope.

Invariants:
    - Every response body is {"message": ..., "error": {code, message, category, severity}}
    - StatesError keeps its own status; framework validation is 400; anything else is 500
    - 500 responses never carry exception text

Design Decisions:
    - Framework and unexpected errors are wrapped in a StatesError so one
      function renders and logs all of them
    - Client-input errors logged at WARNING, 5xx at ERROR
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from statefacts.core.errors import ErrorCategory, ErrorSeverity, StatesError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StatesError, _handle_states_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)


def _render(request: Request, exc: StatesError, **extra_error) -> JSONResponse:
    level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
    logger.log(
        level, f"{exc.code}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    body = exc.to_response()
    body["error"].update(extra_error)
    return JSONResponse(status_code=exc.http_status, content=body)


async def _handle_states_error(request: Request, exc: StatesError) -> JSONResponse:
    return _render(request, exc)


async def _handle_validation_error(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    wrapped = StatesError(
        "Invalid request data", "VALIDATION_ERROR", ErrorCategory.VALIDATION,
        http_status=400,
    )
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    return _render(request, wrapped, details=details)


async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled exception on {request.url.path}", exc_info=exc)
    wrapped = StatesError(
        "An unexpected error occurred", "INTERNAL_ERROR", ErrorCategory.INTERNAL,
        ErrorSeverity.CRITICAL, 500,
    )
    return _render(request, wrapped)

"""Error Handlers — global exception handlers for the assignment API.

Invariants:
    - AssignmentError → structured JSON with error code, message, severity, context
    - RequestValidationError → 400 VALIDATION_ERROR, details name the body field
      (input, substitution, or body for unparseable JSON)
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Three-layer handler: domain (AssignmentError), validation (Pydantic), catch-all (Exception)
    - Domain errors logged at WARNING: a bad request is the client's problem,
      not an incident
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from assignment_api.core.errors import AssignmentError, ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)

REQUEST_SHAPE_MESSAGE = (
    "Request body must be a JSON object with string fields "
    "'input' and 'substitution'"
)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_assignment_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_assignment_error_handler(app: FastAPI) -> None:
    """Register domain error handler (parse, lookup, strategy, input size)."""

    @app.exception_handler(AssignmentError)
    async def assignment_error_handler(request: Request, exc: AssignmentError):
        """Every AssignmentError carries its own status and envelope."""
        logger.warning(
            f"AssignmentError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "substitution": exc.context.substitution,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register request-shape error handler (bad JSON, missing or extra fields)."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Reject bodies that are not {"input": str, "substitution": str}."""
        details = _validation_details(exc)
        logger.warning(
            f"Rejected request body: "
            f"{', '.join(d['field'] for d in details)}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": {
                    "code": "VALIDATION_ERROR",
                    "message": REQUEST_SHAPE_MESSAGE,
                    "category": ErrorCategory.VALIDATION.value,
                    "severity": ErrorSeverity.ERROR.value,
                    "details": details,
                },
            },
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: a strategy bug surfaces as 500 without internals."""
        logger.error(
            f"Unhandled {type(exc).__name__} while serving request: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "The assignment could not be evaluated",
                    "category": ErrorCategory.INTERNAL.value,
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _validation_details(exc: RequestValidationError) -> list[dict]:
    """One entry per problem, field named as in the request body."""
    return [
        {
            "field": _field_name(e),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]


def _field_name(error: dict) -> str:
    # loc is ("body", "input") for a field, ("body", <offset>) for bad JSON
    if error["type"] == "json_invalid":
        return "body"
    parts = [str(part) for part in error["loc"][1:]]
    return ".".join(parts) or "body"

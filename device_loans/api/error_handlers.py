"""
Error Handlers
==============

Global exception handlers mapping errors to the response envelope
{success: false, error: {code, message, details?}}.

- DeviceLoansError        -> its own code and status (MissingConfig 400, NotFound 404, ...)
- InvalidDeviceLoanError  -> 400 InvalidDeviceLoan, details lists every violation
- RequestValidationError  -> 400 ValidationError, details per field
- PyMongoError, Exception -> 500 InternalServerError, details only in development
"""
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from device_loans.core.errors import DeviceLoansError
from device_loans.domain.models.device_loan import InvalidDeviceLoanError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(DeviceLoansError)
    async def device_loans_error_handler(request: Request, exc: DeviceLoansError):
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"{type(exc).__name__} on {request.url.path}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(InvalidDeviceLoanError)
    async def invalid_loan_handler(request: Request, exc: InvalidDeviceLoanError):
        logger.warning(
            f"Rejected device loan on {request.url.path}: {list(exc.errors)}",
            extra={"error_code": "InvalidDeviceLoan", "path": request.url.path},
        )
        return _error_response(
            status.HTTP_400_BAD_REQUEST,
            "InvalidDeviceLoan",
            "Invalid device loan content",
            list(exc.errors),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        details = [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ]
        return _error_response(
            status.HTTP_400_BAD_REQUEST, "ValidationError", "Invalid request data", details,
        )

    @app.exception_handler(PyMongoError)
    async def store_error_handler(request: Request, exc: PyMongoError):
        return _internal_error(request, exc)

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        return _internal_error(request, exc)


def _internal_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=exc,
        extra={"error_code": "InternalServerError", "path": request.url.path},
    )
    settings = request.app.state.settings
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "InternalServerError",
        "An unexpected error occurred while processing the request.",
        str(exc) if settings.is_development else None,
    )


def _error_response(
    status_code: int,
    code: str,
    message: str,
    details: Optional[Any] = None,
) -> JSONResponse:
    error: Dict[str, Any] = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    return JSONResponse(status_code=status_code, content={"success": False, "error": error})

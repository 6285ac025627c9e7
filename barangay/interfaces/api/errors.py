"""Exception handlers rendering domain errors as JSON responses."""

import logging
import uuid

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from barangay.domain.exceptions import BarangayError, ValidationFailedError

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."


def error_body(exc: BarangayError) -> dict:
    body = {"success": False, "message": exc.message, "error_code": exc.code}
    if isinstance(exc, ValidationFailedError):
        body["errors"] = exc.errors
    return body


def register_exception_handlers(app: FastAPI) -> None:
    """Register the domain and catch-all exception handlers on ``app``."""

    @app.exception_handler(BarangayError)
    async def barangay_error_handler(request: Request, exc: BarangayError):
        logger.info(
            "%s %s rejected with %s: %s",
            request.method,
            request.url.path,
            exc.code,
            exc.message,
        )
        return JSONResponse(status_code=exc.status_code, content=error_body(exc))

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        error_id = uuid.uuid4().hex
        logger.error(
            "Unhandled error %s on %s %s",
            error_id,
            request.method,
            request.url.path,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "success": False,
                "message": GENERIC_ERROR_MESSAGE,
                "error_code": "INTERNAL_ERROR",
                "error_id": error_id,
            },
        )


__all__ = ["GENERIC_ERROR_MESSAGE", "register_exception_handlers"]

# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Global exception handlers — map typed errors to the REST error envelope.

SafetyNetError -> its own status code and message
RequestValidationError -> 400 with one entry per offending field
Exception -> 500 without internal details
"""

from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from safetynet.core.errors import SafetyNetError
from safetynet.core.logging import get_logger

logger = get_logger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _request_id(request: Request):
    return getattr(request.state, "request_id", None)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(SafetyNetError)
    async def domain_error_handler(request: Request, exc: SafetyNetError):
        req_id = _request_id(request)
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            "%s on %s: %s", exc.code, request.url.path, exc.message,
            extra={"request_id": req_id},
        )
        return JSONResponse(status_code=exc.http_status, content=exc.to_response(req_id))


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        req_id = _request_id(request)
        logger.warning(
            "Validation error on %s: %s", request.url.path, exc.errors(),
            extra={"request_id": req_id},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc, req_id),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        req_id = _request_id(request)
        logger.exception(
            "Unhandled exception on %s", request.url.path,
            extra={"request_id": req_id},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "status": 500,
                "error": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
                "details": {},
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "request_id": req_id,
            },
        )


def _build_validation_error_response(exc: RequestValidationError, request_id) -> dict:
    return {
        "status": 400,
        "error": "VALIDATION_ERROR",
        "message": "Invalid request data",
        "details": {
            "fields": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "request_id": request_id,
    }

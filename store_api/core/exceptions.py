"""
Application Exception Handling

Single AppException class for all application errors with FastAPI integration.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)

PRODUCTS_PATH = "/products"


class AppException(Exception):
    """
    Unified application exception for all error scenarios.

    The rendered body is flat and generic:

        {"timestamp": "...", "status": 400, "error": "Validation failed", "path": "/products"}

    ``details`` stays server-side. It is logged by the handler and never
    written into the response.

    Usage:
        raise AppException("Validation failed", "VALIDATION_FAILED", 400)

    Error Codes:
        - VALIDATION_FAILED (400)
        - CATALOG_NOT_LOADED (500)
    """

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None,
        path: str = PRODUCTS_PATH
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error label
            code: Machine-readable error code (e.g., "VALIDATION_FAILED")
            status_code: HTTP status code (default: 400)
            details: Additional error context, kept out of the response
            path: Request path reported in the response body
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        self.path = path
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        return {
            "timestamp": self.timestamp,
            "status": self.status_code,
            "error": self.message,
            "path": self.path,
        }


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    FastAPI exception handler for AppException.

    Converts AppException to consistent JSON error response.
    """
    if exc.details:
        logger.info(f"{exc.code} on {request.url.path}: {exc.details}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def request_validation_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Map schema-level failures (bad JSON, wrong types, unknown enum values)
    onto the same generic 400 body as validator failures.
    """
    app_exc = validation_failed(
        [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()]
    )
    return await app_exception_handler(request, app_exc)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def validation_failed(violations: Optional[list] = None) -> AppException:
    """Create generic validation failure exception."""
    details = {"violations": violations} if violations else {}
    return AppException("Validation failed", "VALIDATION_FAILED", 400, details)


def catalog_not_loaded() -> AppException:
    """Create catalog not loaded exception."""
    return AppException(
        "Product catalog not loaded",
        "CATALOG_NOT_LOADED",
        500
    )

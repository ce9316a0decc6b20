"""
FastAPI middleware and global exception handlers.

Provides:
- Request ID tracking middleware
- Global exception handlers turning store failures into 500 responses
- Structured error responses
"""

import logging
import time
import uuid
from typing import Callable

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from citygraph.core.constants import INTERNAL_ERROR_MESSAGE
from citygraph.core.error_handlers import CityGraphException

logger = logging.getLogger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Add unique request ID to each request.

    The request ID is:
    - Generated as UUID4
    - Attached to request.state.request_id
    - Included in response headers as X-Request-ID
    - Included in request lifecycle log messages
    """

    async def dispatch(self, request: Request, call_next: Callable):
        """
        Process request and add request ID with lifecycle logging.

        Args:
            request: Incoming request
            call_next: Next middleware/endpoint handler

        Returns:
            Response with X-Request-ID header
        """
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        start_time = time.time()

        logger.info(
            "Request started",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "client_ip": request.client.host if request.client else None,
            },
        )

        # Domain errors come back as responses; anything else propagates here
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                "Unhandled exception",
                extra={"request_id": request_id, "exception_type": type(exc).__name__},
                exc_info=True,
            )
            response = error_response(request_id, str(exc))

        duration_ms = int((time.time() - start_time) * 1000)

        logger.info(
            "Request completed",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            },
        )

        response.headers["X-Request-ID"] = request_id
        return response


def error_response(
    request_id: str, details: str, error_code: str = "INTERNAL_ERROR"
) -> JSONResponse:
    """
    Build the 500 body shared by all failure paths.

    Args:
        request_id: Current request ID
        details: Underlying failure text
        error_code: Machine-readable error code

    Returns:
        JSONResponse with status 500
    """
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": INTERNAL_ERROR_MESSAGE,
            "details": details,
            "error_code": error_code,
            "request_id": request_id,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all custom exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(CityGraphException)
    async def citygraph_exception_handler(
        request: Request, exc: CityGraphException
    ) -> JSONResponse:
        """Handle store and projection failures with 500 response."""
        request_id = getattr(request.state, "request_id", "unknown")

        logger.error(
            exc.message,
            extra={
                "request_id": request_id,
                "error_code": exc.error_code,
                "details": exc.details,
            },
        )

        return error_response(request_id, exc.reason, exc.error_code)

    @app.exception_handler(Exception)
    async def generic_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle all unhandled exceptions with 500 response."""
        request_id = getattr(request.state, "request_id", "unknown")

        logger.error(
            "Unhandled exception",
            extra={"request_id": request_id, "exception_type": type(exc).__name__},
            exc_info=True,
        )

        return error_response(request_id, str(exc))

"""
Exception handlers for the FastAPI application.

Converts application exceptions to HTTP responses with the same
{"detail": ...} body shape FastAPI uses for HTTPException.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from application.exceptions import RepositoryError

logger = logging.getLogger(__name__)


async def repository_error_handler(request: Request, exc: RepositoryError) -> JSONResponse:
    """Data store failures surface as 502: the upstream query service failed."""
    logger.error(f"{request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=502,
        content={
            "detail": "Data store request failed",
            "table": exc.table,
            "operation": exc.operation,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all application exception handlers."""
    app.add_exception_handler(RepositoryError, repository_error_handler)

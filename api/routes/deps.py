"""Route dependencies and helpers

Provides clean access to application state without Law of Demeter violations,
and the mapping from domain errors to HTTP responses.
"""
import logging

from fastapi import HTTPException, Request

from app_state import AppState
from errors import (
    ConflictError,
    EngineUnavailableError,
    NamespaceError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_CODES = (
    (NotFoundError, 404),
    (ConflictError, 409),
    (ValidationError, 400),
    (EngineUnavailableError, 503),
)


def get_app_state(request: Request) -> AppState:
    """Get AppState from request

    Encapsulates the request.app.state.app_state chain to fix
    Law of Demeter violation in all routes.

    Usage:
        @router.get("/example")
        async def example(request: Request):
            app_state = get_app_state(request)
            # Use app_state directly
    """
    return request.app.state.app_state


def domain_http_error(error: NamespaceError) -> HTTPException:
    """Translate a request-time domain error into an HTTPException"""
    for error_type, status_code in _STATUS_CODES:
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))
    logger.error(f"Unmapped domain error: {error!r}")
    return HTTPException(status_code=500, detail=str(error))

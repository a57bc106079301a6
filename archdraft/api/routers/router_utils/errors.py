"""
Exception to HTTP status mapping.

Dependencies: fastapi, archdraft.core.exceptions, archdraft.observability
System role: Error translation for routers
"""

import logging

from fastapi import HTTPException, status

from archdraft.core.exceptions import (
    ArchdraftException,
    AuthenticationError,
    DiagramGenerationError,
    DiagramNotFoundError,
    GenerationCapabilityError,
    ProjectNotFoundError,
    ValidationError,
)
from archdraft.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
)

logger = logging.getLogger(__name__)

_STATUS_BY_EXCEPTION: tuple[tuple[type[ArchdraftException], int], ...] = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (ProjectNotFoundError, status.HTTP_404_NOT_FOUND),
    (DiagramNotFoundError, status.HTTP_404_NOT_FOUND),
    (DiagramGenerationError, status.HTTP_502_BAD_GATEWAY),
    (GenerationCapabilityError, status.HTTP_502_BAD_GATEWAY),
)


def status_for(exc: ArchdraftException) -> int:
    """HTTP status for an application exception (500 when unmapped)."""
    for exc_type, code in _STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def to_http_exception(exc: ArchdraftException, operation: str, **context) -> HTTPException:
    """
    Translate an application exception into an HTTPException.

    Server-side failures are logged with their details; client errors
    only carry their message back. Context fields (user_id, project_id,
    diagram_id) are attached to the log record.
    """
    code = status_for(exc)
    if code >= 500:
        log_exception_with_context(
            logger,
            f"{__name__}:to_http_exception - {operation} failed",
            exc,
            operation=operation,
            **context,
        )
    else:
        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:to_http_exception - {operation} rejected with {code}",
            exc=exc,
            operation=operation,
            status_code=code,
            error_msg=exc.message,
            **context,
        )
    return HTTPException(status_code=code, detail=exc.message)

"""
HTTP observability middleware.

CorrelationMiddleware scopes each request to a correlation id and echoes
it in the response header. RequestLoggingMiddleware writes one line when
a request arrives and one when it completes or fails, with the route's
project and diagram ids lifted from the path so they line up with the
service logs.

Dependencies: fastapi, starlette, archdraft.observability
System role: Request/response observability injection
"""

import logging
import re
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from archdraft.observability.correlation import CORRELATION_HEADER, correlation_scope
from archdraft.observability.log_utils import log_exception_with_context, log_with_context

logger = logging.getLogger(__name__)

_PROJECT_PATH = re.compile(
    r"/projects/(?P<project_id>[^/]+)(?:/diagrams/(?P<diagram_id>[^/]+))?"
)


def path_context(path: str) -> dict[str, str]:
    """project_id and diagram_id found in an API path."""
    match = _PROJECT_PATH.search(path)
    if match is None:
        return {}
    return {key: value for key, value in match.groupdict().items() if value}


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request with its outcome and duration."""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        method, path = request.method, request.url.path
        context = path_context(path)

        log_with_context(
            logger,
            logging.INFO,
            f"{method} {path}",
            method=method,
            path=path,
            client_host=request.client.host if request.client else None,
            **context,
        )
        try:
            response: Response = await call_next(request)
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{method} {path} - Exception",
                e,
                method=method,
                path=path,
                process_time_ms=_elapsed_ms(start),
                **context,
            )
            raise

        log_with_context(
            logger,
            logging.WARNING if response.status_code >= 500 else logging.INFO,
            f"{method} {path} - {response.status_code}",
            method=method,
            path=path,
            status_code=response.status_code,
            process_time_ms=_elapsed_ms(start),
            **context,
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Scope the request to a correlation id and echo it back."""

    async def dispatch(self, request: Request, call_next):
        with correlation_scope(request.headers.get(CORRELATION_HEADER)) as correlation_id:
            response: Response = await call_next(request)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response

"""
Request correlation ids.

Each API request runs under one correlation id, taken from the caller's
X-Correlation-ID header when it is a safe token and generated otherwise.
The id lives in a contextvar, so records logged from routers, services and
the threadpool-run generation loop all carry it.

Dependencies: contextvars, re, uuid
System role: Request tracing across the API and the generation core
"""

import re
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

CORRELATION_HEADER = "X-Correlation-ID"
MAX_CORRELATION_ID_LENGTH = 128

_SAFE_ID = re.compile(r"^[A-Za-z0-9._:-]+$")
_correlation_id: ContextVar[str] = ContextVar("archdraft_correlation_id", default="")


def normalize_correlation_id(candidate: str | None) -> str:
    """Return candidate when it is a short header-safe token, else a fresh id."""
    value = (candidate or "").strip()
    if value and len(value) <= MAX_CORRELATION_ID_LENGTH and _SAFE_ID.match(value):
        return value
    return uuid.uuid4().hex


def set_correlation_id(correlation_id: str | None = None) -> str:
    """
    Make correlation_id (or a generated one) current.

    Returns:
        str: The id now in effect
    """
    value = normalize_correlation_id(correlation_id)
    _correlation_id.set(value)
    return value


def get_correlation_id() -> str:
    """Current correlation id, empty outside a request."""
    return _correlation_id.get()


def clear_correlation_id() -> None:
    _correlation_id.set("")


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Run a block under a correlation id, restoring the previous one afterwards."""
    token = _correlation_id.set(normalize_correlation_id(correlation_id))
    try:
        yield _correlation_id.get()
    finally:
        _correlation_id.reset(token)

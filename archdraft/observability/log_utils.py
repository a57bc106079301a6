"""
Structured logging helpers for archdraft.

Log records for project and diagram work carry a small set of context
fields (user_id, project_id, diagram_id, diagram_kind) as record
attributes so request logs can be filtered per project. Values are
rendered defensively: collections are summarised, long text (prompts,
Mermaid sources) is truncated, and None fields are left off the record.

Application exceptions contribute their own context: any context field
found in ArchdraftException.details is lifted onto the record unless the
caller already supplied it.

Dependencies: logging (stdlib), archdraft.core.exceptions
System role: Project-aware log context for routers and services
"""

import enum
import logging
from typing import Any

from archdraft.core.exceptions import ArchdraftException

CONTEXT_FIELDS = ("user_id", "project_id", "diagram_id", "diagram_kind")

MAX_VALUE_LENGTH = 500


def safe_log_value(value: Any, max_length: int = MAX_VALUE_LENGTH) -> str:
    """
    Render a value for a log record attribute.

    Args:
        value: Value to render
        max_length: Length beyond which text is truncated

    Returns:
        str: Printable representation; never raises
    """
    if value is None:
        return "None"
    try:
        if isinstance(value, enum.Enum):
            text = str(value.value)
        elif isinstance(value, str):
            text = value
        elif isinstance(value, dict):
            text = f"dict({len(value)} keys)"
        elif isinstance(value, (list, tuple)):
            text = f"{type(value).__name__}({len(value)} items)"
        else:
            text = str(value)
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"

    if len(text) > max_length:
        return f"{text[:max_length]}... (truncated, {len(text)} total)"
    return text


def build_log_context(exc: BaseException | None = None, **context: Any) -> dict[str, str]:
    """
    Assemble the ``extra`` mapping for a log call.

    None values are dropped. When exc is an ArchdraftException, context
    fields present in its details fill in whatever the caller left out.
    """
    merged = {key: value for key, value in context.items() if value is not None}
    if isinstance(exc, ArchdraftException):
        for field in CONTEXT_FIELDS:
            if field not in merged and exc.details.get(field) is not None:
                merged[field] = exc.details[field]
    return {key: safe_log_value(value) for key, value in merged.items()}


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    exc: BaseException | None = None,
    **context: Any,
) -> None:
    """Log message at level with project context (and exc's, if given) on the record."""
    logger.log(level, message, extra=build_log_context(exc, **context))


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context: Any,
) -> None:
    """
    Log exc with its traceback and project context.

    Records get ``error_type`` and ``error_msg``; for application exceptions
    ``error_msg`` is the bare message and ``details`` summarises the rest.

    Args:
        logger: Logger to emit on
        message: Log message
        exc: Exception being reported
        **context: Context fields such as project_id or operation
    """
    extra = build_log_context(exc, **context)
    extra["error_type"] = type(exc).__name__
    if isinstance(exc, ArchdraftException):
        extra["error_msg"] = safe_log_value(exc.message)
        extra.setdefault("details", safe_log_value(exc.details))
    else:
        extra["error_msg"] = safe_log_value(str(exc))
    logger.error(message, exc_info=exc, extra=extra)

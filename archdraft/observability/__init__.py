"""
Observability module.

Logging configuration, correlation IDs, and HTTP middleware.
"""

from archdraft.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from archdraft.observability.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "set_correlation_id",
    "get_correlation_id",
    "clear_correlation_id",
]

"""
Router utility functions.

Contains helper functions extracted from router endpoints to keep them clean.
"""

from archdraft.api.routers.router_utils.errors import status_for, to_http_exception

__all__ = [
    "status_for",
    "to_http_exception",
]

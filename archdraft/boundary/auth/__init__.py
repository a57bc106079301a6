"""Caller identity boundary."""

from archdraft.boundary.auth.jwt_identity import (
    CurrentUser,
    decode_token,
    get_current_user,
    issue_token,
)

__all__ = ["CurrentUser", "decode_token", "get_current_user", "issue_token"]

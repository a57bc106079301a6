"""
JWT bearer identity resolution.

Decodes the caller's bearer token with PyJWT and exposes the user id
claim as a FastAPI dependency.

Dependencies: jwt (PyJWT), fastapi, archdraft.configs
System role: Identity boundary for HTTP routes
"""

import logging
from dataclasses import dataclass

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from archdraft.configs import Settings, get_settings
from archdraft.configs.auth import AuthSettings
from archdraft.core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class CurrentUser:
    """Authenticated caller."""

    user_id: str
    token: str


def decode_token(token: str, auth: AuthSettings) -> CurrentUser:
    """
    Verify a JWT and extract the user id claim.

    Args:
        token: Raw JWT (without the "Bearer " prefix)
        auth: JWT verification settings

    Returns:
        CurrentUser: Resolved caller

    Raises:
        AuthenticationError: If the token is invalid, expired or lacks the claim
    """
    try:
        claims = jwt.decode(token, auth.jwt_secret, algorithms=[auth.jwt_algorithm])
    except jwt.PyJWTError as e:
        raise AuthenticationError(f"Invalid token: {e}") from e

    user_id = claims.get(auth.user_id_claim)
    if user_id is None or str(user_id).strip() == "":
        raise AuthenticationError(
            "Token has no user id claim",
            details={"claim": auth.user_id_claim},
        )
    return CurrentUser(user_id=str(user_id), token=token)


def issue_token(user_id: str, auth: AuthSettings, **extra_claims) -> str:
    """Sign a token for user_id (used by tooling and tests)."""
    payload = {auth.user_id_claim: user_id, **extra_claims}
    return jwt.encode(payload, auth.jwt_secret, algorithm=auth.jwt_algorithm)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> CurrentUser:
    """
    FastAPI dependency resolving the caller from the Authorization header.

    Raises:
        HTTPException: 401 if the header is missing or the token is invalid
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing bearer token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return decode_token(credentials.credentials, settings.auth)
    except AuthenticationError as e:
        logger.warning(f"{__name__}:get_current_user - {e.message}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        ) from e

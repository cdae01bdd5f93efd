"""Shared authorization helpers for API v1 route modules."""

from __future__ import annotations

import logging

from advisory.auth.jwt import decode_jwt
from advisory.auth.session import AuthSession, load_session
from advisory.core.config import get_config
from advisory.core.exceptions import AuthenticationError, AuthorizationError
from advisory.database.table_reader import TableReader

logger = logging.getLogger(__name__)


def _extract_bearer_token(authorization: str | None) -> str:
    if authorization is None or not authorization.strip():
        raise AuthenticationError("Authorization header is required.")
    parts = authorization.strip().split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise AuthenticationError("Authorization header must use Bearer token.")
    return parts[1].strip()


def authenticate(authorization: str | None, reader: TableReader) -> AuthSession:
    """Resolve the caller's session or raise ``AuthenticationError``."""
    token = _extract_bearer_token(authorization)
    claims = decode_jwt(token, secret=get_config().JWT_SECRET)
    return load_session(reader, str(claims["sub"]))


def resolve_session(authorization: str | None, reader: TableReader) -> AuthSession:
    """Resolve the caller's session, treating any auth failure as signed out."""
    if authorization is None or not authorization.strip():
        return AuthSession.anonymous()
    try:
        return authenticate(authorization, reader)
    except AuthenticationError as exc:
        logger.info(
            "auth.session.rejected",
            extra={"event": "auth.session.rejected", "reason": str(exc)},
        )
        return AuthSession.anonymous()


def map_auth_error(exc: Exception) -> tuple[int, str]:
    if isinstance(exc, AuthenticationError):
        return 401, str(exc)
    if isinstance(exc, AuthorizationError):
        return 403, str(exc)
    return 401, "Unauthorized."

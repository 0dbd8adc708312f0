"""Bearer token verification against the external identity provider's secret."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from smartturf.core.config import Settings, settings as default_settings
from smartturf.core.exceptions import ForbiddenError, UnauthorizedError
from smartturf.dependencies import get_config

bearer_scheme = HTTPBearer(auto_error=False)
logger = logging.getLogger(__name__)


class TokenDecodeError(RuntimeError):
    """Raised when an access token cannot be decoded."""


def decode_access_token(token: str, config: Optional[Settings] = None) -> Dict[str, Any]:
    """Decode a JWT access token using the shared auth secret."""

    config = config or default_settings

    if not token:
        raise TokenDecodeError("Token must not be empty")

    try:
        return jwt.decode(
            token.strip(),
            config.SECRET_KEY,
            algorithms=[config.ALGORITHM],
        )
    except JWTError as exc:
        logger.info("Rejected access token: %s", exc)
        raise TokenDecodeError("Invalid or expired token") from exc


def extract_user_id(payload: Dict[str, Any]) -> int:
    """Return the caller's user id from the ``sub`` claim, or the legacy ``id`` claim."""

    raw_user_id = payload.get("sub", payload.get("id"))
    if raw_user_id is None:
        raise TokenDecodeError("Token payload missing subject")
    if isinstance(raw_user_id, bool):
        raise TokenDecodeError(f"Invalid subject: {raw_user_id}")
    try:
        return int(raw_user_id)
    except (TypeError, ValueError) as exc:
        raise TokenDecodeError(f"Invalid subject: {raw_user_id}") from exc


def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    config: Settings = Depends(get_config),
) -> int:
    """Validate the bearer token and return the authenticated user id.

    A missing credential yields 401; a credential that fails verification or
    carries no usable user id yields 403.
    """

    if (
        credentials is None
        or not credentials.scheme
        or credentials.scheme.lower() != "bearer"
    ):
        raise UnauthorizedError()

    try:
        payload = decode_access_token(credentials.credentials, config)
        return extract_user_id(payload)
    except TokenDecodeError as exc:
        raise ForbiddenError() from exc


__all__ = [
    "TokenDecodeError",
    "decode_access_token",
    "extract_user_id",
    "get_current_user_id",
]

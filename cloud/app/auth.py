"""API key authentication and per-user identity."""

import hashlib

from fastapi import Depends, HTTPException, Security, status
from fastapi.security import APIKeyHeader

from .config import settings

DEV_USER = "dev_mode"

# Security scheme for API key in header
api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


async def verify_api_key(api_key: str = Security(api_key_header)) -> str:
    """Check the X-API-Key header against the configured keys.

    When no keys are configured the API runs in development mode and every
    request is accepted as the same user.

    Raises:
        HTTPException: 401 if the key is missing or invalid
    """
    valid_keys = settings.get_valid_api_keys()

    if not valid_keys:
        return DEV_USER

    if not api_key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing API key. Provide X-API-Key header.",
        )

    if api_key not in valid_keys:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid API key",
        )

    return api_key


def get_user_id_from_key(api_key: str) -> str:
    """Derive a stable, filesystem-safe user id from an API key.

    The key itself never ends up in a directory name.
    """
    if api_key == DEV_USER:
        return DEV_USER
    return "u_" + hashlib.sha256(api_key.encode("utf-8")).hexdigest()[:16]


async def get_current_user(api_key: str = Depends(verify_api_key)) -> str:
    return get_user_id_from_key(api_key)

"""
Authentication.

The catalog has no accounts of its own: the hosting platform injects a user
identity header for signed-in visitors. A request counts as authenticated
when that header is present and non-empty. Only the unfiltered tool listing
enforces it today; the other read endpoints are public.
"""

from fastapi import HTTPException, Request, status
from pydantic import BaseModel

from netbox_config.settings import Settings

settings = Settings()


class Identity(BaseModel):
    """Caller identity taken from the platform header."""

    user_id: str


def identity_from_headers(request: Request, header_name: str | None = None) -> Identity | None:
    """Return the caller identity, or None when the header is missing/blank."""
    header_name = header_name or settings.AUTH_USER_HEADER
    user_id = (request.headers.get(header_name) or "").strip()
    if not user_id:
        return None
    return Identity(user_id=user_id)


async def require_user(request: Request) -> Identity:
    """
    Dependency: reject anonymous callers with 401 before any query runs.

    Raises:
        HTTPException: 401 if the identity header is absent
    """
    identity = identity_from_headers(request)
    if identity is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return identity

"""
Authentication dependencies.

A bearer token, when present and valid, becomes an `Identity`. Anything
else (no header, garbage, bad signature, expired) leaves the request
anonymous; routes that need more use the `require_*` dependencies below,
which raise UnauthorizedError.
"""

import re
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Request

from ourimpact.core.exceptions import UnauthorizedError
from ourimpact.utils.security import verify_token


@dataclass(frozen=True)
class Identity:
    """Who is calling, as read from a verified token."""

    username: str
    is_admin: bool = False


def get_token_from_request(request: Request) -> Optional[str]:
    """
    Extract the bearer token from the Authorization header.

    A leading "Bearer" is stripped case-insensitively, with or without
    a space after it.

    Args:
        request: FastAPI request object

    Returns:
        Token string, or None if the header is missing or empty
    """
    auth_header = request.headers.get("Authorization")
    if not auth_header:
        return None

    token = re.sub(r"^bearer", "", auth_header.strip(), flags=re.IGNORECASE).strip()
    return token or None


def identity_from_token(token: Optional[str]) -> Optional[Identity]:
    """Decode a token into an Identity, or None if it cannot be trusted."""
    if not token:
        return None

    payload = verify_token(token)
    if not payload:
        return None

    username = payload.get("sub")
    if not isinstance(username, str) or not username:
        return None
    return Identity(username=username, is_admin=payload.get("is_admin") is True)


def get_identity(request: Request) -> Optional[Identity]:
    """Identity of the caller, or None for anonymous requests. Never raises."""
    return identity_from_token(get_token_from_request(request))


def ensure_authenticated(identity: Optional[Identity]) -> Identity:
    if identity is None:
        raise UnauthorizedError("Unauthorized")
    return identity


def ensure_admin(identity: Optional[Identity]) -> Identity:
    if identity is None or not identity.is_admin:
        raise UnauthorizedError("Unauthorized")
    return identity


def ensure_owner_or_admin(identity: Optional[Identity], username: str) -> Identity:
    """
    Pass if the caller is an admin or is `username` itself.

    Raises:
        UnauthorizedError: Otherwise, including for anonymous callers
    """
    if identity is None:
        raise UnauthorizedError("Unauthorized")
    if not (identity.is_admin or identity.username == username):
        raise UnauthorizedError("Unauthorized")
    return identity


async def require_user(identity: Optional[Identity] = Depends(get_identity)) -> Identity:
    """Dependency for routes open to any logged-in user."""
    return ensure_authenticated(identity)


async def require_admin(identity: Optional[Identity] = Depends(get_identity)) -> Identity:
    """Dependency for admin-only routes."""
    return ensure_admin(identity)


async def require_owner_or_admin(
    username: str,
    identity: Optional[Identity] = Depends(get_identity),
) -> Identity:
    """
    Dependency for routes with a `{username}` path parameter.

    Only that user or an admin gets through.
    """
    return ensure_owner_or_admin(identity, username)

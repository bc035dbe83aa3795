"""Bearer token issue and lookup."""

import hashlib
import secrets
from datetime import UTC, datetime, timedelta

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fireprotect.errors import UnauthorizedError
from fireprotect.models import AccessToken

__all__ = ["hash_token", "issue_token", "parse_bearer", "resolve_user_id"]


def hash_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def parse_bearer(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header value."""
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


async def resolve_user_id(session: AsyncSession, token: str | None) -> str:
    """Return the user id the token belongs to.

    Raises UnauthorizedError when the token is absent, unknown or expired.
    """
    if not token:
        raise UnauthorizedError("No authorization header")

    result = await session.execute(
        select(AccessToken).where(AccessToken.token_hash == hash_token(token))
    )
    access_token = result.scalar_one_or_none()
    if access_token is None:
        raise UnauthorizedError("Unauthorized")

    now = datetime.now(UTC).replace(tzinfo=None)  # Use naive UTC for SQLite
    if access_token.expires_at is not None and access_token.expires_at <= now:
        raise UnauthorizedError("Unauthorized")

    return access_token.user_id


async def issue_token(
    session: AsyncSession,
    user_id: str,
    ttl: timedelta | None = None,
) -> str:
    """Create a token for ``user_id`` and return it. Only its hash is stored."""
    token = secrets.token_urlsafe(32)
    expires_at = None
    if ttl is not None:
        expires_at = datetime.now(UTC).replace(tzinfo=None) + ttl
    session.add(AccessToken(token_hash=hash_token(token), user_id=user_id, expires_at=expires_at))
    await session.commit()
    return token

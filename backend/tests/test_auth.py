"""Tests for bearer token parsing and resolution."""

from datetime import timedelta

import pytest

from fireprotect.errors import UnauthorizedError
from fireprotect.models import AccessToken
from fireprotect.services.auth_service import hash_token, issue_token, parse_bearer, resolve_user_id


@pytest.mark.parametrize(
    ("header", "expected"),
    [
        ("Bearer abc123", "abc123"),
        ("bearer abc123", "abc123"),
        ("  Bearer   abc123  ", "abc123"),
        ("Basic dXNlcjpwYXNz", None),
        ("Bearer", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_bearer(header, expected):
    assert parse_bearer(header) == expected


@pytest.mark.asyncio
async def test_issued_token_resolves_to_user(session):
    token = await issue_token(session, "user-1")

    assert await resolve_user_id(session, token) == "user-1"


@pytest.mark.asyncio
async def test_only_token_hash_is_stored(session):
    token = await issue_token(session, "user-1")

    stored = await session.get(AccessToken, hash_token(token))
    assert stored is not None
    assert await session.get(AccessToken, token) is None


@pytest.mark.asyncio
async def test_missing_token(session):
    with pytest.raises(UnauthorizedError, match="No authorization header"):
        await resolve_user_id(session, None)


@pytest.mark.asyncio
async def test_unknown_token(session):
    with pytest.raises(UnauthorizedError, match="Unauthorized"):
        await resolve_user_id(session, "forged")


@pytest.mark.asyncio
async def test_expired_token(session):
    token = await issue_token(session, "user-1", ttl=timedelta(seconds=-1))

    with pytest.raises(UnauthorizedError):
        await resolve_user_id(session, token)

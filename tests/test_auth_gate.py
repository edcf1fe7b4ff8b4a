"""
Tests for the authorization gate: token parsing, identity and the
ensure_* predicates.
"""

from datetime import timedelta

import pytest
from jose import jwt
from starlette.requests import Request

from ourimpact.core.exceptions import UnauthorizedError
from ourimpact.dependencies.auth import (
    Identity,
    ensure_admin,
    ensure_authenticated,
    ensure_owner_or_admin,
    get_identity,
    get_token_from_request,
    identity_from_token,
)
from ourimpact.utils.security import create_access_token


def make_request(authorization=None) -> Request:
    headers = []
    if authorization is not None:
        headers.append((b"authorization", authorization.encode()))
    return Request({"type": "http", "method": "GET", "path": "/", "headers": headers})


@pytest.mark.parametrize(
    "header",
    ["Bearer abc.def", "bearer abc.def", "BEARER   abc.def  ", "Bearerabc.def", "abc.def"],
)
def test_token_prefix_is_stripped_case_insensitively(header):
    assert get_token_from_request(make_request(header)) == "abc.def"


@pytest.mark.parametrize("header", [None, "", "Bearer", "Bearer   "])
def test_missing_token(header):
    assert get_token_from_request(make_request(header)) is None


def test_valid_token_gives_identity():
    token = create_access_token("alice")
    identity = get_identity(make_request(f"Bearer {token}"))

    assert identity == Identity(username="alice", is_admin=False)


def test_token_glued_to_bearer_gives_identity():
    token = create_access_token("alice")

    assert get_identity(make_request(f"Bearer{token}")) == Identity(username="alice")


def test_admin_flag_is_read_from_token():
    token = create_access_token("root", is_admin=True)

    assert identity_from_token(token) == Identity(username="root", is_admin=True)


@pytest.mark.parametrize(
    "token",
    [
        "not-a-token",
        jwt.encode({"sub": "alice", "is_admin": True}, "some-other-secret", algorithm="HS256"),
        create_access_token("alice", expires_delta=timedelta(seconds=-10)),
    ],
    ids=["garbage", "wrong-signature", "expired"],
)
def test_untrusted_tokens_are_anonymous(token):
    """Verification failures never raise; the caller is just anonymous."""
    assert get_identity(make_request(f"Bearer {token}")) is None


def test_token_without_subject_is_anonymous():
    from ourimpact.config import settings

    token = jwt.encode({"is_admin": True}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

    assert identity_from_token(token) is None


def test_ensure_authenticated():
    alice = Identity("alice")
    assert ensure_authenticated(alice) is alice

    with pytest.raises(UnauthorizedError):
        ensure_authenticated(None)


def test_ensure_admin():
    admin = Identity("root", is_admin=True)
    assert ensure_admin(admin) is admin

    with pytest.raises(UnauthorizedError):
        ensure_admin(Identity("alice"))
    with pytest.raises(UnauthorizedError):
        ensure_admin(None)


IDENTITIES = [
    None,
    Identity("alice"),
    Identity("bob"),
    Identity("root", is_admin=True),
    Identity("alice", is_admin=True),
]


@pytest.mark.parametrize("identity", IDENTITIES)
@pytest.mark.parametrize("target", ["alice", "bob", "carol"])
def test_owner_or_admin_matrix(identity, target):
    """Passes exactly when the caller is an admin or is the target user."""
    allowed = identity is not None and (identity.is_admin or identity.username == target)

    if allowed:
        assert ensure_owner_or_admin(identity, target) is identity
    else:
        with pytest.raises(UnauthorizedError):
            ensure_owner_or_admin(identity, target)


def test_owner_match_is_exact():
    with pytest.raises(UnauthorizedError):
        ensure_owner_or_admin(Identity("Alice"), "alice")

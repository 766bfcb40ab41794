"""Tests for the in-memory user and session store."""

from __future__ import annotations

import pytest

from style_advisor.services.errors import (
    ConflictError,
    InvalidInputError,
    NotFoundError,
    UnauthenticatedError,
    UnauthorizedError,
)
from style_advisor.services.users import PasswordHasher, UserStore


@pytest.fixture()
def store() -> UserStore:
    return UserStore()


def test_register_returns_token_and_trimmed_username(store: UserStore) -> None:
    result = store.register("  alice ", "pw1", {"height": 170})

    assert result["username"] == "alice"
    assert result["token"]
    assert store.get_current_user(result["token"]) == {
        "userId": result["userId"],
        "username": "alice",
        "profile": {"height": 170},
    }


def test_register_same_username_conflicts_case_insensitively(store: UserStore) -> None:
    store.register("alice", "pw1")

    with pytest.raises(ConflictError):
        store.register("alice", "other")
    with pytest.raises(ConflictError):
        store.register("ALICE", "other")


@pytest.mark.parametrize(
    ("username", "password"),
    [(None, "pw"), ("", "pw"), ("   ", "pw"), ("bob", None), ("bob", "")],
)
def test_register_requires_username_and_password(
    store: UserStore, username: str | None, password: str | None
) -> None:
    with pytest.raises(InvalidInputError):
        store.register(username, password)


def test_passwords_are_not_stored_in_plaintext(store: UserStore) -> None:
    result = store.register("alice", "pw1")

    user = store._users[result["userId"]]
    assert user.password_hash != "pw1"
    assert PasswordHasher().verify("pw1", user.password_hash)


def test_login_issues_distinct_tokens(store: UserStore) -> None:
    first = store.register("alice", "pw1")
    store.register("bob", "pw2")

    tokens = {first["token"]}
    for _ in range(3):
        result = store.login("Alice", "pw1")
        assert result["token"] not in tokens
        tokens.add(result["token"])
    tokens.add(store.login("bob", "pw2")["token"])

    assert len(tokens) == 5


def test_login_rejects_bad_credentials(store: UserStore) -> None:
    store.register("alice", "pw1")

    with pytest.raises(UnauthorizedError):
        store.login("alice", "PW1")
    with pytest.raises(UnauthorizedError):
        store.login("mallory", "pw1")
    with pytest.raises(InvalidInputError):
        store.login("alice", "")


def test_login_returns_profile(store: UserStore) -> None:
    store.register("alice", "pw1", {"skinTone": "warm"})

    assert store.login("alice", "pw1")["profile"] == {"skinTone": "warm"}


def test_logout_invalidates_token_and_is_idempotent(store: UserStore) -> None:
    token = store.register("alice", "pw1")["token"]
    other = store.login("alice", "pw1")["token"]

    store.logout(token)
    store.logout(token)
    store.logout(None)
    store.logout("unknown")

    with pytest.raises(UnauthenticatedError):
        store.get_current_user(token)
    assert store.get_current_user(other)["username"] == "alice"


def test_resolve_session_requires_known_token(store: UserStore) -> None:
    result = store.register("alice", "pw1")

    session = store.resolve_session(result["token"])

    assert session.user_id == result["userId"]
    with pytest.raises(UnauthenticatedError):
        store.resolve_session(None)
    with pytest.raises(UnauthenticatedError):
        store.resolve_session("nope")


def test_current_user_missing_record_is_not_found(store: UserStore) -> None:
    result = store.register("alice", "pw1")
    del store._users[result["userId"]]

    with pytest.raises(NotFoundError):
        store.get_current_user(result["token"])


def test_update_profile_merges_shallowly(store: UserStore) -> None:
    token = store.register("alice", "pw1", {"height": 170, "bodyType": "athletic"})["token"]

    profile = store.update_profile(token, {"height": 172, "gender": "female"})

    assert profile == {"height": 172, "bodyType": "athletic", "gender": "female"}
    assert store.get_current_user(token)["profile"] == profile

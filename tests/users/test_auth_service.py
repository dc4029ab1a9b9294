from __future__ import annotations

import pytest

from worktrack.auth.session_store import SessionStore
from worktrack.core.constants import SESSION_KEY
from worktrack.core.exceptions import AuthenticationError, AuthorizationError
from worktrack.storage.memory import InMemoryStorage
from worktrack.users.repository import StorageUserRepository
from worktrack.users.service import AuthService


@pytest.fixture
def locations():
    return InMemoryStorage(), InMemoryStorage()


@pytest.fixture
def auth(locations):
    durable, ephemeral = locations
    return AuthService(StorageUserRepository(InMemoryStorage()), SessionStore(durable, ephemeral))


def test_login_with_email_and_shared_password(auth):
    user = auth.login("john@company.com", "password123")

    assert user.user_id == "2"
    assert auth.current_user() == user


def test_login_with_mobile_number(auth):
    user = auth.login("9876543212", "password123")

    assert user.name == "Jane Doe"


def test_wrong_password_and_unknown_identifier_fail_the_same_way(auth):
    with pytest.raises(AuthenticationError) as wrong_password:
        auth.login("john@company.com", "nope")
    with pytest.raises(AuthenticationError) as unknown_user:
        auth.login("ghost@company.com", "password123")

    assert str(wrong_password.value) == str(unknown_user.value)
    assert auth.current_user() is None


def test_failed_login_keeps_existing_session(auth):
    auth.login("john@company.com", "password123")

    with pytest.raises(AuthenticationError):
        auth.login("jane@company.com", "bad")

    assert auth.current_user().user_id == "2"


def test_remember_me_uses_durable_location_only(auth, locations):
    durable, ephemeral = locations

    auth.login("john@company.com", "password123", remember=True)
    assert durable.get_item(SESSION_KEY) is not None
    assert ephemeral.get_item(SESSION_KEY) is None

    auth.login("jane@company.com", "password123", remember=False)
    assert durable.get_item(SESSION_KEY) is None
    assert ephemeral.get_item(SESSION_KEY) is not None
    assert auth.current_user().user_id == "3"


def test_logout_is_idempotent(auth, locations):
    durable, ephemeral = locations
    auth.login("admin@company.com", "password123", remember=True)

    auth.logout()
    auth.logout()

    assert auth.current_user() is None
    assert durable.get_item(SESSION_KEY) is None
    assert ephemeral.get_item(SESSION_KEY) is None


def test_email_lookup_is_case_sensitive(auth):
    with pytest.raises(AuthenticationError):
        auth.login("JOHN@company.com", "password123")


def test_custom_shared_password():
    auth = AuthService(
        StorageUserRepository(InMemoryStorage()),
        SessionStore(InMemoryStorage(), InMemoryStorage()),
        shared_password="s3cret",
    )

    with pytest.raises(AuthenticationError):
        auth.login("john@company.com", "password123")
    assert auth.login("john@company.com", "s3cret").user_id == "2"


@pytest.mark.parametrize("identifier,password", [(12345, "password123"), (["john@company.com"], "password123"), ("john@company.com", 123)])
def test_non_text_credentials_fail_like_any_bad_login(auth, identifier, password):
    with pytest.raises(AuthenticationError, match="Invalid credentials"):
        auth.login(identifier, password)

    assert auth.current_user() is None


def test_require_admin(auth):
    admin = auth.login("admin@company.com", "password123")
    employee = auth.login("john@company.com", "password123")

    assert auth.require_admin(admin) == admin
    with pytest.raises(AuthorizationError):
        auth.require_admin(employee)

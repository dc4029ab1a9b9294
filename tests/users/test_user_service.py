from __future__ import annotations

import itertools

import pytest

from worktrack.core.enums import Role
from worktrack.core.exceptions import ValidationError
from worktrack.storage.memory import InMemoryStorage
from worktrack.users.model import User
from worktrack.users.repository import StorageUserRepository
from worktrack.users.service import UserService


def _service(users=None):
    repo = StorageUserRepository(InMemoryStorage(), **({"defaults": users} if users is not None else {}))
    counter = itertools.count(100)
    return UserService(repo, id_factory=lambda: str(next(counter))), repo


def test_directory_default_initializes():
    svc, _ = _service()

    users = svc.list_users()

    assert [u.email for u in users] == ["admin@company.com", "john@company.com", "jane@company.com"]
    assert sum(1 for u in users if u.role == Role.ADMIN) == 1


def test_add_user():
    svc, repo = _service()

    user = svc.add_user("  New Person ", "new@company.com", "employee")

    assert user.user_id == "100"
    assert user.name == "New Person"
    assert repo.get_by_id("100") == user


@pytest.mark.parametrize("name,email", [("", "x@company.com"), ("X", ""), ("   ", "x@company.com")])
def test_add_user_requires_name_and_email(name, email):
    svc, repo = _service()

    with pytest.raises(ValidationError):
        svc.add_user(name, email, "employee")
    assert len(repo.list_all()) == 3


def test_add_user_rejects_duplicate_email():
    svc, _ = _service()

    with pytest.raises(ValidationError, match="already exists"):
        svc.add_user("John Again", "john@company.com", "employee")


def test_duplicate_email_check_is_exact_match():
    svc, _ = _service()

    user = svc.add_user("John Upper", "JOHN@company.com", "employee")

    assert user.email == "JOHN@company.com"


def test_add_user_rejects_unknown_role():
    svc, _ = _service()

    with pytest.raises(ValidationError):
        svc.add_user("X", "x@company.com", "superuser")


def test_remove_sole_admin_fails_and_directory_unchanged():
    svc, repo = _service()
    before = list(repo.list_all())

    with pytest.raises(ValidationError, match="last admin"):
        svc.remove_user("1")

    assert list(repo.list_all()) == before


def test_remove_admin_when_another_admin_exists():
    svc, repo = _service()
    second = svc.add_user("Second Admin", "boss@company.com", Role.ADMIN)

    svc.remove_user("1")

    admins = [u for u in repo.list_all() if u.role == Role.ADMIN]
    assert admins == [second]
    with pytest.raises(ValidationError):
        svc.remove_user(second.user_id)


def test_remove_employee():
    svc, repo = _service()

    removed = svc.remove_user("2")

    assert removed.name == "John Smith"
    assert repo.get_by_id("2") is None


def test_remove_unknown_user_fails():
    svc, _ = _service()

    with pytest.raises(ValidationError, match="not found"):
        svc.remove_user("999")


def test_admin_count_never_reaches_zero():
    only_admins = [
        User(user_id="a", email="a@x.com", name="A", role=Role.ADMIN),
        User(user_id="b", email="b@x.com", name="B", role=Role.ADMIN),
    ]
    svc, repo = _service(only_admins)

    svc.remove_user("a")
    with pytest.raises(ValidationError):
        svc.remove_user("b")

    assert [u.user_id for u in repo.list_all()] == ["b"]


def test_user_constructor_rejects_blank_fields():
    with pytest.raises(ValidationError):
        User(user_id="9", email="", name="Nobody", role=Role.EMPLOYEE)


@pytest.mark.parametrize("name,email", [(7, "x@company.com"), ("X", ["x@company.com"])])
def test_add_user_rejects_non_text_fields(name, email):
    svc, repo = _service()

    with pytest.raises(ValidationError, match="must be text"):
        svc.add_user(name, email, "employee")
    assert len(repo.list_all()) == 3

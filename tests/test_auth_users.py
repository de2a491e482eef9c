from __future__ import annotations

import pytest
from werkzeug.security import check_password_hash

from src.nexus_office.nexus_office.core.enums import Role
from src.nexus_office.nexus_office.core.exceptions import AuthenticationError, ValidationError
from src.nexus_office.nexus_office.database.seed_data import default_users
from src.nexus_office.nexus_office.users.service import AuthService, UserService
from src.nexus_office.nexus_office.users.store_user_repository import StoreUserRepository


@pytest.fixture
def users_repo(store):
    return StoreUserRepository(store, defaults=default_users)


def test_authenticate_with_default_credential(users_repo):
    user = AuthService(users_repo).authenticate("john@company.com", "password")

    assert user.user_id == "u2"
    assert user.role == Role.EMPLOYEE


@pytest.mark.parametrize(
    "email, password",
    [
        ("john@company.com", "wrong"),
        ("nobody@company.com", "password"),
        ("", ""),
    ],
)
def test_authenticate_rejects_bad_credentials(users_repo, email, password):
    with pytest.raises(AuthenticationError):
        AuthService(users_repo).authenticate(email, password)


def test_authenticate_survives_a_broken_hash(store):
    repo = StoreUserRepository(
        store,
        defaults=lambda: [{"id": "x", "name": "X", "email": "x@company.com", "role": "EMPLOYEE", "password_hash": "junk"}],
    )

    with pytest.raises(AuthenticationError):
        AuthService(repo).authenticate("x@company.com", "password")


def test_list_users_by_role(users_repo):
    svc = UserService(users_repo)

    assert len(svc.list_users()) == 7
    assert [u.user_id for u in svc.list_users(role=Role.ADMIN)] == ["u1"]


def test_add_employee_can_sign_in(users_repo):
    svc = UserService(users_repo)

    user = svc.add_employee(name=" Zoe ", email="zoe@company.com", job_title="Analyst", department="")

    assert user.name == "Zoe"
    assert user.department is None
    assert check_password_hash(user.password_hash, "password")
    assert AuthService(users_repo).authenticate("zoe@company.com", "password").user_id == user.user_id


def test_add_employee_requires_name(users_repo):
    with pytest.raises(ValidationError):
        UserService(users_repo).add_employee(name="", email="a@b.c")


def test_attach_users_pairs_records(users_repo):
    class Row:
        def __init__(self, user_id):
            self.user_id = user_id

    pairs = UserService(users_repo).attach_users([Row("u3"), Row("gone")])

    assert pairs[0][1].name == "Jane Smith"
    assert pairs[1][1] is None


def test_added_user_survives_default_merge(store, users_repo):
    UserService(users_repo).add_employee(name="Zoe", email="zoe@company.com")

    again = StoreUserRepository(store, defaults=default_users)

    assert len(again.list_all()) == 8

from __future__ import annotations

import pytest

from src.gasc_attendance.gasc_attendance.core.enums import Collection, Role
from src.gasc_attendance.gasc_attendance.core.exceptions import AuthenticationError
from src.gasc_attendance.gasc_attendance.users.service import AuthService


@pytest.fixture
def auth(store, id_factory):
    return AuthService(store, id_factory=id_factory)


def test_login_returns_mock_admin_and_persists(store, auth):
    user = auth.login("admin@gasc.edu", "anything")

    assert (user.id, user.name, user.email, user.role) == ("1", "Admin User", "admin@gasc.edu", Role.ADMIN)
    assert store.load(Collection.USERS) == [user.to_dict()]
    assert auth.current_user() == user


@pytest.mark.parametrize("email,password", [("", "pw"), ("a@b.c", ""), ("   ", "pw")])
def test_login_rejects_blank_credentials(auth, email, password):
    with pytest.raises(AuthenticationError, match="Invalid email or password"):
        auth.login(email, password)


def test_phone_login(auth):
    user = auth.login_with_phone("5551234", "000000")

    assert user.id == "3"
    assert user.email == "phone.5551234@example.com"
    assert user.phone_number == "5551234"


def test_phone_login_requires_code(auth):
    with pytest.raises(AuthenticationError, match="Invalid verification code"):
        auth.login_with_phone("5551234", "")


def test_google_login(auth):
    assert auth.login_with_google().email == "google.user@example.com"


def test_signup_with_phone_derives_email(auth):
    user = auth.signup_with_phone("Mary  Ann Lee", "555")
    assert user.email == "mary.ann.lee@example.com"
    assert user.id == "id-1"


def test_users_slot_holds_only_latest_user(store, auth):
    auth.login("a@example.com", "pw")
    auth.signup("B", "b@example.com", "pw")

    assert [u["email"] for u in store.load(Collection.USERS)] == ["b@example.com"]


def test_logout_clears_slot(auth):
    auth.login("a@example.com", "pw")
    auth.logout()

    assert auth.current_user() is None

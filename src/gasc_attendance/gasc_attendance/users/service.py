from __future__ import annotations

import logging
import re
import time
from typing import Optional

from ..common.ids import IdFactory, new_id
from ..common.validators import require_non_empty
from ..core.enums import Collection, Role
from ..core.exceptions import AuthenticationError, ValidationError
from ..storage.record_store import RecordStore
from .model import User

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


class AuthService:
    """Use case: sign in / sign up.

    Note: This is a mock credential check. Any non-blank credentials are
    accepted and produce an admin profile; nothing is verified.
    """

    def __init__(self, store: RecordStore, *, latency_seconds: float = 0.0, id_factory: IdFactory = new_id):
        self._store = store
        self._latency = float(latency_seconds)
        self._new_id = id_factory

    def _simulate_request(self) -> None:
        if self._latency > 0:
            time.sleep(self._latency)

    def _sign_in(self, user: User) -> User:
        self._store.save(Collection.USERS, [user.to_dict()])
        logger.info("Signed in user %s (%s)", user.id, user.email)
        return user

    def current_user(self) -> Optional[User]:
        rows = self._store.load(Collection.USERS)
        if not rows:
            return None
        try:
            return User.from_dict(rows[0])
        except (KeyError, ValueError):
            logger.warning("Stored user profile is unreadable; treating as signed out")
            return None

    def login(self, email: str, password: str) -> User:
        try:
            email = require_non_empty(email, "Email")
            require_non_empty(password, "Password")
        except ValidationError:
            raise AuthenticationError("Invalid email or password") from None

        self._simulate_request()
        return self._sign_in(User(id="1", name="Admin User", email=email, role=Role.ADMIN))

    def login_with_google(self) -> User:
        self._simulate_request()
        return self._sign_in(User(id="2", name="Google User", email="google.user@example.com", role=Role.ADMIN))

    def login_with_phone(self, phone_number: str, code: str) -> User:
        try:
            phone_number = require_non_empty(phone_number, "Phone number")
            require_non_empty(code, "Verification code")
        except ValidationError:
            raise AuthenticationError("Invalid verification code") from None

        self._simulate_request()
        return self._sign_in(
            User(
                id="3",
                name="Phone User",
                email=f"phone.{phone_number}@example.com",
                role=Role.ADMIN,
                phone_number=phone_number,
            )
        )

    def signup(self, name: str, email: str, password: str) -> User:
        try:
            name = require_non_empty(name, "Name")
            email = require_non_empty(email, "Email")
            require_non_empty(password, "Password")
        except ValidationError:
            raise AuthenticationError("Signup failed") from None

        self._simulate_request()
        return self._sign_in(User(id=self._new_id(), name=name, email=email, role=Role.ADMIN))

    def signup_with_phone(self, name: str, phone_number: str) -> User:
        try:
            name = require_non_empty(name, "Name")
            phone_number = require_non_empty(phone_number, "Phone number")
        except ValidationError:
            raise AuthenticationError("Phone signup failed") from None

        self._simulate_request()
        email = _WHITESPACE.sub(".", name.lower()) + "@example.com"
        return self._sign_in(
            User(id=self._new_id(), name=name, email=email, role=Role.ADMIN, phone_number=phone_number)
        )

    def logout(self) -> None:
        self._store.remove(Collection.USERS)

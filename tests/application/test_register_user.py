"""Integration tests for the RegisterUser use case.

Uses in-memory fakes: no file I/O, no bcrypt.
"""

import pytest

from storefront.application.register_user import RegisterUserHandler
from storefront.domain.exceptions import (
    DuplicateUsernameError,
    PasswordMismatchError,
    ValidationError,
)
from storefront.domain.model.user import Role
from tests.fakes import FakePasswordHasher, FakeUserRepository


def _setup() -> tuple[RegisterUserHandler, FakeUserRepository]:
    user_repo = FakeUserRepository()
    return RegisterUserHandler(user_repo, FakePasswordHasher()), user_repo


class TestRegisterHappyPath:

    def test_registers_customer_by_default(self):
        handler, user_repo = _setup()
        identity = handler.handle("alice", "pw1", "pw1")
        assert identity.username == "alice"
        assert identity.role is Role.CUSTOMER
        assert user_repo.get_by_username("alice") is not None

    def test_stores_hash_not_password(self):
        handler, user_repo = _setup()
        handler.handle("alice", "pw1", "pw1")
        assert user_repo.get_by_username("alice").credential_hash == "hashed:pw1"

    def test_admin_role_from_input(self):
        handler, _ = _setup()
        assert handler.handle("root", "pw", "pw", role="admin").role is Role.ADMIN

    def test_none_role_means_customer(self):
        handler, _ = _setup()
        assert handler.handle("bob", "pw", "pw", role=None).role is Role.CUSTOMER


class TestRegisterValidation:

    def test_same_username_twice_rejected(self):
        handler, user_repo = _setup()
        handler.handle("alice", "pw1", "pw1")
        with pytest.raises(DuplicateUsernameError, match="Username already taken"):
            handler.handle("alice", "pw2", "pw2")
        assert len(user_repo) == 1

    def test_duplicate_reported_before_password_mismatch(self):
        handler, _ = _setup()
        handler.handle("alice", "pw1", "pw1")
        with pytest.raises(DuplicateUsernameError):
            handler.handle("alice", "x", "y")

    def test_password_mismatch_rejected(self):
        handler, user_repo = _setup()
        with pytest.raises(PasswordMismatchError, match="Passwords do not match"):
            handler.handle("alice", "pw1", "pw2")
        assert len(user_repo) == 0

    def test_unknown_role_rejected(self):
        handler, user_repo = _setup()
        with pytest.raises(ValidationError, match="Unknown role"):
            handler.handle("alice", "pw", "pw", role="owner")
        assert len(user_repo) == 0

    @pytest.mark.parametrize("username", ["", None])
    def test_missing_username_rejected(self, username):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="required"):
            handler.handle(username, "pw", "pw")

    def test_empty_password_accepted(self):
        handler, user_repo = _setup()
        handler.handle("alice", "", "")
        assert user_repo.get_by_username("alice").credential_hash == "hashed:"

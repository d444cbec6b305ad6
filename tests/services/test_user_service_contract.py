"""Tests for the UserService abstract contract."""

from __future__ import annotations

import pytest

from user_management.adapters import InMemoryUserService, SqliteUserService
from user_management.services import UserService

CONTRACT_METHODS = {
    "get_user",
    "get_user_by_email",
    "save_user",
    "delete_user",
    "get_active_users",
    "validate_user",
}


def test_contract_is_abstract():
    with pytest.raises(TypeError):
        UserService()


def test_contract_declares_all_operations():
    assert UserService.__abstractmethods__ == CONTRACT_METHODS


def test_partial_implementation_cannot_be_instantiated():
    class OnlyLookups(UserService):
        def get_user(self, user_id):
            return None

    with pytest.raises(TypeError):
        OnlyLookups()


def test_abstract_bodies_raise_not_implemented():
    class PassThrough(UserService):
        def get_user(self, user_id):
            return super().get_user(user_id)

        def get_user_by_email(self, email):
            return super().get_user_by_email(email)

        def save_user(self, user):
            return super().save_user(user)

        def delete_user(self, user_id):
            return super().delete_user(user_id)

        def get_active_users(self):
            return super().get_active_users()

        def validate_user(self, user):
            return super().validate_user(user)

    service = PassThrough()
    with pytest.raises(NotImplementedError, match="get_user"):
        service.get_user(1)
    with pytest.raises(NotImplementedError, match="get_active_users"):
        service.get_active_users()


@pytest.mark.parametrize("backend", [InMemoryUserService, SqliteUserService])
def test_bundled_backends_implement_contract(backend):
    assert issubclass(backend, UserService)
    assert not backend.__abstractmethods__

import pytest

from storefront_api.app.core.errors import DuplicateUserError
from storefront_api.app.core.security import hash_password, verify_password
from storefront_api.app.schemas.user import UserCreate, UserUpdate
from storefront_api.app.services.user_service import UserService


def _user(username="jdoe", email="jdoe@example.com"):
    return UserCreate(username=username, email=email, name="John Doe", password="secret")


def test_password_is_hashed_and_not_returned(store):
    service = UserService(store)
    user = service.create_user(_user())

    assert not hasattr(user, "password")
    record = store.users.get(user.id)
    assert record.password != "secret"
    assert verify_password("secret", record.password)


def test_lookup_by_username_and_email(store):
    service = UserService(store)
    user = service.create_user(_user())
    assert service.get_user_by_username("jdoe").id == user.id
    assert service.get_user_by_email("jdoe@example.com").id == user.id
    assert service.get_user_by_username("nobody") is None


def test_duplicate_username_or_email_is_rejected(store):
    service = UserService(store)
    service.create_user(_user())
    with pytest.raises(DuplicateUserError):
        service.create_user(_user(email="other@example.com"))
    with pytest.raises(DuplicateUserError):
        service.create_user(_user(username="other"))
    assert len(store.users) == 1


def test_update_rehashes_new_password(store):
    service = UserService(store)
    user = service.create_user(_user())

    updated = service.update_user(user.id, UserUpdate(name="Jane", password="changed"))

    assert updated.name == "Jane"
    assert updated.username == "jdoe"
    assert verify_password("changed", store.users.get(user.id).password)


def test_update_rejects_taken_email(store):
    service = UserService(store)
    service.create_user(_user())
    other = service.create_user(_user(username="ann", email="ann@example.com"))
    with pytest.raises(DuplicateUserError):
        service.update_user(other.id, UserUpdate(email="jdoe@example.com"))


def test_update_unknown_user_returns_none(store):
    assert UserService(store).update_user(5, UserUpdate(name="x")) is None


def test_verify_password_rejects_malformed_hash():
    assert verify_password("secret", hash_password("secret"))
    assert not verify_password("secret", "not-a-hash")

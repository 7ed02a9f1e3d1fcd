import pytest
from werkzeug.security import check_password_hash

from Backend.app.exceptions import BusinessRuleError
from Backend.app.models import User


@pytest.fixture
def users(services):
    return services['user']


def test_password_is_hashed_on_create(users):
    user = users.create(User(username="alice", password="Alice@123", fullname="Alice", role="USER"))
    assert user.password != "Alice@123"
    assert check_password_hash(user.password, "Alice@123")


def test_authenticate(users):
    assert users.authenticate("admin", "Admin@123").role == "ADMIN"
    assert users.authenticate("admin", "wrong") is None
    assert users.authenticate("nobody", "Admin@123") is None
    assert users.authenticate("admin", "") is None


def test_duplicate_username_rejected(users):
    with pytest.raises(BusinessRuleError, match="already taken"):
        users.create(User(username="admin", password="Other@123", fullname="Other", role="USER"))


def test_unknown_role_rejected(users):
    with pytest.raises(BusinessRuleError, match="Role must be one of"):
        users.create(User(username="root", password="Root@1234", fullname="Root", role="ROOT"))


def test_update_rehashes_new_password(users):
    user = users.find_by_username("jdoe")
    users.update(User(id=user.id, username="jdoe", password="Changed@99",
                      fullname="John Doe", role="ADMIN"))

    stored = users.find_by_username("jdoe")
    assert stored.role == "ADMIN"
    assert check_password_hash(stored.password, "Changed@99")
    assert users.authenticate("jdoe", "User@1234") is None


def test_find_all_sorted_by_username(users):
    assert [u.username for u in users.find_all()] == ["admin", "jdoe"]

# Backend/app/tests/conftest.py

import pytest
from Backend.app import create_app, db as _db
from Backend.app.models import User

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "Admin@123"
USER_USERNAME = "jdoe"
USER_PASSWORD = "User@1234"


@pytest.fixture
def app():
    """
    Fresh application per test on an in-memory SQLite database, with the
    schema created and two accounts seeded: an ADMIN and a plain USER.

    The app context stays pushed for the whole test, so the test client,
    the services and the test body all share one db.session.
    """
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "SECRET_KEY": "test",
        "LOG_TO_FILE": False,
    })

    with app.app_context():
        _db.create_all()

        users = app.extensions['poseidon_services']['user']
        users.create(User(username=ADMIN_USERNAME, password=ADMIN_PASSWORD,
                          fullname="Admin User", role="ADMIN"))
        users.create(User(username=USER_USERNAME, password=USER_PASSWORD,
                          fullname="John Doe", role="USER"))

        yield app

        # Teardown: remove session and drop all tables
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    """
    Return an anonymous Flask test client.
    """
    return app.test_client()


def _login(app, username, password):
    client = app.test_client()
    resp = client.post("/login", data={"username": username, "password": password})
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/bidList/list")
    return client


@pytest.fixture
def auth_client(app):
    """
    Test client logged in as the seeded ADMIN.
    """
    return _login(app, ADMIN_USERNAME, ADMIN_PASSWORD)


@pytest.fixture
def user_client(app):
    """
    Test client logged in as the seeded plain USER.
    """
    return _login(app, USER_USERNAME, USER_PASSWORD)


@pytest.fixture
def services(app):
    return app.extensions['poseidon_services']


@pytest.fixture
def session(app):
    return _db.session

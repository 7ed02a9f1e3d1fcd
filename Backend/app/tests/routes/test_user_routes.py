# Backend/app/tests/routes/test_user_routes.py

from werkzeug.security import check_password_hash


def test_user_list_hides_passwords(auth_client, services):
    page = auth_client.get("/user/list").data
    assert b"jdoe" in page
    stored = services['user'].find_by_username("jdoe").password
    assert stored.encode() not in page


def test_admin_creates_user_who_can_log_in(auth_client, app, services):
    resp = auth_client.post("/user/validate", data={
        "username": "trader1", "password": "Trader@123", "fullname": "Ann Trader", "role": "USER",
    }, follow_redirects=True)
    assert b"User successfully added" in resp.data

    user = services['user'].find_by_username("trader1")
    assert check_password_hash(user.password, "Trader@123")

    other = app.test_client()
    login = other.post("/login", data={"username": "trader1", "password": "Trader@123"})
    assert login.headers["Location"] == "/bidList/list"


def test_weak_password_rejected(auth_client, services):
    resp = auth_client.post("/user/validate", data={
        "username": "trader1", "password": "weak", "fullname": "Ann Trader", "role": "USER",
    })
    assert resp.status_code == 200
    assert b"Password must contain at least 8 characters" in resp.data
    assert services['user'].find_by_username("trader1") is None


def test_duplicate_username_banner(auth_client):
    resp = auth_client.post("/user/validate", data={
        "username": "jdoe", "password": "Trader@123", "fullname": "Other Person", "role": "USER",
    })
    assert resp.status_code == 200
    assert b"is already taken" in resp.data


def test_update_form_has_no_password_value(auth_client, services):
    user = services['user'].find_by_username("jdoe")
    resp = auth_client.get(f"/user/update/{user.id}")
    assert resp.status_code == 200
    assert b'value="jdoe"' in resp.data
    assert user.password.encode() not in resp.data

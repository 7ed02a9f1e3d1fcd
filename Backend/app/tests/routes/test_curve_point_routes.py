# Backend/app/tests/routes/test_curve_point_routes.py

from Backend.app.models import CurvePoint


def test_create_curve_point(auth_client, services):
    resp = auth_client.post("/curvePoint/validate", data={
        "curve_id": "1", "term": "2.5", "value": "10.25", "as_of_date": "",
    }, follow_redirects=True)
    assert b"Curve point successfully added" in resp.data
    assert b"10.2500" in resp.data

    point = services['curve_point'].find_all()[0]
    assert point.as_of_date is not None
    assert point.creation_date is not None


def test_create_rejects_bad_curve_id(auth_client, session):
    resp = auth_client.post("/curvePoint/validate", data={"curve_id": "0", "term": "1", "value": "1"})
    assert resp.status_code == 200
    assert b"Curve ID must be positive" in resp.data
    assert session.query(CurvePoint).count() == 0


def test_delete_missing_curve_point(auth_client, services, session):
    services['curve_point'].create(CurvePoint.of(1, 1.0, 1.0))

    resp = auth_client.get("/curvePoint/delete/999")
    assert resp.status_code == 302
    assert resp.headers["Location"] == "/curvePoint/list"

    page = auth_client.get("/curvePoint/list")
    assert b"CurvePoint not found with id: 999" in page.data
    assert b"alert-danger" in page.data
    assert session.query(CurvePoint).count() == 1


def test_update_keeps_creation_date(auth_client, services):
    point = services['curve_point'].create(CurvePoint.of(1, 1.0, 1.0))
    created_at = point.creation_date

    auth_client.post(f"/curvePoint/update/{point.id}", data={
        "curve_id": "2", "term": "3", "value": "4.5",
        "as_of_date": "2024-02-01T12:00", "creation_date": "2000-01-01T00:00",
    })
    stored = services['curve_point'].find_by_id(point.id)
    assert (stored.curve_id, stored.term, stored.value) == (2, 3.0, 4.5)
    assert stored.creation_date == created_at


def test_filter_by_curve_id(auth_client, services):
    services['curve_point'].create(CurvePoint.of(1, 1.0, 111.0))
    services['curve_point'].create(CurvePoint.of(2, 1.0, 222.0))

    page = auth_client.get("/curvePoint/list?curve_id=2")
    assert b"222.0000" in page.data
    assert b"111.0000" not in page.data


def test_update_with_blank_as_of_date_keeps_stored_value(auth_client, services):
    point = services['curve_point'].create(CurvePoint.of(1, 1.0, 1.0))
    as_of = point.as_of_date

    resp = auth_client.post(f"/curvePoint/update/{point.id}", data={
        "curve_id": "1", "term": "2", "value": "3", "as_of_date": "",
    }, follow_redirects=True)
    assert b"Curve point successfully updated" in resp.data
    assert services['curve_point'].find_by_id(point.id).as_of_date == as_of

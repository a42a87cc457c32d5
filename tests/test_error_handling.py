"""
Comprehensive error handling and edge case tests.

This test suite covers:
- Validation errors and their field-specific messages
- The error body shape shared by every status
- Pagination past the last page
- Unexpected exceptions turned into 500 responses
"""

from fastapi.testclient import TestClient

from api.middleware import validation_message
from main import app
from services import UserService
from test_fixtures import auth_headers, client, db, make_address, make_user


# =============================================================================
# VALIDATION MESSAGES
# =============================================================================


def test_validation_message_for_missing_field():
    errors = [{"type": "missing", "loc": ("body", "userId"), "msg": "Field required"}]
    assert validation_message(errors) == "userId is required"


def test_validation_message_for_nested_field():
    errors = [
        {"type": "greater_than_equal", "loc": ("body", "items", 0, "quantity"), "msg": "Input should be greater than or equal to 1"}
    ]
    assert validation_message(errors) == "items.0.quantity: Input should be greater than or equal to 1"


def test_validation_message_for_null_field():
    errors = [{"type": "not_null", "loc": ("body", "price"), "msg": "cannot be null"}]
    assert validation_message(errors) == "price cannot be null"


def test_validation_error_body(db):
    user = make_user(db)
    r = client.post("/api/addresses", json={"userId": str(user["_id"])}, headers=auth_headers(user["_id"]))
    assert r.status_code == 400
    body = r.json()
    assert body["message"].endswith("is required")
    assert body["code"] == "VALIDATION_ERROR"
    assert isinstance(body["details"], list)


def test_invalid_object_id_in_body(db):
    user = make_user(db)
    r = client.post(
        "/api/addresses",
        json={
            "userId": "not-an-object-id",
            "street": "a",
            "city": "b",
            "state": "c",
            "zipCode": "d",
            "country": "e",
        },
        headers=auth_headers(user["_id"]),
    )
    assert r.status_code == 400
    assert r.json()["message"].startswith("userId")


def test_unknown_route_uses_message_body(db):
    r = client.get("/api/does-not-exist")
    assert r.status_code == 404
    assert r.json() == {"message": "Not Found"}


# =============================================================================
# PAGINATION EDGES
# =============================================================================


def test_page_beyond_end_is_empty(db):
    user = make_user(db)
    make_address(db, user["_id"])

    r = client.get("/api/addresses?page=5&limit=10", headers=auth_headers(user["_id"]))
    assert r.status_code == 200
    assert r.json() == {"data": [], "pagination": {"currentPage": 5, "totalPages": 1, "totalCount": 1}}


def test_invalid_page_number(db):
    user = make_user(db)
    r = client.get("/api/addresses?page=0", headers=auth_headers(user["_id"]))
    assert r.status_code == 400
    assert r.json()["message"].startswith("page")


# =============================================================================
# UNEXPECTED ERRORS
# =============================================================================


def test_unexpected_exception_returns_500(db, monkeypatch):
    user = make_user(db)

    def boom(db, user_id):
        raise RuntimeError("database exploded")

    monkeypatch.setattr(UserService, "get_user", staticmethod(boom))
    safe_client = TestClient(app, raise_server_exceptions=False)

    r = safe_client.get(f"/api/users/{user['_id']}", headers=auth_headers(user["_id"]))
    assert r.status_code == 500
    assert r.json() == {"message": "Internal Server Error"}


def test_request_id_headers(db, monkeypatch):
    from adapters import mongo_adapter

    monkeypatch.setattr(mongo_adapter, "ping", lambda db: True)
    r = client.get("/api/health-check")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "service": "FoodOrder", "database": "ok"}
    assert r.headers["X-Request-ID"]
    assert "X-Process-Time" in r.headers


def test_large_limit_is_accepted(db):
    user = make_user(db)
    for _ in range(3):
        make_address(db, user["_id"])

    r = client.get("/api/addresses?page=1&limit=200", headers=auth_headers(user["_id"]))
    assert r.status_code == 200
    body = r.json()
    assert len(body["data"]) == 3
    assert body["pagination"] == {"currentPage": 1, "totalPages": 1, "totalCount": 3}

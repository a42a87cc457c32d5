"""
Tests for user addresses: ownership checks and the single primary address rule.

Covers:
- 403 when the token subject does not own the address
- promotion demoting the previous primary (create and update)
- isPrimary false demoting only the target
- concurrent promotions leaving exactly one primary
"""

import threading

from bson import ObjectId

from adapters import mongo_adapter
from domain.schemas import AddressUpdate
from services import AddressService, address_guard
from test_fixtures import auth_headers, client, db, make_address, make_user


def _body(user_id, **overrides):
    body = {
        "street": "  221B Baker Street  ",
        "city": "London",
        "state": "Greater London",
        "zipCode": "NW1 6XE",
        "country": "UK",
        "userId": str(user_id),
    }
    body.update(overrides)
    return body


def _primaries(db, user_id):
    return list(
        db[mongo_adapter.ADDRESSES].find({"userId": ObjectId(str(user_id)), "isPrimary": True})
    )


# =============================================================================
# CREATE
# =============================================================================


def test_create_address(db):
    user = make_user(db)
    r = client.post("/api/addresses", json=_body(user["_id"]), headers=auth_headers(user["_id"]))

    assert r.status_code == 201
    body = r.json()
    assert body["message"] == "Address added successfully"
    assert body["address"]["street"] == "221B Baker Street"
    assert body["address"]["userId"] == str(user["_id"])
    assert body["address"]["isPrimary"] is False


def test_create_address_for_another_user_forbidden(db):
    user = make_user(db)
    other = make_user(db)
    r = client.post("/api/addresses", json=_body(other["_id"]), headers=auth_headers(user["_id"]))
    assert r.status_code == 403
    assert db[mongo_adapter.ADDRESSES].count_documents({}) == 0


def test_create_address_missing_user_id(db):
    user = make_user(db)
    body = _body(user["_id"])
    del body["userId"]
    r = client.post("/api/addresses", json=body, headers=auth_headers(user["_id"]))
    assert r.status_code == 400
    assert r.json()["message"] == "userId is required"


def test_create_primary_demotes_previous(db):
    user = make_user(db)
    old = make_address(db, user["_id"], is_primary=True)

    r = client.post(
        "/api/addresses",
        json=_body(user["_id"], isPrimary=True),
        headers=auth_headers(user["_id"]),
    )
    assert r.status_code == 201

    primaries = _primaries(db, user["_id"])
    assert [str(p["_id"]) for p in primaries] == [r.json()["address"]["_id"]]
    assert db[mongo_adapter.ADDRESSES].find_one({"_id": old["_id"]})["isPrimary"] is False


def test_primary_of_other_user_untouched(db):
    user = make_user(db)
    other = make_user(db)
    theirs = make_address(db, other["_id"], is_primary=True)

    client.post(
        "/api/addresses",
        json=_body(user["_id"], isPrimary=True),
        headers=auth_headers(user["_id"]),
    )
    assert db[mongo_adapter.ADDRESSES].find_one({"_id": theirs["_id"]})["isPrimary"] is True


# =============================================================================
# READ
# =============================================================================


def test_list_addresses_paginated(db):
    user = make_user(db)
    for _ in range(3):
        make_address(db, user["_id"])

    r = client.get("/api/addresses?page=1&limit=2", headers=auth_headers(user["_id"]))
    assert r.status_code == 200
    assert len(r.json()["data"]) == 2
    assert r.json()["pagination"] == {"currentPage": 1, "totalPages": 2, "totalCount": 3}


def test_list_user_addresses(db):
    user = make_user(db)
    make_address(db, user["_id"])
    make_address(db, user["_id"])
    headers = auth_headers(user["_id"])

    r = client.get(f"/api/addresses/user/{user['_id']}", headers=headers)
    assert r.status_code == 200
    assert len(r.json()) == 2

    r2 = client.get(f"/api/addresses/user/{ObjectId()}", headers=headers)
    assert r2.status_code == 404
    assert r2.json()["message"] == "No addresses found for this user"


def test_get_address_not_found(db):
    user = make_user(db)
    r = client.get(f"/api/addresses/{ObjectId()}", headers=auth_headers(user["_id"]))
    assert r.status_code == 404
    assert r.json()["message"] == "Address not found"


# =============================================================================
# UPDATE / DELETE
# =============================================================================


def test_update_promotes_and_demotes_previous(db):
    user = make_user(db)
    first = make_address(db, user["_id"], is_primary=True)
    second = make_address(db, user["_id"])

    r = client.put(
        f"/api/addresses/{second['_id']}",
        json={"isPrimary": True, "city": "Leeds"},
        headers=auth_headers(user["_id"]),
    )
    assert r.status_code == 200
    assert r.json()["message"] == "Address updated successfully"
    assert r.json()["address"]["city"] == "Leeds"

    assert [p["_id"] for p in _primaries(db, user["_id"])] == [second["_id"]]
    assert db[mongo_adapter.ADDRESSES].find_one({"_id": first["_id"]})["isPrimary"] is False


def test_update_is_primary_false_only_demotes_target(db):
    user = make_user(db)
    primary = make_address(db, user["_id"], is_primary=True)
    other = make_address(db, user["_id"])

    r = client.put(
        f"/api/addresses/{primary['_id']}",
        json={"isPrimary": False},
        headers=auth_headers(user["_id"]),
    )
    assert r.status_code == 200
    assert _primaries(db, user["_id"]) == []
    assert db[mongo_adapter.ADDRESSES].find_one({"_id": other["_id"]})["isPrimary"] is False


def test_update_without_flag_keeps_primary(db):
    user = make_user(db)
    primary = make_address(db, user["_id"], is_primary=True)

    client.put(
        f"/api/addresses/{primary['_id']}",
        json={"street": "1 New Road"},
        headers=auth_headers(user["_id"]),
    )
    stored = db[mongo_adapter.ADDRESSES].find_one({"_id": primary["_id"]})
    assert stored["isPrimary"] is True
    assert stored["street"] == "1 New Road"


def test_update_rejects_null_required_fields(db):
    user = make_user(db)
    address = make_address(db, user["_id"], is_primary=True)

    r = client.put(
        f"/api/addresses/{address['_id']}",
        json={"street": None},
        headers=auth_headers(user["_id"]),
    )
    assert r.status_code == 400
    assert r.json()["message"] == "street cannot be null"
    stored = db[mongo_adapter.ADDRESSES].find_one({"_id": address["_id"]})
    assert stored["street"] == address["street"]

    # null isPrimary leaves the flag untouched
    r2 = client.put(
        f"/api/addresses/{address['_id']}",
        json={"city": "Leeds", "isPrimary": None},
        headers=auth_headers(user["_id"]),
    )
    assert r2.status_code == 200
    stored = db[mongo_adapter.ADDRESSES].find_one({"_id": address["_id"]})
    assert stored["city"] == "Leeds"
    assert stored["isPrimary"] is True


def test_update_foreign_address_forbidden(db):
    owner = make_user(db)
    intruder = make_user(db)
    address = make_address(db, owner["_id"])

    r = client.put(
        f"/api/addresses/{address['_id']}",
        json={"city": "Nowhere"},
        headers=auth_headers(intruder["_id"]),
    )
    assert r.status_code == 403
    assert db[mongo_adapter.ADDRESSES].find_one({"_id": address["_id"]})["city"] == "London"


def test_update_body_user_id_mismatch_forbidden(db):
    owner = make_user(db)
    address = make_address(db, owner["_id"])
    r = client.put(
        f"/api/addresses/{address['_id']}",
        json={"userId": str(ObjectId())},
        headers=auth_headers(owner["_id"]),
    )
    assert r.status_code == 403


def test_login_token_guards_address_mutations(db):
    """
    Verifies, with a token obtained from /api/login:
    - creating an address for another user is 403
    - updating with a mismatched body userId is 403 and nothing changes
    - the same token works for the caller's own address
    """
    user = make_user(db, password="secret123")
    other = make_user(db)
    login = client.post("/api/login", json={"email": user["email"], "password": "secret123"})
    assert login.status_code == 200
    headers = {"Authorization": f"Bearer {login.json()['token']}"}

    r = client.post("/api/addresses", json=_body(other["_id"]), headers=headers)
    assert r.status_code == 403
    assert db[mongo_adapter.ADDRESSES].count_documents({}) == 0

    created = client.post("/api/addresses", json=_body(user["_id"]), headers=headers)
    assert created.status_code == 201
    address_id = created.json()["address"]["_id"]

    r2 = client.put(
        f"/api/addresses/{address_id}",
        json={"city": "Paris", "userId": str(other["_id"])},
        headers=headers,
    )
    assert r2.status_code == 403
    assert db[mongo_adapter.ADDRESSES].find_one({"_id": ObjectId(address_id)})["city"] == "London"


def test_delete_address_ownership(db):
    owner = make_user(db)
    intruder = make_user(db)
    address = make_address(db, owner["_id"])

    r = client.delete(f"/api/addresses/{address['_id']}", headers=auth_headers(intruder["_id"]))
    assert r.status_code == 403

    r2 = client.delete(f"/api/addresses/{address['_id']}", headers=auth_headers(owner["_id"]))
    assert r2.status_code == 200
    assert r2.json() == {"message": "Address deleted successfully"}

    r3 = client.delete(f"/api/addresses/{address['_id']}", headers=auth_headers(owner["_id"]))
    assert r3.status_code == 404


# =============================================================================
# CONCURRENCY
# =============================================================================


def test_lock_registry_is_per_user():
    address_guard.reset()
    assert address_guard.get_lock("a") is address_guard.get_lock("a")
    assert address_guard.get_lock("a") is not address_guard.get_lock("b")


def test_concurrent_promotions_leave_one_primary(db):
    """
    Verifies: many threads promoting different addresses of one user end with
    exactly one primary address.
    """
    user = make_user(db)
    subject = str(user["_id"])
    addresses = [make_address(db, user["_id"]) for _ in range(5)]
    errors = []
    start = threading.Event()

    def promote(address_id):
        start.wait()
        try:
            AddressService.update_address(
                db, str(address_id), AddressUpdate(is_primary=True), subject
            )
        except Exception as exc:  # collected and asserted below
            errors.append(exc)

    threads = [
        threading.Thread(target=promote, args=(addresses[i % 5]["_id"],))
        for i in range(20)
    ]
    for t in threads:
        t.start()
    start.set()
    for t in threads:
        t.join(timeout=10)

    assert errors == []
    assert len(_primaries(db, user["_id"])) == 1

"""
Tests for subscription templates and user subscriptions.
"""

from bson import ObjectId

from adapters import mongo_adapter
from test_fixtures import client, db, make_subscription_template


TEMPLATE = {"plan": "Monthly", "mealType": "Non-Veg", "price": 120, "mealCount": 30}


def test_create_template(db):
    r = client.post("/api/subscription", json=TEMPLATE)
    assert r.status_code == 201
    sub = r.json()["subscription"]
    assert sub["plan"] == "Monthly"
    assert sub["freeDelivery"] is False
    assert "user" not in sub


def test_create_template_validation(db):
    assert client.post("/api/subscription", json={**TEMPLATE, "plan": "Daily"}).status_code == 400
    assert client.post("/api/subscription", json={**TEMPLATE, "price": 0}).status_code == 400
    assert client.post("/api/subscription", json={**TEMPLATE, "mealType": "Vegan"}).status_code == 400


def test_subscribe_copies_template_fields(db):
    """
    Verifies: the user subscription carries the template's plan, mealType,
    price, mealCount and freeDelivery, and later template edits do not change it.
    """
    template = make_subscription_template(db)
    user_id = ObjectId()

    r = client.post("/api/subscribe", json={"user": str(user_id), "subscriptionId": str(template["_id"])})
    assert r.status_code == 201
    assert r.json()["message"] == "User successfully subscribed!"
    sub = r.json()["subscription"]
    for field in ("plan", "mealType", "price", "mealCount", "freeDelivery"):
        assert sub[field] == template[field]
    assert sub["user"] == str(user_id)

    r2 = client.put(f"/api/subscription/{template['_id']}", json={"price": 59.99})
    assert r2.status_code == 200
    assert r2.json()["subscription"]["price"] == 59.99

    copy = db[mongo_adapter.SUBSCRIPTIONS].find_one({"user": user_id})
    assert copy["price"] == 49.99


def test_subscribe_unknown_template(db):
    r = client.post("/api/subscribe", json={"user": str(ObjectId()), "subscriptionId": str(ObjectId())})
    assert r.status_code == 404


def test_update_rejects_user_subscription(db):
    template = make_subscription_template(db)
    client.post("/api/subscribe", json={"user": str(ObjectId()), "subscriptionId": str(template["_id"])})
    user_sub = db[mongo_adapter.SUBSCRIPTIONS].find_one({"user": {"$exists": True}})

    r = client.put(f"/api/subscription/{user_sub['_id']}", json={"price": 1})
    assert r.status_code == 404


def test_update_template_rejects_null_fields(db):
    template = make_subscription_template(db)

    r = client.put(f"/api/subscription/{template['_id']}", json={"price": None})
    assert r.status_code == 400
    assert r.json()["message"] == "price cannot be null"
    assert client.put(f"/api/subscription/{template['_id']}", json={"mealType": None}).status_code == 400

    # subscribing afterwards still copies a usable price
    r2 = client.post("/api/subscribe", json={"user": str(ObjectId()), "subscriptionId": str(template["_id"])})
    assert r2.status_code == 201
    assert r2.json()["subscription"]["price"] == template["price"]


def test_templates_only_listing(db):
    assert client.get("/api/subscription/no-user").status_code == 404

    template = make_subscription_template(db)
    client.post("/api/subscribe", json={"user": str(ObjectId()), "subscriptionId": str(template["_id"])})

    r = client.get("/api/subscription/no-user")
    assert r.status_code == 200
    assert [s["_id"] for s in r.json()] == [str(template["_id"])]

    everything = client.get("/api/subscription").json()
    assert everything["pagination"]["totalCount"] == 2


def test_user_subscriptions(db):
    template = make_subscription_template(db)
    user_id = str(ObjectId())

    assert client.get(f"/api/subscribe/{user_id}").status_code == 404

    client.post("/api/subscribe", json={"user": user_id, "subscriptionId": str(template["_id"])})
    r = client.get(f"/api/subscribe/{user_id}")
    assert r.status_code == 200
    assert len(r.json()) == 1

"""
Tests for the repository layer and index setup.
"""

from datetime import datetime, timedelta
from unittest.mock import MagicMock, Mock

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from adapters import mongo_adapter
from app.exceptions import ConflictError, ServiceValidationError
from repositories import (
    AddressRepository,
    CategoryRepository,
    UserRepository,
    XMAppOpenRepository,
    require_object_id,
)
from test_fixtures import db, make_address, make_user


def test_get_by_id_with_invalid_id_returns_none(db):
    repo = UserRepository(db)
    assert repo.get_by_id("not-an-id") is None
    assert repo.update("not-an-id", {"a": 1}) is None
    assert repo.delete("not-an-id") is False


def test_require_object_id():
    oid = ObjectId()
    assert require_object_id(str(oid), "User") == oid
    with pytest.raises(ServiceValidationError) as exc_info:
        require_object_id("123", "User")
    assert exc_info.value.message == "Invalid User ID"


def test_create_stamps_timestamps_and_update_refreshes(db):
    repo = CategoryRepository(db, mongo_adapter.CATEGORIES)
    created = repo.create({"categoryName": "Tea"})
    assert isinstance(created["_id"], ObjectId)
    assert created["createdAt"] == created["updatedAt"]

    updated = repo.update(created["_id"], {"categoryName": "Green Tea"})
    assert updated["categoryName"] == "Green Tea"
    assert isinstance(updated["updatedAt"], datetime)


def test_find_page_and_count(db):
    repo = CategoryRepository(db, mongo_adapter.CATEGORIES)
    for name in ["d", "a", "c", "b"]:
        repo.create({"categoryName": name})

    page = repo.find_page({}, skip=1, limit=2, sort=[("categoryName", 1)])
    assert [c["categoryName"] for c in page] == ["b", "c"]
    assert repo.count() == 4
    assert repo.find_page({}, skip=10, limit=2) == []


def test_duplicate_key_becomes_conflict(db):
    repo = CategoryRepository(db, mongo_adapter.CATEGORIES)
    repo.collection = Mock()
    repo.collection.insert_one.side_effect = DuplicateKeyError("E11000 duplicate key")

    with pytest.raises(ConflictError) as exc_info:
        repo.create({"categoryName": "Tea"})
    assert exc_info.value.message == "Category already exists"


def test_demote_others_keeps_target(db):
    user = make_user(db)
    a = make_address(db, user["_id"], is_primary=True)
    b = make_address(db, user["_id"], is_primary=True)

    modified = AddressRepository(db).demote_others(user["_id"], keep_id=b["_id"])
    assert modified == 1
    primaries = list(db[mongo_adapter.ADDRESSES].find({"userId": user["_id"], "isPrimary": True}))
    assert [p["_id"] for p in primaries] == [b["_id"]]
    assert AddressRepository(db).get_by_id(a["_id"])["isPrimary"] is False


def test_reset_token_lookup_respects_expiry(db):
    user = make_user(db)
    repo = UserRepository(db)
    repo.set_reset_token(user["_id"], "f" * 40, datetime.utcnow() + timedelta(minutes=5))

    assert repo.get_by_reset_token("f" * 40, datetime.utcnow())["_id"] == user["_id"]
    assert repo.get_by_reset_token("f" * 40, datetime.utcnow() + timedelta(minutes=10)) is None


def test_app_open_upsert_counts(db):
    repo = XMAppOpenRepository(db)
    repo.record_open("Windows PC", "agent_one")
    doc = repo.record_open("Windows PC", "agent_two")
    assert doc["totalOpens"] == 2
    assert doc["deviceVisits"] == {"agent_one": 1, "agent_two": 1}


def test_ensure_indexes_creates_partial_primary_index():
    """
    Verifies: the one-primary-per-user backstop is a unique index on userId
    restricted to primary addresses.
    """
    database = MagicMock()
    mongo_adapter.ensure_indexes(database)

    calls = database.__getitem__.return_value.create_index.call_args_list
    primary = [c for c in calls if c.kwargs.get("name") == mongo_adapter.PRIMARY_ADDRESS_INDEX]
    assert len(primary) == 1
    assert primary[0].args[0] == [("userId", 1)]
    assert primary[0].kwargs["unique"] is True
    assert primary[0].kwargs["partialFilterExpression"] == {"isPrimary": True}
    database.__getitem__.assert_any_call(mongo_adapter.ADDRESSES)

"""
Item Service - inventory items under image categories
"""

import logging
from typing import List, Tuple

from bson import ObjectId
from pymongo import DESCENDING
from pymongo.database import Database

from adapters import mongo_adapter
from app.exceptions import NotFoundError, ServiceValidationError
from core.helpers import page_bounds
from domain.schemas import ItemCreate, ItemUpdate
from repositories import CategoryRepository, ItemRepository, require_object_id

logger = logging.getLogger("foodorder.items")


def _categories(db: Database) -> CategoryRepository:
    return CategoryRepository(db, mongo_adapter.CATEGORIES)


class ItemService:
    @staticmethod
    def _require_category(db: Database, category_id: str) -> ObjectId:
        category = _categories(db).get_by_id(category_id)
        if not category:
            raise ServiceValidationError("Invalid category ID")
        return category["_id"]

    @staticmethod
    def _populate(db: Database, items: List[dict]) -> List[dict]:
        refs = [i["category"] for i in items if i.get("category")]
        categories = _categories(db).get_many_by_ids(refs)
        for item in items:
            ref = item.get("category")
            if ref is not None:
                item["category"] = categories.get(ref, ref)
        return items

    @staticmethod
    def create_item(db: Database, payload: ItemCreate) -> dict:
        category_oid = ItemService._require_category(db, payload.category_id)
        document = payload.to_document()
        document.pop("categoryId")
        document["category"] = category_oid
        item = ItemRepository(db).create(document)
        logger.info(f"item_created item_id={item['_id']} category_id={category_oid}")
        return item

    @staticmethod
    def list_items(db: Database, page: int = 1, limit: int = 10) -> Tuple[List[dict], int]:
        repo = ItemRepository(db)
        skip, limit = page_bounds(page, limit)
        items = repo.find_page({}, skip=skip, limit=limit, sort=[("createdAt", DESCENDING)])
        return ItemService._populate(db, items), repo.count()

    @staticmethod
    def get_item(db: Database, item_id: str) -> dict:
        item = ItemRepository(db).get_by_id(item_id)
        if not item:
            raise NotFoundError("Item not found")
        return ItemService._populate(db, [item])[0]

    @staticmethod
    def list_by_category(db: Database, category_id: str) -> List[dict]:
        items = ItemRepository(db).find_by_category(require_object_id(category_id, "category"))
        if not items:
            raise NotFoundError("No items found for this category")
        return ItemService._populate(db, items)

    @staticmethod
    def update_item(db: Database, item_id: str, payload: ItemUpdate) -> dict:
        fields = payload.to_document(exclude_unset=True)
        if not fields:
            raise ServiceValidationError("No fields to update")
        repo = ItemRepository(db)
        if not repo.exists(item_id):
            raise NotFoundError("Item not found")

        if "categoryId" in fields:
            fields.pop("categoryId")
            if payload.category_id is not None:
                fields["category"] = ItemService._require_category(db, payload.category_id)
        updated = repo.update(item_id, fields)
        if updated is None:
            raise NotFoundError("Item not found")
        logger.info(f"item_updated item_id={item_id} fields={sorted(fields)}")
        return updated

    @staticmethod
    def delete_item(db: Database, item_id: str) -> None:
        if not ItemRepository(db).delete(item_id):
            raise NotFoundError("Item not found")
        logger.info(f"item_deleted item_id={item_id}")

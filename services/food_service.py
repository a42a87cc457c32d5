"""
Food Service - the orderable food catalogue
"""

import logging
from typing import List, Optional, Tuple

from bson import ObjectId
from pymongo import DESCENDING
from pymongo.database import Database

from adapters import mongo_adapter
from app.exceptions import NotFoundError, ServiceValidationError
from core.helpers import page_bounds
from domain.schemas import FoodCreate, FoodUpdate
from repositories import CategoryRepository, FoodRepository

logger = logging.getLogger("foodorder.foods")


class FoodService:
    @staticmethod
    def _require_food_category(db: Database, category_id: str) -> ObjectId:
        category = CategoryRepository(db, mongo_adapter.FOOD_CATEGORIES).get_by_id(category_id)
        if not category:
            raise ServiceValidationError("Invalid food category ID")
        return category["_id"]

    @staticmethod
    def _to_stored(fields: dict, category_oid: Optional[ObjectId]) -> dict:
        # categoryId on the wire, foodCategory reference in storage
        fields.pop("categoryId", None)
        if category_oid is not None:
            fields["foodCategory"] = category_oid
        return fields

    @staticmethod
    def _populate(db: Database, foods: List[dict]) -> List[dict]:
        category_ids = [f["foodCategory"] for f in foods if f.get("foodCategory")]
        categories = CategoryRepository(db, mongo_adapter.FOOD_CATEGORIES).get_many_by_ids(
            category_ids
        )
        for food in foods:
            ref = food.get("foodCategory")
            if ref is not None:
                food["foodCategory"] = categories.get(ref, ref)
        return foods

    @staticmethod
    def create_food(db: Database, payload: FoodCreate) -> dict:
        category_oid = FoodService._require_food_category(db, payload.category_id)
        document = FoodService._to_stored(payload.to_document(), category_oid)
        food = FoodRepository(db).create(document)
        logger.info(f"food_created food_id={food['_id']} name={food['name']!r}")
        return food

    @staticmethod
    def list_foods(
        db: Database,
        category: Optional[str] = None,
        is_available: Optional[bool] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
        page: int = 1,
        limit: int = 10,
    ) -> Tuple[List[dict], int]:
        repo = FoodRepository(db)
        query = repo.build_filter(category, is_available, min_price, max_price)
        skip, limit = page_bounds(page, limit)
        foods = repo.find_page(query, skip=skip, limit=limit, sort=[("createdAt", DESCENDING)])
        return FoodService._populate(db, foods), repo.count(query)

    @staticmethod
    def get_food(db: Database, food_id: str) -> dict:
        food = FoodRepository(db).get_by_id(food_id)
        if not food:
            raise NotFoundError("Food item not found")
        return FoodService._populate(db, [food])[0]

    @staticmethod
    def update_food(db: Database, food_id: str, payload: FoodUpdate) -> dict:
        fields = payload.to_document(exclude_unset=True)
        if not fields:
            raise ServiceValidationError("No fields to update")

        repo = FoodRepository(db)
        if not repo.exists(food_id):
            raise NotFoundError("Food item not found")

        category_oid = None
        if payload.category_id is not None:
            category_oid = FoodService._require_food_category(db, payload.category_id)
        updated = repo.update(food_id, FoodService._to_stored(fields, category_oid))
        if updated is None:
            raise NotFoundError("Food item not found")
        logger.info(f"food_updated food_id={food_id} fields={sorted(fields)}")
        return updated

    @staticmethod
    def delete_food(db: Database, food_id: str) -> None:
        if not FoodRepository(db).delete(food_id):
            raise NotFoundError("Food item not found")
        logger.info(f"food_deleted food_id={food_id}")

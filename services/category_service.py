"""
Category Service - shared by image categories and food categories.
"""

import logging
from typing import BinaryIO, List, Optional, Tuple

from pymongo import ASCENDING
from pymongo.database import Database

from adapters import file_storage
from app.exceptions import ConflictError, ServiceValidationError
from core.helpers import page_bounds
from repositories import CategoryRepository

logger = logging.getLogger("foodorder.categories")


class CategoryService:
    """One instance per category collection."""

    def __init__(self, collection_name: str, label: str = "category"):
        self.collection_name = collection_name
        self.label = label

    def repository(self, db: Database) -> CategoryRepository:
        return CategoryRepository(db, self.collection_name)

    def create_category(
        self,
        db: Database,
        name: Optional[str],
        image: Optional[BinaryIO],
        image_name: Optional[str],
        content_type: Optional[str],
    ) -> dict:
        """
        Store the uploaded image and create the category.

        Raises:
            ServiceValidationError: no image, bad image, or missing name
            ConflictError: category name already taken
        """
        if image is None or not image_name:
            raise ServiceValidationError("No image uploaded")
        name = (name or "").strip()
        if not name:
            raise ServiceValidationError("categoryName is required")

        repo = self.repository(db)
        if repo.get_by_name(name):
            raise ConflictError("Category already exists")

        stored = file_storage.save_image(image, image_name, content_type)
        category = repo.create({"categoryName": name, "categoryImage": stored.url})
        logger.info(
            f"{self.label}_created category_id={category['_id']} name={name!r}"
        )
        return category

    def list_categories(
        self, db: Database, page: int = 1, limit: int = 10
    ) -> Tuple[List[dict], int]:
        repo = self.repository(db)
        skip, limit = page_bounds(page, limit)
        items = repo.find_page({}, skip=skip, limit=limit, sort=[("categoryName", ASCENDING)])
        return items, repo.count()

    def get_category(self, db: Database, category_id) -> Optional[dict]:
        return self.repository(db).get_by_id(category_id)

"""
Category Repository - one implementation for both image categories
(`categories`) and food categories (`foodcategories`).
"""

from typing import Optional

from pymongo.database import Database

from repositories.base import BaseRepository, Document


class CategoryRepository(BaseRepository):
    duplicate_message = "Category already exists"

    def __init__(self, db: Database, collection_name: str):
        self.collection_name = collection_name
        super().__init__(db)

    def get_by_name(self, name: str) -> Optional[Document]:
        return self.collection.find_one({"categoryName": name})

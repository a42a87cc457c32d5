"""
Item Repository - inventory items grouped under a category
"""

from typing import List

from bson import ObjectId

from adapters import mongo_adapter
from repositories.base import BaseRepository, Document


class ItemRepository(BaseRepository):
    collection_name = mongo_adapter.ITEMS

    def find_by_category(self, category_id: ObjectId) -> List[Document]:
        return self.find_all({"category": category_id})

"""
Order Repository - Data access for food orders
"""

from typing import List, Optional

from bson import ObjectId
from pymongo import DESCENDING

from adapters import mongo_adapter
from repositories.base import BaseRepository, Document


class OrderRepository(BaseRepository):
    collection_name = mongo_adapter.ORDERS

    @staticmethod
    def user_query(user_id: ObjectId, status: Optional[str] = None) -> Document:
        query: Document = {"user": user_id}
        if status:
            query["status"] = status
        return query

    def find_for_user(
        self,
        user_id: ObjectId,
        status: Optional[str] = None,
        skip: int = 0,
        limit: int = 10,
    ) -> List[Document]:
        """Orders of a user, newest first"""
        return self.find_page(
            self.user_query(user_id, status),
            skip=skip,
            limit=limit,
            sort=[("createdAt", DESCENDING), ("_id", DESCENDING)],
        )

    def count_for_user(self, user_id: ObjectId, status: Optional[str] = None) -> int:
        return self.count(self.user_query(user_id, status))

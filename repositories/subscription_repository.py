"""
Subscription Repository - plan templates and user subscriptions share one collection.
A template is a document without a `user` field.
"""

from typing import List, Optional

from bson import ObjectId

from adapters import mongo_adapter
from repositories.base import BaseRepository, Document, IdLike, parse_object_id

TEMPLATE_QUERY = {"user": {"$exists": False}}


class SubscriptionRepository(BaseRepository):
    collection_name = mongo_adapter.SUBSCRIPTIONS

    def find_templates(self) -> List[Document]:
        return self.find_all(TEMPLATE_QUERY)

    def get_template(self, subscription_id: IdLike) -> Optional[Document]:
        oid = parse_object_id(subscription_id)
        if oid is None:
            return None
        return self.collection.find_one({"_id": oid, **TEMPLATE_QUERY})

    def find_for_user(self, user_id: ObjectId) -> List[Document]:
        return self.find_all({"user": user_id})

"""
Subscription Service - plan templates and per-user subscriptions
"""

import logging
from typing import List, Tuple

from bson import ObjectId
from pymongo import DESCENDING
from pymongo.database import Database

from app.exceptions import NotFoundError, ServiceValidationError
from core.helpers import page_bounds
from domain.schemas import SubscribeRequest, SubscriptionCreate, SubscriptionUpdate
from repositories import SubscriptionRepository, require_object_id

logger = logging.getLogger("foodorder.subscriptions")

# Copied from the template onto the user's subscription.
PLAN_FIELDS = ("plan", "mealType", "price", "mealCount", "freeDelivery")


class SubscriptionService:
    @staticmethod
    def create_template(db: Database, payload: SubscriptionCreate) -> dict:
        template = SubscriptionRepository(db).create(payload.to_document())
        logger.info(f"subscription_template_created subscription_id={template['_id']}")
        return template

    @staticmethod
    def list_all(db: Database, page: int = 1, limit: int = 10) -> Tuple[List[dict], int]:
        repo = SubscriptionRepository(db)
        skip, limit = page_bounds(page, limit)
        items = repo.find_page({}, skip=skip, limit=limit, sort=[("createdAt", DESCENDING)])
        return items, repo.count()

    @staticmethod
    def list_templates(db: Database) -> List[dict]:
        templates = SubscriptionRepository(db).find_templates()
        if not templates:
            raise NotFoundError("No subscriptions without user found")
        return templates

    @staticmethod
    def update_template(db: Database, subscription_id: str, payload: SubscriptionUpdate) -> dict:
        """Edit a template; subscriptions already copied from it keep their values"""
        repo = SubscriptionRepository(db)
        template = repo.get_template(subscription_id)
        if not template:
            raise NotFoundError("Subscription not found")

        fields = payload.to_document(exclude_unset=True)
        if not fields:
            raise ServiceValidationError("No fields to update")
        updated = repo.update(template["_id"], fields)
        if updated is None:
            raise NotFoundError("Subscription not found")
        logger.info(f"subscription_template_updated subscription_id={subscription_id}")
        return updated

    @staticmethod
    def subscribe(db: Database, payload: SubscribeRequest) -> dict:
        repo = SubscriptionRepository(db)
        template = repo.get_template(payload.subscription_id)
        if not template:
            raise NotFoundError("Subscription not found")

        document = {field: template.get(field) for field in PLAN_FIELDS}
        document["user"] = ObjectId(payload.user)
        subscription = repo.create(document)
        logger.info(
            f"user_subscribed user_id={payload.user} "
            f"template_id={template['_id']} subscription_id={subscription['_id']}"
        )
        return subscription

    @staticmethod
    def list_for_user(db: Database, user_id: str) -> List[dict]:
        subscriptions = SubscriptionRepository(db).find_for_user(require_object_id(user_id, "User"))
        if not subscriptions:
            raise NotFoundError("No subscriptions found for this user")
        return subscriptions

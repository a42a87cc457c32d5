"""Subscription plan routes"""

from fastapi import APIRouter, Depends, status
from pymongo.database import Database

from api.dependencies import Pagination, get_database
from api.responses import document_page, message_response
from domain.mappers import DocumentMapper
from domain.schemas import SubscribeRequest, SubscriptionCreate, SubscriptionUpdate
from services import SubscriptionService

router = APIRouter(tags=["Subscriptions"])


@router.post("/subscription", status_code=status.HTTP_201_CREATED)
def create_subscription(payload: SubscriptionCreate, db: Database = Depends(get_database)):
    """Create a plan template (a subscription without user)"""
    template = SubscriptionService.create_template(db, payload)
    return message_response("Subscription created successfully", "subscription", template)


@router.get("/subscription")
def list_subscriptions(paging: Pagination = Depends(), db: Database = Depends(get_database)):
    items, total = SubscriptionService.list_all(db, paging.page, paging.limit)
    return document_page(items, total, paging.page, paging.limit)


@router.get("/subscription/no-user")
def list_templates(db: Database = Depends(get_database)):
    return DocumentMapper.to_response_list(SubscriptionService.list_templates(db))


@router.put("/subscription/{subscription_id}")
def update_subscription(
    subscription_id: str,
    payload: SubscriptionUpdate,
    db: Database = Depends(get_database),
):
    template = SubscriptionService.update_template(db, subscription_id, payload)
    return message_response("Subscription updated successfully", "subscription", template)


@router.post("/subscribe", status_code=status.HTTP_201_CREATED)
def subscribe(payload: SubscribeRequest, db: Database = Depends(get_database)):
    subscription = SubscriptionService.subscribe(db, payload)
    return message_response("User successfully subscribed!", "subscription", subscription)


@router.get("/subscribe/{user_id}")
def list_user_subscriptions(user_id: str, db: Database = Depends(get_database)):
    return DocumentMapper.to_response_list(SubscriptionService.list_for_user(db, user_id))

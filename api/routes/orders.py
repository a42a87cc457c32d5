"""Order routes (all require a bearer token)"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from pymongo.database import Database

from api.dependencies import Pagination, get_current_user_id, get_database
from api.responses import document_page, message_response
from domain.enums import OrderStatus
from domain.schemas import OrderCreate, OrderUpdate
from services import OrderService

router = APIRouter(prefix="/order", tags=["Orders"])


@router.post("", status_code=status.HTTP_201_CREATED)
def create_order(
    payload: OrderCreate,
    db: Database = Depends(get_database),
    subject_id: str = Depends(get_current_user_id),
):
    """Place an order; line prices come from the food catalogue"""
    order = OrderService.create_order(db, payload, subject_id)
    return message_response("Order created successfully", "order", order)


@router.get("/user/{user_id}")
def list_user_orders(
    user_id: str,
    order_status: Optional[OrderStatus] = Query(None, alias="status"),
    paging: Pagination = Depends(),
    db: Database = Depends(get_database),
    _: str = Depends(get_current_user_id),
):
    orders, total = OrderService.list_user_orders(
        db, user_id, order_status, paging.page, paging.limit
    )
    return document_page(orders, total, paging.page, paging.limit)


@router.put("/user/{user_id}/{order_id}")
def update_order(
    user_id: str,
    order_id: str,
    payload: OrderUpdate,
    db: Database = Depends(get_database),
    subject_id: str = Depends(get_current_user_id),
):
    order = OrderService.update_order(db, user_id, order_id, payload, subject_id)
    return message_response("Order updated successfully", "order", order)

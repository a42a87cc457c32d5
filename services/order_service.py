"""
Order Service - placing and updating food orders
"""

import logging
from typing import List, Optional, Tuple

from bson import ObjectId
from pymongo.database import Database

from app.exceptions import ForbiddenError, NotFoundError, ServiceValidationError
from core.helpers import page_bounds
from domain.enums import OrderStatus
from domain.schemas import OrderCreate, OrderItemCreate, OrderUpdate
from repositories import FoodRepository, OrderRepository, require_object_id

logger = logging.getLogger("foodorder.orders")

NOT_OWNER_MESSAGE = "You are not authorized to update this order"


class OrderService:
    @staticmethod
    def _price_lines(db: Database, items: List[OrderItemCreate]) -> Tuple[List[dict], float]:
        """
        Resolve order lines against the food catalogue.

        Each stored line carries the food price at order time; the total is
        the sum of price x quantity.

        Raises:
            ServiceValidationError: empty order or unknown food id
        """
        if not items:
            raise ServiceValidationError("Order must have at least one item.")

        food_ids = [ObjectId(item.food_item_id) for item in items]
        foods = FoodRepository(db).get_many_by_ids(food_ids)

        lines = []
        total = 0.0
        for item, food_id in zip(items, food_ids):
            food = foods.get(food_id)
            if food is None:
                raise ServiceValidationError(
                    "Invalid food item ID", details={"foodItemId": str(food_id)}
                )
            price = float(food["price"])
            lines.append({"foodItem": food_id, "quantity": item.quantity, "price": price})
            total += price * item.quantity
        return lines, round(total, 2)

    @staticmethod
    def _populate(db: Database, orders: List[dict]) -> List[dict]:
        """Replace each line's food id with the food document"""
        food_ids = [line["foodItem"] for order in orders for line in order.get("items", [])]
        foods = FoodRepository(db).get_many_by_ids(food_ids)
        for order in orders:
            for line in order.get("items", []):
                line["foodItem"] = foods.get(line["foodItem"], line["foodItem"])
        return orders

    @staticmethod
    def create_order(db: Database, payload: OrderCreate, subject_id: str) -> dict:
        if not payload.items:
            raise ServiceValidationError("Order must have at least one item.")
        if payload.user_id != str(subject_id):
            raise ForbiddenError("You are not authorized to create an order for this user")

        lines, total = OrderService._price_lines(db, payload.items)
        order = OrderRepository(db).create(
            {
                "user": ObjectId(payload.user_id),
                "items": lines,
                "totalAmount": total,
                "status": OrderStatus.PENDING.value,
            }
        )
        logger.info(
            f"order_created order_id={order['_id']} user_id={payload.user_id} "
            f"lines={len(lines)} total={total}"
        )
        return order

    @staticmethod
    def list_user_orders(
        db: Database,
        user_id: str,
        status: Optional[OrderStatus] = None,
        page: int = 1,
        limit: int = 10,
    ) -> Tuple[List[dict], int]:
        user_oid = require_object_id(user_id, "User")

        repo = OrderRepository(db)
        status_value = status.value if status else None
        skip, limit = page_bounds(page, limit)
        orders = repo.find_for_user(user_oid, status_value, skip=skip, limit=limit)
        total = repo.count_for_user(user_oid, status_value)
        return OrderService._populate(db, orders), total

    @staticmethod
    def update_order(
        db: Database, user_id: str, order_id: str, payload: OrderUpdate, subject_id: str
    ) -> dict:
        repo = OrderRepository(db)
        order = repo.get_by_id(order_id)
        if not order:
            raise NotFoundError("Order not found")
        if str(order["user"]) != str(subject_id) or str(user_id) != str(subject_id):
            raise ForbiddenError(NOT_OWNER_MESSAGE)

        fields = {}
        if payload.status is not None:
            fields["status"] = payload.status.value
        if payload.items is not None:
            fields["items"], fields["totalAmount"] = OrderService._price_lines(
                db, payload.items
            )
        if not fields:
            return order

        updated = repo.update(order["_id"], fields)
        if updated is None:
            raise NotFoundError("Order not found")
        logger.info(f"order_updated order_id={order_id} fields={sorted(fields)}")
        return updated

from pydantic import Field
from typing import List, Optional

from domain.enums import OrderStatus
from domain.schemas.base import CamelModel, ObjectIdStr, PartialUpdate


class OrderItemCreate(CamelModel):
    """One order line; the price is taken from the food at order time"""

    food_item_id: ObjectIdStr
    quantity: int = Field(..., ge=1)


class OrderCreate(CamelModel):
    user_id: ObjectIdStr
    items: List[OrderItemCreate] = Field(default_factory=list)
    # Accepted for client compatibility; the stored total is always recomputed.
    total_amount: Optional[float] = None


class OrderUpdate(PartialUpdate):
    status: Optional[OrderStatus] = None
    items: Optional[List[OrderItemCreate]] = None

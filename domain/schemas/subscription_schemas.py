from pydantic import Field
from typing import Optional

from domain.enums import MealType, SubscriptionPlan
from domain.schemas.base import CamelModel, ObjectIdStr, PartialUpdate


class SubscriptionCreate(CamelModel):
    """Template (catalog) subscription - carries no user"""

    plan: SubscriptionPlan
    meal_type: MealType
    price: float = Field(..., gt=0)
    meal_count: int = Field(..., gt=0)
    free_delivery: bool = False


class SubscriptionUpdate(PartialUpdate):
    plan: Optional[SubscriptionPlan] = None
    meal_type: Optional[MealType] = None
    price: Optional[float] = Field(None, gt=0)
    meal_count: Optional[int] = Field(None, gt=0)
    free_delivery: Optional[bool] = None


class SubscribeRequest(CamelModel):
    user: ObjectIdStr
    subscription_id: ObjectIdStr

"""
Domain schemas package - Pydantic models for request validation.
"""

from domain.schemas.base import CamelModel, ObjectIdStr
from domain.schemas.user_schemas import (
    UserCreate,
    UserUpdate,
    LoginRequest,
    ForgotPasswordRequest,
    ResetPasswordRequest,
)
from domain.schemas.address_schemas import AddressCreate, AddressUpdate
from domain.schemas.order_schemas import OrderCreate, OrderItemCreate, OrderUpdate
from domain.schemas.subscription_schemas import (
    SubscriptionCreate,
    SubscriptionUpdate,
    SubscribeRequest,
)
from domain.schemas.catalog_schemas import (
    Coordinates,
    FoodCreate,
    FoodUpdate,
    ItemCreate,
    ItemUpdate,
)
from domain.schemas.xmood_schemas import (
    XMCategoryCreate,
    XMCategoryUpdate,
    XMPhotoCreate,
    XMPhotoUpdate,
    XMStoryCreate,
    XMStoryUpdate,
    XMUserRegister,
    XMOnboardCreate,
    XMSwitchServiceRequest,
)

__all__ = [
    "CamelModel",
    "ObjectIdStr",
    "UserCreate",
    "UserUpdate",
    "LoginRequest",
    "ForgotPasswordRequest",
    "ResetPasswordRequest",
    "AddressCreate",
    "AddressUpdate",
    "OrderCreate",
    "OrderItemCreate",
    "OrderUpdate",
    "SubscriptionCreate",
    "SubscriptionUpdate",
    "SubscribeRequest",
    "Coordinates",
    "FoodCreate",
    "FoodUpdate",
    "ItemCreate",
    "ItemUpdate",
    "XMCategoryCreate",
    "XMCategoryUpdate",
    "XMPhotoCreate",
    "XMPhotoUpdate",
    "XMStoryCreate",
    "XMStoryUpdate",
    "XMUserRegister",
    "XMOnboardCreate",
    "XMSwitchServiceRequest",
]

"""Services package - Business logic layer"""

from services import address_guard
from services.user_service import UserService
from services.auth_service import AuthService
from services.address_service import AddressService
from services.order_service import OrderService
from services.subscription_service import SubscriptionService
from services.category_service import CategoryService
from services.food_service import FoodService
from services.item_service import ItemService
from services.xmood_service import (
    XMAppOpenService,
    XMCategoryService,
    XMOnboardService,
    XMPhotoService,
    XMReelService,
    XMStoryService,
    XMSwitchService,
    XMUserService,
)

__all__ = [
    "address_guard",
    "UserService",
    "AuthService",
    "AddressService",
    "OrderService",
    "SubscriptionService",
    "CategoryService",
    "FoodService",
    "ItemService",
    "XMAppOpenService",
    "XMCategoryService",
    "XMOnboardService",
    "XMPhotoService",
    "XMReelService",
    "XMStoryService",
    "XMSwitchService",
    "XMUserService",
]

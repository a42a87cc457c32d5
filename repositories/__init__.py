"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository, parse_object_id, require_object_id
from repositories.user_repository import UserRepository
from repositories.address_repository import AddressRepository
from repositories.order_repository import OrderRepository
from repositories.subscription_repository import SubscriptionRepository
from repositories.food_repository import FoodRepository
from repositories.category_repository import CategoryRepository
from repositories.item_repository import ItemRepository
from repositories.xmood_repository import (
    XMCategoryRepository,
    XMPhotoRepository,
    XMStoryRepository,
    XMOnboardRepository,
    XMUserRepository,
    XMAppOpenRepository,
    XMReelRepository,
    XMServiceStatusRepository,
)

__all__ = [
    "BaseRepository",
    "parse_object_id",
    "require_object_id",
    "UserRepository",
    "AddressRepository",
    "OrderRepository",
    "SubscriptionRepository",
    "FoodRepository",
    "CategoryRepository",
    "ItemRepository",
    "XMCategoryRepository",
    "XMPhotoRepository",
    "XMStoryRepository",
    "XMOnboardRepository",
    "XMUserRepository",
    "XMAppOpenRepository",
    "XMReelRepository",
    "XMServiceStatusRepository",
]

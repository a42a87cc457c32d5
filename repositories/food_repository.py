"""
Food Repository - Data access for the food catalogue
"""

from typing import Any, Dict, Optional

from adapters import mongo_adapter
from repositories.base import BaseRepository, Document


class FoodRepository(BaseRepository):
    collection_name = mongo_adapter.FOODS

    @staticmethod
    def build_filter(
        category: Optional[str] = None,
        is_available: Optional[bool] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
    ) -> Document:
        """Translate list query parameters into a MongoDB filter"""
        query: Dict[str, Any] = {}
        if category:
            query["category"] = category
        if is_available is not None:
            query["isAvailable"] = is_available
        price: Dict[str, float] = {}
        if min_price is not None:
            price["$gte"] = min_price
        if max_price is not None:
            price["$lte"] = max_price
        if price:
            query["price"] = price
        return query

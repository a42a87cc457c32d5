"""
Domain enums for the FoodOrder application.
Values are the literal strings stored in MongoDB and exchanged with clients.
"""

import enum


class OrderStatus(str, enum.Enum):
    """Order lifecycle states"""

    PENDING = "pending"
    COMPLETED = "completed"
    CANCELED = "canceled"


class SubscriptionPlan(str, enum.Enum):
    WEEKLY = "Weekly"
    MONTHLY = "Monthly"


class MealType(str, enum.Enum):
    VEG = "Veg"
    NON_VEG = "Non-Veg"


class FoodKind(str, enum.Enum):
    """Dietary class of a food item"""

    VEGETARIAN = "vegetarian"
    NON_VEGETARIAN = "non-vegetarian"
    VEGAN = "vegan"
    DESSERT = "dessert"


class PhotoShape(str, enum.Enum):
    SQUARE = "square"
    VERTICAL = "vertical"
    LANDSCAPE = "landscape"


class MediaType(str, enum.Enum):
    IMAGE = "image"
    VIDEO = "video"

"""API routes package"""

from . import (
    addresses,
    auth,
    categories,
    foods,
    graphql,
    health,
    items,
    orders,
    subscriptions,
    uploads,
    users,
    xmood,
)

__all__ = [
    "addresses",
    "auth",
    "categories",
    "foods",
    "graphql",
    "health",
    "items",
    "orders",
    "subscriptions",
    "uploads",
    "users",
    "xmood",
]

"""
FoodOrder utility functions
"""

from __future__ import annotations

import math
from typing import Optional, Tuple


# Pagination

def page_bounds(page: int, limit: int) -> Tuple[int, int]:
    """Return (skip, limit) for a 1-based page number."""
    page = max(page, 1)
    limit = max(limit, 1)
    return (page - 1) * limit, limit


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit) if limit > 0 else 0


# User agents

def classify_device(user_agent: Optional[str]) -> str:
    """Coarse device class from a User-Agent header, first match wins."""
    ua = user_agent or ""
    if "Mobile" in ua:
        return "Mobile Device"
    if "Tablet" in ua:
        return "Tablet Device"
    if "Windows" in ua:
        return "Windows PC"
    if "Macintosh" in ua:
        return "Mac Computer"
    return "Unknown Device"


def safe_field_name(value: Optional[str]) -> str:
    """Make an arbitrary string usable as a MongoDB field name."""
    name = (value or "").replace(".", "_").replace("$", "_")
    return name or "unknown"

"""
Core package - Security primitives and shared helpers.
"""

from core.helpers import classify_device, page_bounds, safe_field_name, total_pages
from core.security import PasswordHasher, TokenService

__all__ = [
    "PasswordHasher",
    "TokenService",
    "classify_device",
    "page_bounds",
    "safe_field_name",
    "total_pages",
]

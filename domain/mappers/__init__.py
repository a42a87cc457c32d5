"""
Domain mappers package.
Handles transformation between stored documents and API payloads.
"""

from domain.mappers.document_mapper import DocumentMapper, to_json
from domain.mappers.user_mapper import UserMapper

__all__ = ["DocumentMapper", "UserMapper", "to_json"]

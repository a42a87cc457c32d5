"""
Document mappers.
Turn raw MongoDB documents into JSON-ready dicts.
"""

from datetime import datetime
from typing import Any, Iterable, Optional

from bson import ObjectId


def to_json(value: Any) -> Any:
    """Recursively convert ObjectId and datetime values to strings."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: to_json(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json(v) for v in value]
    return value


class DocumentMapper:
    """Generic mapper for stored documents."""

    @staticmethod
    def to_response(doc: Optional[dict], exclude: Iterable[str] = ()) -> Optional[dict]:
        if doc is None:
            return None
        hidden = set(exclude)
        return {k: to_json(v) for k, v in doc.items() if k not in hidden}

    @staticmethod
    def to_response_list(docs: Iterable[dict], exclude: Iterable[str] = ()) -> list:
        hidden = tuple(exclude)
        return [DocumentMapper.to_response(d, hidden) for d in docs]

"""
Response helpers.
Provides the shared list envelope and message bodies used by all endpoints.
"""

from typing import Any, Iterable, List, Optional

from core.helpers import total_pages
from domain.mappers import DocumentMapper


def paginated_response(items: List[Any], total: int, page: int, limit: int) -> dict:
    """
    Wrap one page of already-mapped items.

    A page past the end simply carries an empty `data` list.
    """
    return {
        "data": items,
        "pagination": {
            "currentPage": page,
            "totalPages": total_pages(total, limit),
            "totalCount": total,
        },
    }


def document_page(docs: Iterable[dict], total: int, page: int, limit: int) -> dict:
    return paginated_response(DocumentMapper.to_response_list(docs), total, page, limit)


def message_response(message: str, key: Optional[str] = None, doc: Optional[dict] = None) -> dict:
    """`{"message": ...}` optionally carrying one mapped document under `key`"""
    body: dict = {"message": message}
    if key is not None:
        body[key] = DocumentMapper.to_response(doc)
    return body

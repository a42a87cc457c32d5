"""
Category routes.

`build_category_router` is instantiated once for image categories
(`/category`) and once for food categories (`/foodCategory`).
"""

import xml.etree.ElementTree as ET
from typing import Any, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from fastapi.responses import Response
from pymongo.database import Database

from adapters import mongo_adapter
from api.dependencies import Pagination, get_current_user_id, get_database
from api.responses import document_page, message_response
from services import CategoryService


def _append(parent: ET.Element, tag: str, value: Any) -> None:
    node = ET.SubElement(parent, tag)
    if isinstance(value, dict):
        for key, child in value.items():
            _append(node, key, child)
    elif isinstance(value, list):
        for child in value:
            _append(node, "item", child)
    elif value is not None:
        node.text = str(value)


def to_xml(body: dict, root: str = "response") -> bytes:
    """Render a JSON-ready dict as an XML document"""
    element = ET.Element(root)
    for key, value in body.items():
        _append(element, key, value)
    return ET.tostring(element, encoding="utf-8", xml_declaration=True)


def build_category_router(
    path: str, collection_name: str, tag: str, xml_path: Optional[str] = None
) -> APIRouter:
    service = CategoryService(collection_name, label=tag.lower().replace(" ", "_"))
    router = APIRouter(tags=[tag])

    @router.post(path, status_code=status.HTTP_201_CREATED)
    def create_category(
        category_name: Optional[str] = Form(None, alias="categoryName"),
        category_image: Optional[UploadFile] = File(None, alias="categoryImage"),
        db: Database = Depends(get_database),
        _: str = Depends(get_current_user_id),
    ):
        """Multipart form: `categoryName` and the `categoryImage` file"""
        if category_image is None:
            image, filename, content_type = None, None, None
        else:
            image = category_image.file
            filename = category_image.filename
            content_type = category_image.content_type
        category = service.create_category(db, category_name, image, filename, content_type)
        return message_response("Category created successfully", "category", category)

    @router.get(path)
    def list_categories(
        paging: Pagination = Depends(),
        db: Database = Depends(get_database),
        _: str = Depends(get_current_user_id),
    ):
        items, total = service.list_categories(db, paging.page, paging.limit)
        return document_page(items, total, paging.page, paging.limit)

    if xml_path:

        @router.get(xml_path)
        def list_categories_xml(
            paging: Pagination = Depends(),
            db: Database = Depends(get_database),
            _: str = Depends(get_current_user_id),
        ):
            items, total = service.list_categories(db, paging.page, paging.limit)
            body = document_page(items, total, paging.page, paging.limit)
            return Response(content=to_xml(body), media_type="application/xml")

    return router


category_router = build_category_router(
    "/category", mongo_adapter.CATEGORIES, "Categories", xml_path="/categoryXmlResponse"
)
food_category_router = build_category_router(
    "/foodCategory", mongo_adapter.FOOD_CATEGORIES, "Food Categories"
)

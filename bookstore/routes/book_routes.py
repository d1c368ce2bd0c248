#!/usr/bin/env python3
"""
书籍管理路由
"""
import json
import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, HTTPException, Path, Query, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import TypeAdapter, ValidationError

from ..dependencies import get_book_service
from ..exceptions import VCardFormatError
from ..formatters import VCARD_CONTENT_TYPE, parse_vcard
from ..models.book import Book
from ..models.validation import ValidationState
from ..services.book_service import BookService

logger = logging.getLogger(__name__)

# 创建路由
book_router = APIRouter(prefix="/books", tags=["books"])

book_adapter = TypeAdapter(Book)

JSON_CONTENT_TYPE = "application/json"


def _body_error(message: str) -> RequestValidationError:
    return RequestValidationError([{"type": "value_error", "loc": ("body",), "msg": message, "input": None}])


def _validate_book(data: Any) -> Book:
    """把请求体数据校验为Book"""
    try:
        return book_adapter.validate_python(data)
    except ValidationError as e:
        errors: List[Dict[str, Any]] = []
        for error in e.errors(include_url=False):
            error = dict(error)
            error["loc"] = ("body",) + tuple(error["loc"])
            error.pop("ctx", None)
            errors.append(error)
        raise RequestValidationError(errors)


async def _read_book(request: Request) -> Book:
    """按Content-Type读取JSON或vCard请求体"""
    content_type = request.headers.get("content-type", "").split(";", 1)[0].strip().lower()
    body = await request.body()

    if content_type == VCARD_CONTENT_TYPE:
        try:
            data = parse_vcard(body.decode("utf-8"))
        except (VCardFormatError, UnicodeDecodeError) as e:
            raise _body_error(str(e))
    elif content_type == JSON_CONTENT_TYPE or content_type.endswith("+json"):
        try:
            data = json.loads(body)
        except ValueError as e:
            raise _body_error(f"Invalid JSON: {e}")
    else:
        raise HTTPException(status_code=415, detail=f"Unsupported content type: {content_type or 'none'}")

    return _validate_book(data)


@book_router.get("", response_model=List[Book])
async def get_books(
    page_size: int = Query(10, alias="pageSize"),
    page_token: int = Query(0, alias="pageToken"),
    book_service: BookService = Depends(get_book_service),
):
    """分页获取书籍列表"""
    return await book_service.get(page_size, page_token)


@book_router.get(
    "/{book_id:int}",
    response_model=Book,
    responses={404: {"description": "书籍不存在"}},
)
async def get_book(
    book_id: int = Path(...),
    book_service: BookService = Depends(get_book_service),
):
    """获取单本书籍"""
    book = await book_service.get_by_id(book_id)
    if book is None:
        return Response(status_code=404)
    return book


@book_router.post(
    "",
    status_code=201,
    response_model=Book,
    responses={400: {"description": "创建失败"}, 415: {"description": "不支持的Content-Type"}},
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                JSON_CONTENT_TYPE: {"schema": {"$ref": "#/components/schemas/Book"}},
                VCARD_CONTENT_TYPE: {"schema": {"type": "string"}},
            },
        }
    },
)
async def create_book(
    request: Request,
    book_service: BookService = Depends(get_book_service),
):
    """创建新书籍（application/json 或 text/vcard）"""
    book = await _read_book(request)
    created = await book_service.create(book)
    if created is None:
        return Response(status_code=400)
    return JSONResponse(
        status_code=201,
        content=jsonable_encoder(created),
        headers={"Location": str(request.url_for("create_book"))},
    )


@book_router.put(
    "/{book_id:int}",
    status_code=204,
    responses={400: {"description": "更新失败"}},
)
async def update_book(
    book: Book,
    book_id: int = Path(...),
    book_service: BookService = Depends(get_book_service),
):
    """整体更新书籍"""
    success = await book_service.update(book_id, book)
    return Response(status_code=204 if success else 400)


@book_router.patch(
    "/{book_id:int}",
    response_model=Book,
    responses={400: {"description": "部分更新失败"}},
)
async def update_book_partial(
    book_id: int = Path(...),
    patch_document: Any = Body(...),
    book_service: BookService = Depends(get_book_service),
):
    """按JSON Patch文档部分更新书籍"""
    validation_state = ValidationState()
    book = await book_service.update_partial(book_id, patch_document, validation_state)
    if book is None:
        return JSONResponse(status_code=400, content={"errors": validation_state.errors})
    return book


@book_router.delete(
    "/{book_id:int}",
    responses={400: {"description": "删除失败"}},
)
async def delete_book(
    book_id: int = Path(...),
    book_service: BookService = Depends(get_book_service),
):
    """删除书籍"""
    success = await book_service.delete_by_id(book_id)
    return Response(status_code=200 if success else 400)

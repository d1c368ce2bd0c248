"""
书籍业务服务层
"""
import logging
from typing import Any, Dict, List, Optional

from bookstore.models.book import Book
from bookstore.models.validation import ValidationState
from bookstore.repositories.base import MAX_KEY, RepositoryBase

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 100


class BookService:
    """书籍服务类"""

    def __init__(self, book_repository: RepositoryBase[Book]):
        self.book_repository = book_repository

    async def get(self, page_size: int, page_token: int) -> List[Book]:
        """分页获取书籍"""
        page_size = min(max(page_size, 0), MAX_PAGE_SIZE)
        page_token = min(max(page_token, 0), MAX_KEY)
        return await self.book_repository.list(page_size, page_token)

    async def get_by_id(self, book_id: int) -> Optional[Book]:
        """根据ID获取书籍"""
        return await self.book_repository.get_by_id(book_id)

    async def create(self, book: Book) -> Optional[Book]:
        """创建书籍"""
        created = await self.book_repository.create(book)
        if created is None:
            logger.info(f"创建书籍失败: {book!r}")
        else:
            logger.info(f"已创建书籍: {created!r}")
        return created

    async def update(self, book_id: int, book: Book) -> bool:
        """更新书籍"""
        success = await self.book_repository.update(book_id, book)
        logger.info(f"更新书籍 {book_id}: {'成功' if success else '失败'}")
        return success

    async def update_partial(
        self,
        book_id: int,
        patch_document: List[Dict[str, Any]],
        validation_state: ValidationState,
    ) -> Optional[Book]:
        """部分更新书籍"""
        book = await self.book_repository.update_partial(book_id, patch_document, validation_state)
        if book is None:
            logger.info(f"部分更新书籍 {book_id} 失败: {validation_state.errors}")
        return book

    async def delete_by_id(self, book_id: int) -> bool:
        """删除书籍"""
        success = await self.book_repository.delete_by_id(book_id)
        logger.info(f"删除书籍 {book_id}: {'成功' if success else '失败'}")
        return success

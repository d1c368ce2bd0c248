"""
依赖注入
"""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.database import get_session
from bookstore.repositories.book_repository import BookStoreRepository
from bookstore.services.book_service import BookService


def get_book_repository(session: AsyncSession = Depends(get_session)) -> BookStoreRepository:
    return BookStoreRepository(session)


def get_book_service(repository: BookStoreRepository = Depends(get_book_repository)) -> BookService:
    return BookService(repository)

"""
书籍数据访问层
"""
from bookstore.models.book import Book
from bookstore.models.tables import BookRecord
from bookstore.repositories.sqlalchemy_repository import SqlAlchemyRepository


class BookStoreRepository(SqlAlchemyRepository[Book]):
    """书籍仓库类"""
    entity_type = Book
    record_type = BookRecord

"""
数据库表模型
"""
from sqlalchemy import Column, Integer, String, Text

from bookstore.database import Base


class BookRecord(Base):
    """books表"""
    __tablename__ = "books"
    # 删除后的ID不会被复用
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    author = Column(String(255))
    isbn = Column(String(32), unique=True)
    publisher = Column(String(255))
    description = Column(Text)

    def __repr__(self):
        return f"BookRecord(id={self.id}, name='{self.name}')"

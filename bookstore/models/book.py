"""
书籍模型
"""
from dataclasses import dataclass
from typing import Optional

@dataclass
class Book:
    """书籍模型"""
    name: str
    author: Optional[str] = None
    isbn: Optional[str] = None
    publisher: Optional[str] = None
    description: Optional[str] = None
    id: Optional[int] = None  # 数据库自增主键

    def __repr__(self):
        return f"Book(id={self.id}, name='{self.name}')"

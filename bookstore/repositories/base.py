"""
通用数据仓库接口
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, TypeVar

from bookstore.models.validation import ValidationState

T = TypeVar("T")

# 存储中整数列（64位有符号）的取值上限
MAX_KEY = 2 ** 63 - 1


class RepositoryBase(ABC, Generic[T]):
    """实体类型T的增删改查接口"""

    @abstractmethod
    async def list(self, page_size: int, page_token: int) -> List[T]:
        """跳过page_token条记录后返回最多page_size条"""

    @abstractmethod
    async def get_by_id(self, entity_id: int) -> Optional[T]:
        """不存在时返回None"""

    @abstractmethod
    async def create(self, entity: T) -> Optional[T]:
        """持久化新实体，被存储拒绝时返回None"""

    @abstractmethod
    async def update(self, entity_id: int, entity: T) -> bool:
        """替换除主键外的全部字段"""

    @abstractmethod
    async def update_partial(
        self,
        entity_id: int,
        patch_document: List[Dict[str, Any]],
        validation_state: ValidationState,
    ) -> Optional[T]:
        """应用JSON Patch，失败时把原因记录到validation_state并返回None"""

    @abstractmethod
    async def delete_by_id(self, entity_id: int) -> bool:
        """删除实体，不存在时返回False"""

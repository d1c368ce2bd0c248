"""
基于SQLAlchemy异步会话的通用仓库实现
"""
import dataclasses
import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.exceptions import InvalidPatchError
from bookstore.models.validation import ValidationState
from bookstore.repositories.base import MAX_KEY, RepositoryBase
from bookstore.repositories.patching import apply_patch

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SqlAlchemyRepository(RepositoryBase[T]):
    """
    关系型存储的仓库

    子类指定 entity_type（dataclass领域模型）和 record_type（ORM表模型），
    两者字段同名。
    """

    entity_type: Type[T]
    record_type: Type[Any]
    id_field = "id"

    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_entity(self, record: Any) -> T:
        values = {f.name: getattr(record, f.name) for f in dataclasses.fields(self.entity_type)}
        return self.entity_type(**values)

    def _to_values(self, entity: T) -> Dict[str, Any]:
        values = dataclasses.asdict(entity)
        values.pop(self.id_field, None)
        return values

    async def list(self, page_size: int, page_token: int) -> List[T]:
        """分页查询，page_token为偏移量"""
        record_id = getattr(self.record_type, self.id_field)
        page_token = min(max(page_token, 0), MAX_KEY)
        page_size = min(max(page_size, 0), MAX_KEY)
        query = select(self.record_type).order_by(record_id).offset(page_token).limit(page_size)
        result = await self.session.execute(query)
        return [self._to_entity(record) for record in result.scalars().all()]

    async def get_by_id(self, entity_id: int) -> Optional[T]:
        record = await self._get_record(entity_id)
        return self._to_entity(record) if record is not None else None

    async def create(self, entity: T) -> Optional[T]:
        record = self.record_type(**self._to_values(entity))
        self.session.add(record)
        if not await self._commit(f"创建{self.record_type.__name__}"):
            return None
        await self.session.refresh(record)
        return self._to_entity(record)

    async def update(self, entity_id: int, entity: T) -> bool:
        record = await self._get_record(entity_id)
        if record is None:
            return False
        for key, value in self._to_values(entity).items():
            setattr(record, key, value)
        return await self._commit(f"更新{self.record_type.__name__} {entity_id}")

    async def update_partial(
        self,
        entity_id: int,
        patch_document: List[Dict[str, Any]],
        validation_state: ValidationState,
    ) -> Optional[T]:
        record = await self._get_record(entity_id)
        if record is None:
            validation_state.add_error(f"/{self.id_field}", f"{self.record_type.__name__} {entity_id} not found")
            return None

        try:
            patched = apply_patch(self._to_entity(record), patch_document, self.id_field)
        except InvalidPatchError as e:
            validation_state.add_error(e.path, str(e))
            return None

        for key, value in self._to_values(patched).items():
            setattr(record, key, value)
        if not await self._commit(f"部分更新{self.record_type.__name__} {entity_id}"):
            validation_state.add_error("", "The change was rejected by the store")
            return None
        return patched

    async def delete_by_id(self, entity_id: int) -> bool:
        record = await self._get_record(entity_id)
        if record is None:
            return False
        await self.session.delete(record)
        return await self._commit(f"删除{self.record_type.__name__} {entity_id}")

    async def _commit(self, action: str) -> bool:
        """提交事务，被存储拒绝时回滚并返回False"""
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.warning(f"{action}失败: {e}")
            return False
        return True

    async def _get_record(self, entity_id: int) -> Optional[Any]:
        """按主键读取记录，超出整数列范围的主键视为不存在"""
        if not -MAX_KEY - 1 <= entity_id <= MAX_KEY:
            return None
        return await self.session.get(self.record_type, entity_id)

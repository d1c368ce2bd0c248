"""
数据库配置
"""
import logging
import os
from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool

from bookstore.config import load_settings

logger = logging.getLogger(__name__)

# 创建基础模型类
Base = declarative_base()

# 数据库引擎和会话（启动时初始化）
engine: Optional[AsyncEngine] = None
SessionLocal: Optional[async_sessionmaker] = None


def get_database_url() -> str:
    """获取数据库URL"""
    return load_settings().database_url


async def init_database(database_url: Optional[str] = None) -> AsyncEngine:
    """初始化数据库"""
    global engine, SessionLocal
    # 导入表模型以注册到Base.metadata
    from bookstore.models import tables  # noqa: F401

    database_url = database_url or get_database_url()
    if database_url.startswith("sqlite"):
        _ensure_sqlite_directory(database_url)
        # SQLite连接不跨事件循环复用
        engine = create_async_engine(database_url, poolclass=NullPool)
    else:
        engine = create_async_engine(database_url, pool_pre_ping=True)
    SessionLocal = async_sessionmaker(engine, autoflush=False, expire_on_commit=False)

    # 创建所有表
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info(f"数据库已初始化: {engine.url.render_as_string(hide_password=True)}")
    return engine


async def close_database() -> None:
    """释放数据库连接"""
    global engine, SessionLocal
    if engine is not None:
        await engine.dispose()
    engine = None
    SessionLocal = None


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """每个请求一个会话"""
    if SessionLocal is None:
        raise RuntimeError("Database is not initialised, call init_database() first")
    async with SessionLocal() as session:
        yield session


def _ensure_sqlite_directory(database_url: str) -> None:
    """为文件型SQLite数据库创建目录"""
    _, _, path = database_url.partition(":///")
    if not path or path == ":memory:":
        return
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

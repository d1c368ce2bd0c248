"""
pytest配置文件，定义全局fixtures
"""
import tempfile
from pathlib import Path
from typing import AsyncGenerator, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore import database
from bookstore.main import app
from tests.fixtures.sample_data import SAMPLE_BOOKS


@pytest.fixture
def temp_db_url() -> Generator[str, None, None]:
    """临时SQLite数据库URL"""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield f"sqlite+aiosqlite:///{Path(temp_dir) / 'test.db'}"


@pytest.fixture
async def db_session(temp_db_url: str) -> AsyncGenerator[AsyncSession, None]:
    """连接临时数据库的会话"""
    await database.init_database(temp_db_url)
    async with database.SessionLocal() as session:
        yield session
    await database.close_database()


@pytest.fixture
def client(temp_db_url: str, monkeypatch) -> Generator[TestClient, None, None]:
    """创建FastAPI测试客户端，使用临时数据库"""
    monkeypatch.setenv("BOOKSTORE_DATABASE_URL", temp_db_url)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_book_data():
    """示例书籍数据"""
    return dict(SAMPLE_BOOKS[0])


@pytest.fixture
def created_book(client, sample_book_data):
    """通过接口创建一本书并返回响应数据"""
    response = client.post("/books", json=sample_book_data)
    assert response.status_code == 201
    return response.json()

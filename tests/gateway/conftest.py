"""gateway 测试配置 -- FastAPI app + httpx AsyncClient + 业务服务 fixture"""

import os
from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from noticeboard.core.store import StoreGroup, create_store_group
from noticeboard.gateway.services.message_service import MessageService


@pytest_asyncio.fixture
async def store_group(tmp_path: Path) -> AsyncGenerator[StoreGroup, None]:
    """临时数据库上的 StoreGroup"""
    group = await create_store_group(str(tmp_path / "sqlite" / "test.db"))
    yield group
    await group.conn.close()


@pytest_asyncio.fixture
async def service(store_group: StoreGroup) -> MessageService:
    """基于真实 SQLite Store 的 MessageService"""
    return MessageService(store_group.message_store)


@pytest.fixture
def forbid_writes(store_group: StoreGroup, monkeypatch):
    """任何写操作都会让测试失败 -- 用于断言请求未触达持久化"""

    async def _fail(*args, **kwargs):
        raise AssertionError("persistence should not be reached")

    for name in ("create", "update", "delete"):
        monkeypatch.setattr(store_group.message_store, name, _fail)


@pytest_asyncio.fixture
async def app(store_group: StoreGroup):
    """创建测试用 FastAPI app 实例（手动注入 store_group，绕过 lifespan）"""
    os.environ["LOGFIRE_SEND_TO_LOGFIRE"] = "false"

    from noticeboard.gateway.main import create_app

    application = create_app()
    application.state.store_group = store_group
    yield application

    os.environ.pop("LOGFIRE_SEND_TO_LOGFIRE", None)


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """提供 httpx AsyncClient 用于测试"""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

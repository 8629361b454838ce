"""集成测试共享 fixture -- 通过 lifespan 启动完整应用"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest_asyncio
from httpx import ASGITransport, AsyncClient


@pytest_asyncio.fixture
async def integration_app(tmp_path: Path, monkeypatch):
    """集成测试用 FastAPI app（真实 lifespan 初始化 Store）"""
    monkeypatch.setenv("NOTICEBOARD_DB_PATH", str(tmp_path / "sqlite" / "test.db"))
    monkeypatch.setenv("LOGFIRE_SEND_TO_LOGFIRE", "false")

    from noticeboard.gateway.main import create_app

    app = create_app()
    async with app.router.lifespan_context(app):
        yield app


@pytest_asyncio.fixture
async def client(integration_app) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(
        transport=ASGITransport(app=integration_app),
        base_url="http://test",
    ) as ac:
        yield ac

"""健康检查测试

测试内容：
1. GET /health 返回 200 + ok
2. GET /ready 正常时返回 200 + checks 结构
3. GET /ready SQLite 不可用时返回 503
"""

from httpx import AsyncClient


class TestHealthCheck:
    """健康检查"""

    async def test_health_returns_200(self, client: AsyncClient):
        """GET /health 永远返回 200"""
        resp = await client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}

    async def test_ready_returns_checks(self, client: AsyncClient):
        resp = await client.get("/ready")

        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "ready"
        assert data["checks"]["sqlite"] == "ok"
        assert data["checks"]["wal_mode"] is True
        assert "disk_space_mb" in data["checks"]

    async def test_ready_returns_503_when_sqlite_unavailable(self, client: AsyncClient, app):
        """数据库连接不可用时返回 503"""

        class BrokenConn:
            async def execute(self, *args, **kwargs):
                raise RuntimeError("database unavailable")

        class BrokenStoreGroup:
            conn = BrokenConn()

        original = app.state.store_group
        app.state.store_group = BrokenStoreGroup()
        try:
            resp = await client.get("/ready")
        finally:
            app.state.store_group = original

        assert resp.status_code == 503
        data = resp.json()
        assert data["status"] == "not_ready"
        assert data["checks"]["sqlite"].startswith("error")

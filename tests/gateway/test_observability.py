"""可观测性测试

测试内容：
1. HTTP 请求含 X-Request-ID 响应头
2. 路径中的组织/消息 ID 提取
3. structlog 配置正确
"""

import structlog
from httpx import AsyncClient
from noticeboard.gateway.middleware.logging_config import setup_logging
from noticeboard.gateway.middleware.logging_mw import resolve_request_id
from noticeboard.gateway.middleware.trace_mw import extract_path_ids


class TestRequestId:
    """请求级 request_id"""

    async def test_request_id_in_response_header(self, client: AsyncClient):
        resp = await client.get("/api/v1/organizations/org-a/messages")
        assert resp.status_code == 200
        # ULID 格式：26 字符
        assert len(resp.headers["x-request-id"]) == 26

    async def test_request_ids_are_unique(self, client: AsyncClient):
        ids = set()
        for _ in range(3):
            resp = await client.get("/health")
            ids.add(resp.headers["x-request-id"])
        assert len(ids) == 3


class TestTraceIds:
    """路径 ID 提取"""

    def test_extract_organization_and_message(self):
        ids = extract_path_ids("/api/v1/organizations/org-a/messages/01JMSG")
        assert ids == {"organization_id": "org-a", "message_id": "01JMSG"}

    def test_extract_organization_only(self):
        assert extract_path_ids("/api/v1/organizations/org-a/messages") == {
            "organization_id": "org-a"
        }

    def test_unrelated_path(self):
        assert extract_path_ids("/health") == {}


class TestLoggingConfig:
    """structlog 配置"""

    def test_json_mode(self, monkeypatch):
        monkeypatch.setenv("NOTICEBOARD_LOG_FORMAT", "json")
        setup_logging()
        assert structlog.is_configured()

    def test_dev_mode(self, monkeypatch):
        monkeypatch.delenv("NOTICEBOARD_LOG_FORMAT", raising=False)
        setup_logging()
        assert structlog.is_configured()


class TestIncomingRequestId:
    """客户端传入 X-Request-ID"""

    async def test_incoming_request_id_is_echoed(self, client: AsyncClient):
        resp = await client.get("/health", headers={"X-Request-ID": "client-req-42"})
        assert resp.headers["x-request-id"] == "client-req-42"

    def test_oversized_request_id_is_replaced(self):
        assert len(resolve_request_id("x" * 65)) == 26

    def test_missing_request_id_is_generated(self):
        assert len(resolve_request_id(None)) == 26

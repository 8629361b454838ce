"""TraceMiddleware

为消息操作绑定 organization_id / message_id，贯穿该请求的业务日志。
两者均从路径 /api/v1/organizations/{organization_id}/messages/{message_id} 中提取。
"""

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response


def extract_path_ids(path: str) -> dict[str, str]:
    """从请求路径提取 organization_id 和 message_id（如果有）"""
    ids: dict[str, str] = {}
    parts = [p for p in path.split("/") if p]
    for i, part in enumerate(parts[:-1]):
        if part == "organizations":
            ids["organization_id"] = parts[i + 1]
        elif part == "messages":
            ids["message_id"] = parts[i + 1]
    return ids


class TraceMiddleware(BaseHTTPMiddleware):
    """租户级追踪中间件 -- 为消息操作绑定组织与消息 ID"""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        ids = extract_path_ids(request.url.path)
        if ids:
            structlog.contextvars.bind_contextvars(**ids)

        return await call_next(request)

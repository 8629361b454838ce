"""LoggingMiddleware

为每个 HTTP 请求确定 request_id（沿用客户端传入的 X-Request-ID，否则生成 ULID），
绑定到 structlog contextvars，并记录请求耗时。
"""

import time

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from ulid import ULID

REQUEST_ID_HEADER = "X-Request-ID"

# 客户端传入的 request_id 最大长度，超过则重新生成
_MAX_REQUEST_ID_LENGTH = 64


def resolve_request_id(incoming: str | None) -> str:
    """优先使用客户端传入的 request_id"""
    if incoming and incoming.isprintable() and len(incoming) <= _MAX_REQUEST_ID_LENGTH:
        return incoming
    return str(ULID())


class LoggingMiddleware(BaseHTTPMiddleware):
    """请求级日志中间件 -- request_id 绑定 + 耗时记录"""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )

        log = structlog.get_logger()
        started = time.perf_counter()

        response = await call_next(request)

        duration_ms = int((time.perf_counter() - started) * 1000)
        if response.status_code >= 500:
            await log.aerror(
                "request_failed",
                status_code=response.status_code,
                duration_ms=duration_ms,
            )
        else:
            await log.ainfo(
                "request_completed",
                status_code=response.status_code,
                duration_ms=duration_ms,
            )

        response.headers[REQUEST_ID_HEADER] = request_id
        return response

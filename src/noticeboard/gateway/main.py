"""FastAPI 应用主文件

app 创建 + lifespan 管理：DB 初始化/关闭 + 路由注册 + 存储异常兜底。
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import aiosqlite
import structlog
from fastapi import FastAPI, Request
from noticeboard.core.config import get_db_path
from noticeboard.core.store import create_store_group
from starlette.responses import JSONResponse

from .middleware.logging_config import setup_logfire, setup_logging
from .middleware.logging_mw import LoggingMiddleware
from .middleware.trace_mw import TraceMiddleware
from .routes import health, messages

log = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """应用生命周期管理：启动时初始化 DB，关闭时清理连接"""
    db_path = get_db_path()
    app.state.store_group = await create_store_group(db_path)
    log.info("store_group_initialized", db_path=db_path)

    yield

    # 关闭：清理数据库连接
    if hasattr(app.state, "store_group") and app.state.store_group:
        await app.state.store_group.conn.close()


async def storage_error_handler(request: Request, exc: aiosqlite.Error) -> JSONResponse:
    """存储层故障 -- 不属于业务结果，统一返回 500"""
    log.error(
        "storage_error",
        error_type=type(exc).__name__,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": {
                "code": "STORAGE_ERROR",
                "message": "Storage is unavailable, please retry later",
            }
        },
    )


def create_app() -> FastAPI:
    """创建 FastAPI 应用实例"""
    app = FastAPI(
        title="Noticeboard Gateway",
        version="0.1.0",
        description="按组织隔离的公告消息 API",
        lifespan=lifespan,
    )

    # 注册中间件（顺序：先 Trace 后 Logging）
    app.add_middleware(TraceMiddleware)
    app.add_middleware(LoggingMiddleware)

    app.add_exception_handler(aiosqlite.Error, storage_error_handler)

    # 初始化日志
    setup_logging()
    setup_logfire(app)

    # 注册路由
    app.include_router(messages.router, tags=["messages"])
    app.include_router(health.router, tags=["health"])

    return app


# 默认 app 实例（uvicorn 入口）
app = create_app()

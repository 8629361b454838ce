"""structlog 配置模块

dev 模式：ConsoleRenderer 彩色输出
json 模式：一行一个 JSON 事件，异常堆栈展开为字符串字段
两种模式都桥接到标准库 logging，uvicorn/aiosqlite 的日志走同一条处理器链。
Logfire APM：LOGFIRE_SEND_TO_LOGFIRE=true 时启用，默认关闭。
"""

import logging
import os

import structlog
from fastapi import FastAPI
from noticeboard.core.config import get_log_format, get_log_level

# 第三方库 logger 的最低级别（aiosqlite 在 DEBUG 下会逐条打印 SQL）
_NOISY_LOGGERS: dict[str, int] = {
    "aiosqlite": logging.WARNING,
    "uvicorn.access": logging.WARNING,
}


def setup_logging(log_format: str | None = None, log_level: str | None = None) -> None:
    """初始化 structlog 配置

    Args:
        log_format: "json" 或 "dev"；缺省读取 NOTICEBOARD_LOG_FORMAT
        log_level: 日志级别名；缺省读取 NOTICEBOARD_LOG_LEVEL
    """
    log_format = log_format or get_log_format()
    log_level = log_level or get_log_level()

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]

    if log_format == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer(
            ensure_ascii=False
        )
        # JSON 输出前把 exc_info 渲染成字符串
        shared_processors.append(structlog.processors.format_exc_info)
    else:
        renderer = structlog.dev.ConsoleRenderer()

    shared_processors.append(structlog.processors.UnicodeDecoder())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=shared_processors,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    for name, level in _NOISY_LOGGERS.items():
        logging.getLogger(name).setLevel(level)


def setup_logfire(app: FastAPI) -> None:
    """按 LOGFIRE_SEND_TO_LOGFIRE 启用 Logfire（需要安装 logfire extra 与 LOGFIRE_TOKEN）"""
    send_to_logfire = os.environ.get("LOGFIRE_SEND_TO_LOGFIRE", "false").lower()
    if send_to_logfire != "true":
        return
    try:
        import logfire

        logfire.configure(service_name="noticeboard-gateway")
        logfire.instrument_fastapi(app)
    except Exception:
        # Logfire 初始化失败不影响服务运行
        structlog.get_logger().warning(
            "logfire_init_failed",
            message="Logfire 初始化失败，降级为纯本地日志",
        )

"""配置常量模块 -- 可通过环境变量覆盖

包含数据库路径、日志格式以及消息字段长度约束等可配置常量。
"""

import os
from pathlib import Path


def _get_base_dir() -> Path:
    """获取项目 data 基础目录"""
    return Path(os.environ.get("NOTICEBOARD_DATA_DIR", "data"))


def get_db_path() -> str:
    """获取 SQLite 数据库路径"""
    return os.environ.get(
        "NOTICEBOARD_DB_PATH",
        str(_get_base_dir() / "sqlite" / "noticeboard.db"),
    )


def get_log_format() -> str:
    """获取日志渲染模式（dev / json）"""
    return os.environ.get("NOTICEBOARD_LOG_FORMAT", "dev")


def get_log_level() -> str:
    """获取日志级别"""
    return os.environ.get("NOTICEBOARD_LOG_LEVEL", "INFO")


# 标题长度约束（trim 之后，闭区间）
TITLE_MIN_LENGTH: int = 3
TITLE_MAX_LENGTH: int = 200

# 正文长度约束（trim 之后，闭区间）
CONTENT_MIN_LENGTH: int = 10
CONTENT_MAX_LENGTH: int = 1000

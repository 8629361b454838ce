"""SQLite 数据库初始化

PRAGMA 配置 + messages 表 DDL + 索引创建。
使用 aiosqlite 异步操作。
"""

import aiosqlite

# messages 表 DDL
_MESSAGES_DDL = """
CREATE TABLE IF NOT EXISTS messages (
    id               TEXT PRIMARY KEY,
    organization_id  TEXT NOT NULL,
    title            TEXT NOT NULL,
    title_key        TEXT NOT NULL,
    content          TEXT NOT NULL,
    is_active        INTEGER NOT NULL DEFAULT 1,
    created_at       TEXT NOT NULL,
    updated_at       TEXT NOT NULL
);
"""

_MESSAGES_INDEXES = [
    # 组织内标题唯一：title_key 为 title.casefold()，覆盖非 ASCII 字母
    (
        "CREATE UNIQUE INDEX IF NOT EXISTS idx_messages_org_title_key "
        "ON messages(organization_id, title_key);"
    ),
    # 组织内按创建时间倒序列出
    (
        "CREATE INDEX IF NOT EXISTS idx_messages_org_created_at "
        "ON messages(organization_id, created_at DESC);"
    ),
]


async def init_db(conn: aiosqlite.Connection) -> None:
    """初始化数据库：设置 PRAGMA + 创建表 + 创建索引

    Args:
        conn: aiosqlite 数据库连接
    """
    # 设置 PRAGMA
    await conn.execute("PRAGMA journal_mode = WAL;")
    await conn.execute("PRAGMA foreign_keys = ON;")
    await conn.execute("PRAGMA busy_timeout = 5000;")

    # 创建表
    await conn.execute(_MESSAGES_DDL)

    # 创建索引
    for idx_sql in _MESSAGES_INDEXES:
        await conn.execute(idx_sql)

    await conn.commit()


async def verify_wal_mode(conn: aiosqlite.Connection) -> bool:
    """验证 WAL 模式是否生效

    Returns:
        True 如果 WAL 模式已启用
    """
    cursor = await conn.execute("PRAGMA journal_mode;")
    row = await cursor.fetchone()
    return row is not None and row[0].lower() == "wal"

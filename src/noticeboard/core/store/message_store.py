"""MessageStore SQLite 实现

每个写操作独立提交；失败时回滚并上抛。
同一连接上的读写都经 _lock 串行执行，读操作不会看到其他协程尚未提交的写入。
标题唯一性基于 title_key（title.casefold()），唯一索引冲突转换为
MessageTitleConflictError，其余存储错误原样上抛。
"""

import asyncio
from datetime import UTC, datetime

import aiosqlite
from ulid import ULID

from ..exceptions import MessageTitleConflictError
from ..models.message import Message, MessageDraft

_COLUMNS = "id, organization_id, title, content, is_active, created_at, updated_at"


def title_key(title: str) -> str:
    """标题比较键：Unicode 大小写折叠"""
    return title.casefold()


class SqliteMessageStore:
    """MessageStore 的 SQLite 实现"""

    def __init__(self, conn: aiosqlite.Connection) -> None:
        self._conn = conn
        self._lock = asyncio.Lock()

    async def get_by_id(self, organization_id: str, message_id: str) -> Message | None:
        """根据 id 查询消息（限定组织）"""
        async with self._lock:
            cursor = await self._conn.execute(
                f"SELECT {_COLUMNS} FROM messages WHERE organization_id = ? AND id = ?",
                (organization_id, message_id),
            )
            row = await cursor.fetchone()
        if row is None:
            return None
        return self._row_to_message(row)

    async def get_by_title(self, organization_id: str, title: str) -> Message | None:
        """根据标题查询消息，大小写不敏感"""
        async with self._lock:
            cursor = await self._conn.execute(
                f"""
                SELECT {_COLUMNS} FROM messages
                WHERE organization_id = ? AND title_key = ?
                """,
                (organization_id, title_key(title)),
            )
            row = await cursor.fetchone()
        if row is None:
            return None
        return self._row_to_message(row)

    async def list_by_organization(self, organization_id: str) -> list[Message]:
        """查询组织内全部消息，按 created_at 倒序"""
        async with self._lock:
            cursor = await self._conn.execute(
                f"""
                SELECT {_COLUMNS} FROM messages
                WHERE organization_id = ?
                ORDER BY created_at DESC, id DESC
                """,
                (organization_id,),
            )
            rows = await cursor.fetchall()
        return [self._row_to_message(row) for row in rows]

    async def create(self, draft: MessageDraft) -> Message:
        """创建消息：分配 ULID 与创建时间"""
        now = datetime.now(UTC)
        message = Message(
            id=str(ULID()),
            organization_id=draft.organization_id,
            title=draft.title,
            content=draft.content,
            is_active=draft.is_active,
            created_at=now,
            updated_at=now,
        )
        async with self._lock:
            try:
                await self._conn.execute(
                    f"""
                    INSERT INTO messages ({_COLUMNS}, title_key)
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        message.id,
                        message.organization_id,
                        message.title,
                        message.content,
                        int(message.is_active),
                        message.created_at.isoformat(),
                        message.updated_at.isoformat(),
                        title_key(message.title),
                    ),
                )
                await self._conn.commit()
            except aiosqlite.IntegrityError as e:
                await self._conn.rollback()
                if self._is_title_conflict(e):
                    raise MessageTitleConflictError(draft.organization_id, draft.title) from e
                raise
            except Exception:
                await self._conn.rollback()
                raise
        return message

    async def update(self, message: Message) -> Message | None:
        """更新 title/content/is_active/updated_at

        organization_id 与 created_at 不会被改写。
        """
        async with self._lock:
            try:
                cursor = await self._conn.execute(
                    """
                    UPDATE messages
                    SET title = ?, title_key = ?, content = ?, is_active = ?, updated_at = ?
                    WHERE organization_id = ? AND id = ?
                    """,
                    (
                        message.title,
                        title_key(message.title),
                        message.content,
                        int(message.is_active),
                        message.updated_at.isoformat(),
                        message.organization_id,
                        message.id,
                    ),
                )
                await self._conn.commit()
            except aiosqlite.IntegrityError as e:
                await self._conn.rollback()
                if self._is_title_conflict(e):
                    raise MessageTitleConflictError(
                        message.organization_id, message.title
                    ) from e
                raise
            except Exception:
                await self._conn.rollback()
                raise

        if cursor.rowcount == 0:
            return None
        return message

    async def delete(self, organization_id: str, message_id: str) -> bool:
        """删除消息，返回是否删除了记录"""
        async with self._lock:
            try:
                cursor = await self._conn.execute(
                    "DELETE FROM messages WHERE organization_id = ? AND id = ?",
                    (organization_id, message_id),
                )
                await self._conn.commit()
            except Exception:
                await self._conn.rollback()
                raise
        return cursor.rowcount > 0

    @staticmethod
    def _is_title_conflict(error: aiosqlite.IntegrityError) -> bool:
        text = str(error)
        return (
            "idx_messages_org_title_key" in text
            or "messages.organization_id, messages.title_key" in text
        )

    @staticmethod
    def _row_to_message(row: aiosqlite.Row) -> Message:
        """将数据库行转换为 Message 模型"""
        return Message(
            id=row[0],
            organization_id=row[1],
            title=row[2],
            content=row[3],
            is_active=bool(row[4]),
            created_at=datetime.fromisoformat(row[5]),
            updated_at=datetime.fromisoformat(row[6]),
        )

"""core 测试配置 -- 核心层 fixture"""

import pytest
import pytest_asyncio
from noticeboard.core.models import MessageDraft
from noticeboard.core.store.message_store import SqliteMessageStore


@pytest_asyncio.fixture
async def message_store(db_conn) -> SqliteMessageStore:
    """基于临时数据库的 MessageStore"""
    return SqliteMessageStore(db_conn)


@pytest.fixture
def make_draft():
    """MessageDraft 构造器"""

    def _make(
        title: str = "Welcome Note",
        content: str = "This is a sample announcement body.",
        organization_id: str = "org-a",
        is_active: bool = True,
    ) -> MessageDraft:
        return MessageDraft(
            organization_id=organization_id,
            title=title,
            content=content,
            is_active=is_active,
        )

    return _make

"""Store Protocol 接口定义

定义 MessageStore 的抽象接口，
使用 Python Protocol 实现结构化子类型（duck typing）。
所有操作都限定在单个组织的命名空间内。
"""

from typing import Protocol

from ..models.message import Message, MessageDraft


class MessageStore(Protocol):
    """Message 存储接口"""

    async def get_by_id(self, organization_id: str, message_id: str) -> Message | None:
        """根据 id 查询消息"""
        ...

    async def get_by_title(self, organization_id: str, title: str) -> Message | None:
        """根据标题查询消息（匹配方式由存储决定）"""
        ...

    async def list_by_organization(self, organization_id: str) -> list[Message]:
        """查询组织内全部消息，按 created_at 倒序"""
        ...

    async def create(self, draft: MessageDraft) -> Message:
        """创建消息，分配 id 与时间戳"""
        ...

    async def update(self, message: Message) -> Message | None:
        """整条更新消息；记录已不存在时返回 None"""
        ...

    async def delete(self, organization_id: str, message_id: str) -> bool:
        """删除消息；返回是否真的删除了记录"""
        ...

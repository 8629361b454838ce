"""Message Domain Model

一条公告消息。所有查询与标题唯一性校验都限定在 organization_id 内。
id 与 organization_id 创建后不可变。
"""

from datetime import datetime

from pydantic import BaseModel, Field


class MessageDraft(BaseModel):
    """待持久化的新消息 -- 不含 id 与时间戳，由 Store 分配"""

    organization_id: str = Field(description="所属组织 ID")
    title: str = Field(description="标题（已 trim）")
    content: str = Field(description="正文（已 trim）")
    is_active: bool = Field(default=True, description="是否激活")


class Message(BaseModel):
    """Message 数据模型

    is_active 决定是否允许更新/删除，不是软删除标记。
    updated_at 由业务层在每次成功更新时写入，调用方不可指定。
    """

    id: str = Field(description="唯一标识，ULID 格式")
    organization_id: str = Field(description="所属组织 ID")
    title: str = Field(description="标题，组织内大小写不敏感唯一")
    content: str = Field(description="正文")
    is_active: bool = Field(default=True, description="是否激活")
    created_at: datetime = Field(description="创建时间")
    updated_at: datetime = Field(description="更新时间")


class CreateMessageRequest(BaseModel):
    """创建消息请求 -- 字段缺省视为空字符串"""

    title: str | None = Field(default=None, description="标题")
    content: str | None = Field(default=None, description="正文")


class UpdateMessageRequest(BaseModel):
    """更新消息请求

    title/content 为空或仅含空白时视为"不修改"。
    """

    title: str | None = Field(default=None, description="新标题")
    content: str | None = Field(default=None, description="新正文")
    is_active: bool = Field(description="更新后的激活状态，必填")

"""Result 变体 -- 业务逻辑层的封闭结果类型

业务层只返回以下变体之一，不抛出业务异常：
Created / Updated / Deleted / NotFound / Conflict / ValidationError。
网关层负责把每个变体映射为 HTTP 响应。
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from .enums import ResultKind
from .message import Message


class Created(BaseModel):
    """创建成功，携带持久化后的消息"""

    kind: Literal[ResultKind.CREATED] = ResultKind.CREATED
    message: Message


class Updated(BaseModel):
    """更新成功（无 payload）"""

    kind: Literal[ResultKind.UPDATED] = ResultKind.UPDATED


class Deleted(BaseModel):
    """删除成功（无 payload）"""

    kind: Literal[ResultKind.DELETED] = ResultKind.DELETED


class NotFound(BaseModel):
    """目标记录不存在（含操作过程中被并发删除）"""

    kind: Literal[ResultKind.NOT_FOUND] = ResultKind.NOT_FOUND
    reason: str = Field(default="Message not found.")


class Conflict(BaseModel):
    """组织内标题唯一性冲突"""

    kind: Literal[ResultKind.CONFLICT] = ResultKind.CONFLICT
    reason: str


class ValidationError(BaseModel):
    """字段校验失败：字段名 -> 有序错误信息列表"""

    kind: Literal[ResultKind.VALIDATION_ERROR] = ResultKind.VALIDATION_ERROR
    errors: dict[str, list[str]] = Field(default_factory=dict)


Result = Annotated[
    Created | Updated | Deleted | NotFound | Conflict | ValidationError,
    Field(discriminator="kind"),
]

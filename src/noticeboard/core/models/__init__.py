"""Noticeboard Core Domain Models -- 公共类型导出

所有公共模型类型从此入口导入。
"""

from .enums import SUCCESS_KINDS, ErrorField, ResultKind
from .message import (
    CreateMessageRequest,
    Message,
    MessageDraft,
    UpdateMessageRequest,
)
from .result import (
    Conflict,
    Created,
    Deleted,
    NotFound,
    Result,
    Updated,
    ValidationError,
)

__all__ = [
    # 枚举
    "ResultKind",
    "ErrorField",
    "SUCCESS_KINDS",
    # Message
    "Message",
    "MessageDraft",
    "CreateMessageRequest",
    "UpdateMessageRequest",
    # Result
    "Result",
    "Created",
    "Updated",
    "Deleted",
    "NotFound",
    "Conflict",
    "ValidationError",
]

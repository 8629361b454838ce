"""枚举定义

包含 Result 变体标识 ResultKind 与校验错误字段名 ErrorField。
"""

from enum import StrEnum


class ResultKind(StrEnum):
    """业务结果变体标识"""

    # 成功
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"

    # 可恢复的业务错误
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    VALIDATION_ERROR = "validation_error"


class ErrorField(StrEnum):
    """校验错误的字段键（对外错误体中使用）"""

    TITLE = "Title"
    CONTENT = "Content"
    IS_ACTIVE = "IsActive"


SUCCESS_KINDS: set[ResultKind] = {
    ResultKind.CREATED,
    ResultKind.UPDATED,
    ResultKind.DELETED,
}

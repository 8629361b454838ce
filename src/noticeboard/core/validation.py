"""消息字段校验规则

纯函数，无副作用；输入为已 trim 的字符串。
校验失败返回 FieldError，通过返回 None。
"""

from pydantic import BaseModel, Field

from .config import (
    CONTENT_MAX_LENGTH,
    CONTENT_MIN_LENGTH,
    TITLE_MAX_LENGTH,
    TITLE_MIN_LENGTH,
)
from .models.enums import ErrorField

TITLE_REQUIRED_MESSAGE = "Title is required."
TITLE_LENGTH_MESSAGE = (
    f"Title must be between {TITLE_MIN_LENGTH} and {TITLE_MAX_LENGTH} characters."
)
CONTENT_LENGTH_MESSAGE = (
    f"Content must be between {CONTENT_MIN_LENGTH} and {CONTENT_MAX_LENGTH} characters."
)


class FieldError(BaseModel):
    """单个字段的校验失败"""

    field: ErrorField = Field(description="字段键")
    code: str = Field(description="错误码：required / length")
    message: str = Field(description="可读错误信息")


def validate_title(title: str) -> FieldError | None:
    """校验标题：必填，长度 [3, 200]"""
    if not title.strip():
        return FieldError(field=ErrorField.TITLE, code="required", message=TITLE_REQUIRED_MESSAGE)
    if not TITLE_MIN_LENGTH <= len(title) <= TITLE_MAX_LENGTH:
        return FieldError(field=ErrorField.TITLE, code="length", message=TITLE_LENGTH_MESSAGE)
    return None


def validate_content(content: str) -> FieldError | None:
    """校验正文：长度 [10, 1000]，空白视为长度不足"""
    if not content.strip() or not CONTENT_MIN_LENGTH <= len(content) <= CONTENT_MAX_LENGTH:
        return FieldError(field=ErrorField.CONTENT, code="length", message=CONTENT_LENGTH_MESSAGE)
    return None


def collect_errors(*failures: FieldError | None) -> dict[str, list[str]]:
    """把多个校验结果按字段聚合为 字段 -> 有序错误信息 映射

    None 表示该项校验通过，直接跳过。
    """
    errors: dict[str, list[str]] = {}
    for failure in failures:
        if failure is None:
            continue
        errors.setdefault(failure.field.value, []).append(failure.message)
    return errors

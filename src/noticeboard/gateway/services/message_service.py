"""MessageService -- 消息创建/更新/删除业务规则

业务层是 Result 变体的唯一生产者：
1. 字段校验（trim 后长度约束，错误按字段聚合）
2. 组织内标题唯一性检查
3. 激活状态闸门：仅激活消息允许更新/删除
4. 调用 Store 完成持久化

存储层故障（aiosqlite.Error 等）不在业务结果范围内，直接上抛。
"""

from datetime import UTC, datetime

import structlog
from noticeboard.core.exceptions import MessageTitleConflictError
from noticeboard.core.models import (
    Conflict,
    CreateMessageRequest,
    Created,
    Deleted,
    ErrorField,
    Message,
    MessageDraft,
    NotFound,
    Result,
    UpdateMessageRequest,
    Updated,
    ValidationError,
)
from noticeboard.core.store import MessageStore, title_key
from noticeboard.core.validation import collect_errors, validate_content, validate_title

log = structlog.get_logger()

TITLE_CONFLICT_REASON = "A message with the same title already exists for this organization."
NOT_FOUND_REASON = "Message not found."
VANISHED_ON_UPDATE_REASON = "Message not found during update."
VANISHED_ON_DELETE_REASON = "Message could not be deleted."
INACTIVE_UPDATE_MESSAGE = "Can only update active messages."
INACTIVE_DELETE_MESSAGE = "Can only delete active messages."


class MessageService:
    """消息业务服务"""

    def __init__(self, store: MessageStore) -> None:
        self._store = store

    async def create_message(
        self, organization_id: str, request: CreateMessageRequest
    ) -> Result:
        """创建消息

        校验全部字段后再查重；任何校验失败都不会触达 Store 写入。
        """
        title = (request.title or "").strip()
        content = (request.content or "").strip()

        errors = collect_errors(validate_title(title), validate_content(content))
        if errors:
            log.info(
                "message_create_invalid",
                organization_id=organization_id,
                fields=sorted(errors),
            )
            return ValidationError(errors=errors)

        # 组织内标题唯一
        existing = await self._store.get_by_title(organization_id, title)
        if existing is not None:
            log.info(
                "message_create_conflict",
                organization_id=organization_id,
                existing_id=existing.id,
            )
            return Conflict(reason=TITLE_CONFLICT_REASON)

        draft = MessageDraft(
            organization_id=organization_id,
            title=title,
            content=content,
            is_active=True,
        )
        try:
            created = await self._store.create(draft)
        except MessageTitleConflictError:
            # 查重与写入之间被并发请求抢先
            log.warning("message_create_conflict_race", organization_id=organization_id)
            return Conflict(reason=TITLE_CONFLICT_REASON)

        log.info(
            "message_created",
            organization_id=organization_id,
            message_id=created.id,
        )
        return Created(message=created)

    async def update_message(
        self,
        organization_id: str,
        message_id: str,
        request: UpdateMessageRequest,
    ) -> Result:
        """更新消息

        - 非激活消息一律拒绝（包括尝试重新激活）
        - 空白的 title/content 视为"不修改"
        - is_active 总是被请求值覆盖，允许在编辑的同时停用
        """
        existing = await self._store.get_by_id(organization_id, message_id)
        if existing is None:
            return NotFound(reason=NOT_FOUND_REASON)

        if not existing.is_active:
            log.info(
                "message_update_rejected_inactive",
                organization_id=organization_id,
                message_id=message_id,
            )
            return ValidationError(errors={ErrorField.IS_ACTIVE.value: [INACTIVE_UPDATE_MESSAGE]})

        new_title = (request.title or "").strip()
        new_content = (request.content or "").strip()
        title_provided = bool(new_title)
        content_provided = bool(new_content)

        title_error = validate_title(new_title) if title_provided else None
        content_error = validate_content(new_content) if content_provided else None

        if (
            title_provided
            and title_error is None
            and title_key(new_title) != title_key(existing.title)
        ):
            owner = await self._store.get_by_title(organization_id, new_title)
            if owner is not None and owner.id != existing.id:
                log.info(
                    "message_update_conflict",
                    organization_id=organization_id,
                    message_id=message_id,
                    existing_id=owner.id,
                )
                return Conflict(reason=TITLE_CONFLICT_REASON)

        errors = collect_errors(title_error, content_error)
        if errors:
            log.info(
                "message_update_invalid",
                organization_id=organization_id,
                message_id=message_id,
                fields=sorted(errors),
            )
            return ValidationError(errors=errors)

        changes: dict[str, object] = {
            "is_active": request.is_active,
            "updated_at": datetime.now(UTC),
        }
        if title_provided:
            changes["title"] = new_title
        if content_provided:
            changes["content"] = new_content
        message = existing.model_copy(update=changes)

        try:
            updated = await self._store.update(message)
        except MessageTitleConflictError:
            log.warning(
                "message_update_conflict_race",
                organization_id=organization_id,
                message_id=message_id,
            )
            return Conflict(reason=TITLE_CONFLICT_REASON)

        if updated is None:
            log.warning(
                "message_vanished_during_update",
                organization_id=organization_id,
                message_id=message_id,
            )
            return NotFound(reason=VANISHED_ON_UPDATE_REASON)

        log.info(
            "message_updated",
            organization_id=organization_id,
            message_id=message_id,
            is_active=updated.is_active,
        )
        return Updated()

    async def delete_message(self, organization_id: str, message_id: str) -> Result:
        """删除消息（真删除）；仅激活消息允许删除"""
        existing = await self._store.get_by_id(organization_id, message_id)
        if existing is None:
            return NotFound(reason=NOT_FOUND_REASON)

        if not existing.is_active:
            log.info(
                "message_delete_rejected_inactive",
                organization_id=organization_id,
                message_id=message_id,
            )
            return ValidationError(errors={ErrorField.IS_ACTIVE.value: [INACTIVE_DELETE_MESSAGE]})

        deleted = await self._store.delete(organization_id, message_id)
        if not deleted:
            return NotFound(reason=VANISHED_ON_DELETE_REASON)

        log.info(
            "message_deleted",
            organization_id=organization_id,
            message_id=message_id,
        )
        return Deleted()

    async def get_message(self, organization_id: str, message_id: str) -> Message | None:
        """查询消息详情"""
        return await self._store.get_by_id(organization_id, message_id)

    async def list_messages(self, organization_id: str) -> list[Message]:
        """查询组织内消息列表"""
        return await self._store.list_by_organization(organization_id)

"""消息 CRUD 路由

GET    /api/v1/organizations/{organization_id}/messages
GET    /api/v1/organizations/{organization_id}/messages/{message_id}
POST   /api/v1/organizations/{organization_id}/messages
PUT    /api/v1/organizations/{organization_id}/messages/{message_id}
DELETE /api/v1/organizations/{organization_id}/messages/{message_id}

业务规则全部在 MessageService 中；此处只负责把 Result 变体映射为 HTTP 响应。
"""

import structlog
from fastapi import APIRouter, Depends
from noticeboard.core.models import (
    SUCCESS_KINDS,
    Conflict,
    CreateMessageRequest,
    Created,
    Deleted,
    Message,
    NotFound,
    Result,
    UpdateMessageRequest,
    Updated,
    ValidationError,
)
from starlette.responses import JSONResponse, Response

from ..deps import get_message_service
from ..services.message_service import MessageService

log = structlog.get_logger()

router = APIRouter(prefix="/api/v1/organizations/{organization_id}/messages")


def _error_response(status_code: int, code: str, message: str, **extra) -> JSONResponse:
    """统一错误响应体"""
    return JSONResponse(
        status_code=status_code,
        content={"error": {"code": code, "message": message, **extra}},
    )


def result_to_response(result: Result, location: str = "") -> Response:
    """把业务 Result 映射为 HTTP 响应（覆盖全部变体）"""
    if result.kind not in SUCCESS_KINDS:
        log.info("message_request_rejected", kind=result.kind.value)

    match result:
        case Created(message=message):
            headers = {"Location": f"{location}/{message.id}"} if location else None
            return JSONResponse(
                status_code=201,
                content=message.model_dump(mode="json"),
                headers=headers,
            )
        case Updated() | Deleted():
            return Response(status_code=204)
        case NotFound(reason=reason):
            return _error_response(404, "MESSAGE_NOT_FOUND", reason)
        case Conflict(reason=reason):
            return _error_response(409, "MESSAGE_TITLE_CONFLICT", reason)
        case ValidationError(errors=errors):
            return _error_response(
                400,
                "VALIDATION_FAILED",
                "One or more validation errors occurred.",
                errors=errors,
            )
    raise TypeError(f"Unhandled result variant: {type(result).__name__}")


@router.get("", response_model=list[Message])
async def list_messages(
    organization_id: str,
    service: MessageService = Depends(get_message_service),
):
    """查询组织内全部消息，按 created_at 倒序"""
    return await service.list_messages(organization_id)


@router.get("/{message_id}", response_model=Message)
async def get_message(
    organization_id: str,
    message_id: str,
    service: MessageService = Depends(get_message_service),
):
    """查询单条消息"""
    message = await service.get_message(organization_id, message_id)
    if message is None:
        return _error_response(
            404,
            "MESSAGE_NOT_FOUND",
            f"Message with id {message_id} does not exist",
        )
    return message


@router.post("", status_code=201, response_model=Message)
async def create_message(
    organization_id: str,
    body: CreateMessageRequest,
    service: MessageService = Depends(get_message_service),
):
    """创建消息

    - 成功返回 201 + 消息体
    - 字段校验失败返回 400
    - 标题冲突返回 409
    """
    result = await service.create_message(organization_id, body)
    return result_to_response(
        result,
        location=f"/api/v1/organizations/{organization_id}/messages",
    )


@router.put("/{message_id}", status_code=204)
async def update_message(
    organization_id: str,
    message_id: str,
    body: UpdateMessageRequest,
    service: MessageService = Depends(get_message_service),
):
    """更新消息

    - 成功返回 204
    - 消息不存在返回 404
    - 非激活消息或字段校验失败返回 400
    - 标题冲突返回 409
    """
    result = await service.update_message(organization_id, message_id, body)
    return result_to_response(result)


@router.delete("/{message_id}", status_code=204)
async def delete_message(
    organization_id: str,
    message_id: str,
    service: MessageService = Depends(get_message_service),
):
    """删除消息

    - 成功返回 204
    - 消息不存在返回 404
    - 非激活消息返回 400
    """
    result = await service.delete_message(organization_id, message_id)
    return result_to_response(result)

"""依赖注入模块 -- 通过 FastAPI Depends 注入 Store 与业务服务

Store 实例通过 app.state 管理，在 lifespan 中初始化/清理。
"""

from fastapi import Depends, Request
from noticeboard.core.store import StoreGroup

from .services.message_service import MessageService


def get_store_group(request: Request) -> StoreGroup:
    """从 app.state 获取 StoreGroup 实例"""
    return request.app.state.store_group


def get_message_service(
    store_group: StoreGroup = Depends(get_store_group),
) -> MessageService:
    """为每个请求构造 MessageService（无跨请求状态）"""
    return MessageService(store_group.message_store)

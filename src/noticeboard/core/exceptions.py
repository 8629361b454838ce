"""Store 异常体系

业务结果（校验失败、冲突、不存在）通过 Result 变体返回，不走异常。
这里只定义持久化层需要上抛的异常。
"""


class NoticeboardStoreError(Exception):
    """持久化层基础异常"""

    def __init__(self, message: str, recoverable: bool = False) -> None:
        """
        Args:
            message: 错误描述
            recoverable: 调用方是否可通过修改输入恢复
        """
        super().__init__(message)
        self.recoverable = recoverable


class MessageTitleConflictError(NoticeboardStoreError):
    """写入时触发 (organization_id, title) 唯一索引

    并发创建/改名绕过了业务层的查重时由 Store 抛出，
    业务层将其转换为 Conflict 结果。
    """

    def __init__(self, organization_id: str, title: str) -> None:
        """
        Args:
            organization_id: 所属组织 ID
            title: 冲突的标题
        """
        super().__init__(
            f"Title already exists in organization {organization_id}: {title!r}",
            recoverable=True,
        )
        self.organization_id = organization_id
        self.title = title

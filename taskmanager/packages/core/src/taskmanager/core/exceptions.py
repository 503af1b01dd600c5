"""TaskManager 异常体系

"未找到" 不是异常：查询/更新/删除以 None 或 False 返回。
"""


class TaskManagerError(Exception):
    """TaskManager 基础异常"""

    def __init__(self, message: str, code: str = "INTERNAL_ERROR") -> None:
        """
        Args:
            message: 错误描述
            code: 对外暴露的错误码
        """
        super().__init__(message)
        self.code = code


class InvalidArgumentError(TaskManagerError, ValueError):
    """调用方传入了非法参数（例如 insert(None)）"""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="INVALID_ARGUMENT")

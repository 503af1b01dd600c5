"""Store Protocol 接口定义

定义 TaskStore 的抽象接口，
使用 Python Protocol 实现结构化子类型（duck typing）。
"""

from typing import Protocol

from ..models.enums import TaskStatus
from ..models.task import Task, TaskPatch


class TaskStore(Protocol):
    """Task 存储接口

    "未找到" 以 None / False 表示，不抛异常。
    """

    def insert(self, task: Task) -> Task:
        """写入任务（同 id 覆盖），task 为 None 时抛 InvalidArgumentError"""
        ...

    def get_by_id(self, task_id: str) -> Task | None:
        """根据 id 查询任务"""
        ...

    def update(self, task_id: str, patch: TaskPatch) -> Task | None:
        """按字段合并更新任务"""
        ...

    def delete(self, task_id: str) -> bool:
        """删除任务，返回是否实际删除"""
        ...

    def list_all(self) -> list[Task]:
        """查询全部任务"""
        ...

    def list_by_status(self, status: TaskStatus) -> list[Task]:
        """按状态筛选任务"""
        ...

    def count(self) -> int:
        """任务总数"""
        ...

    def clear(self) -> None:
        """清空全部任务（测试隔离用）"""
        ...

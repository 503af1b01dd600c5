"""TaskManager Core Domain Models -- 公共类型导出

所有公共模型类型从此入口导入。
"""

from .enums import TaskPriority, TaskStatus
from .task import Task, TaskPatch, new_task_id, utc_now

__all__ = [
    # 枚举
    "TaskStatus",
    "TaskPriority",
    # Task
    "Task",
    "TaskPatch",
    "new_task_id",
    "utc_now",
]

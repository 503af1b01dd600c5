"""TaskManager Core Store -- 进程内任务存储

提供工厂函数创建 TaskStore 实例。
"""

from .protocols import TaskStore
from .task_store import InMemoryTaskStore


def create_task_store() -> InMemoryTaskStore:
    """创建进程内 TaskStore 实例

    Returns:
        InMemoryTaskStore 实例
    """
    return InMemoryTaskStore()


__all__ = [
    "TaskStore",
    "InMemoryTaskStore",
    "create_task_store",
]

"""TaskStore 内存实现

单把 threading.Lock 保护一个 dict：
- 每个操作对单个 key 原子
- update 在锁内合并后整体替换记录，读方只会看到旧值或新值
- list_all / count 返回调用瞬间的快照，不提供跨 key 事务
"""

import threading
from datetime import datetime, timedelta

import structlog

from ..exceptions import InvalidArgumentError
from ..models.enums import TaskStatus
from ..models.task import Task, TaskPatch, utc_now

log = structlog.get_logger()


def _is_blank(task_id: str | None) -> bool:
    return task_id is None or not task_id.strip()


class InMemoryTaskStore:
    """TaskStore 的进程内实现"""

    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}
        self._lock = threading.Lock()

    def insert(self, task: Task) -> Task:
        """写入任务，同 id 已存在时覆盖"""
        if task is None:
            raise InvalidArgumentError("Task cannot be null")
        with self._lock:
            replaced = task.id in self._tasks
            self._tasks[task.id] = task
        log.debug("store_task_inserted", task_id=task.id, replaced=replaced)
        return task

    def get_by_id(self, task_id: str) -> Task | None:
        """根据 id 查询任务，空白或未知 id 返回 None"""
        if _is_blank(task_id):
            return None
        with self._lock:
            return self._tasks.get(task_id)

    def update(self, task_id: str, patch: TaskPatch) -> Task | None:
        """按字段合并更新

        只覆盖 patch 中出现的字段；至少有一个字段被应用时刷新 updated_at。

        Returns:
            更新后的完整 Task；空白或未知 id 返回 None
        """
        if _is_blank(task_id):
            return None
        changes = patch.present_fields() if patch is not None else {}
        with self._lock:
            existing = self._tasks.get(task_id)
            if existing is None:
                return None
            if not changes:
                return existing
            changes["updated_at"] = self._next_updated_at(existing)
            updated = existing.model_copy(update=changes)
            self._tasks[task_id] = updated
        log.debug("store_task_updated", task_id=task_id, fields=sorted(changes))
        return updated

    def delete(self, task_id: str) -> bool:
        """删除任务，返回是否实际删除"""
        if _is_blank(task_id):
            return False
        with self._lock:
            removed = self._tasks.pop(task_id, None)
        if removed is None:
            return False
        log.debug("store_task_deleted", task_id=task_id)
        return True

    def list_all(self) -> list[Task]:
        """全部任务快照（插入顺序）"""
        with self._lock:
            return list(self._tasks.values())

    def list_by_status(self, status: TaskStatus) -> list[Task]:
        """线性扫描筛选指定状态的任务"""
        with self._lock:
            return [t for t in self._tasks.values() if t.status == status]

    def count(self) -> int:
        with self._lock:
            return len(self._tasks)

    def clear(self) -> None:
        """清空全部任务（测试隔离用，不对外暴露）"""
        with self._lock:
            removed = len(self._tasks)
            self._tasks.clear()
        log.info("task_store_cleared", removed=removed)

    @staticmethod
    def _next_updated_at(task: Task) -> datetime:
        # 时钟未前进时也保证 updated_at 严格递增
        now = utc_now()
        if now <= task.updated_at:
            now = task.updated_at + timedelta(microseconds=1)
        return now

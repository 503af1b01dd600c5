"""TaskService -- 任务增删改查与统计业务逻辑

路由层只与 TaskService 交互，由它负责：
1. 生成任务 ID 与时间戳
2. 委托 TaskStore 完成读写
3. 汇总统计信息
"""

import structlog
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from taskmanager.core.models import (
    Task,
    TaskPatch,
    TaskPriority,
    TaskStatus,
    new_task_id,
    utc_now,
)
from taskmanager.core.store import TaskStore

log = structlog.get_logger()


class TaskStats(BaseModel):
    """任务统计"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_tasks: int
    pending_tasks: int
    completed_tasks: int


class TaskService:
    """任务业务服务"""

    def __init__(self, task_store: TaskStore) -> None:
        self._store = task_store

    def create_task(
        self,
        title: str,
        description: str | None = None,
        status: TaskStatus | None = None,
        priority: TaskPriority | None = None,
        task_id: str | None = None,
    ) -> Task:
        """创建任务

        Args:
            title: 任务标题
            description: 任务描述
            status: 初始状态，缺省为 PENDING
            priority: 优先级，缺省为 MEDIUM
            task_id: 调用方指定的 ID，缺省时生成 ULID

        Returns:
            已写入的 Task
        """
        now = utc_now()
        task = Task(
            id=task_id or new_task_id(),
            title=title,
            description=description,
            status=status or TaskStatus.PENDING,
            priority=priority or TaskPriority.MEDIUM,
            created_at=now,
            updated_at=now,
        )
        self._store.insert(task)
        log.info(
            "task_created",
            task_id=task.id,
            status=task.status.value,
            priority=task.priority.value,
        )
        return task

    def get_task(self, task_id: str) -> Task | None:
        """查询任务详情"""
        return self._store.get_by_id(task_id)

    def update_task(self, task_id: str, patch: TaskPatch) -> Task | None:
        """部分更新任务，任务不存在返回 None"""
        task = self._store.update(task_id, patch)
        if task is not None:
            log.info("task_updated", task_id=task_id, fields=sorted(patch.model_fields_set))
        return task

    def delete_task(self, task_id: str) -> bool:
        """删除任务"""
        deleted = self._store.delete(task_id)
        if deleted:
            log.info("task_deleted", task_id=task_id)
        return deleted

    def list_tasks(self, status: TaskStatus | None = None) -> list[Task]:
        """查询任务列表，支持按状态筛选"""
        if status is not None:
            return self._store.list_by_status(status)
        return self._store.list_all()

    def get_stats(self) -> TaskStats:
        """统计任务总数、待处理数与已完成数"""
        return TaskStats(
            total_tasks=self._store.count(),
            pending_tasks=len(self._store.list_by_status(TaskStatus.PENDING)),
            completed_tasks=len(self._store.list_by_status(TaskStatus.COMPLETED)),
        )

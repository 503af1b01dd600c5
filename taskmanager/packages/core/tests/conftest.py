"""packages/core 测试配置 -- 核心层 fixture"""

from collections.abc import Callable

import pytest
from taskmanager.core.models import Task, TaskStatus
from taskmanager.core.store import InMemoryTaskStore


@pytest.fixture
def populated_store(
    task_store: InMemoryTaskStore, make_task: Callable[..., Task]
) -> InMemoryTaskStore:
    """每种状态各一个任务，另加一个额外的 PENDING 任务"""
    for status in TaskStatus:
        task_store.insert(make_task(f"Task {status.value}", status=status))
    task_store.insert(make_task("Another pending"))
    return task_store

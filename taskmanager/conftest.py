"""全局 pytest 配置 -- 共享 TaskStore / Task 构造 fixture"""

from collections.abc import Callable

import pytest
from taskmanager.core.models import Task
from taskmanager.core.store import InMemoryTaskStore


@pytest.fixture
def task_store() -> InMemoryTaskStore:
    """提供空的内存 TaskStore"""
    return InMemoryTaskStore()


@pytest.fixture
def make_task() -> Callable[..., Task]:
    """Task 工厂：title 缺省为 "Sample task"，其余字段可覆盖"""

    def _make(title: str = "Sample task", **kwargs) -> Task:
        return Task(title=title, **kwargs)

    return _make

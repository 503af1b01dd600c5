"""任务路由

POST   /api/v1/tasks: 创建任务（未提供 id 时服务端生成）
GET    /api/v1/tasks: 任务列表，支持 status 筛选
GET    /api/v1/tasks/stats: 任务统计
GET    /api/v1/tasks/{task_id}: 任务详情
PUT    /api/v1/tasks/{task_id}: 部分更新任务
DELETE /api/v1/tasks/{task_id}: 删除任务
"""

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from starlette.responses import JSONResponse, Response
from taskmanager.core.config import (
    DESCRIPTION_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    TITLE_MIN_LENGTH,
)
from taskmanager.core.models import Task, TaskPatch, TaskPriority, TaskStatus

from ..deps import get_task_service
from ..services.task_service import TaskService, TaskStats

router = APIRouter()


class TaskCreateRequest(BaseModel):
    """创建任务请求体"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str | None = Field(default=None, description="任务 ID，缺省时服务端生成")
    title: str = Field(
        min_length=TITLE_MIN_LENGTH,
        max_length=TITLE_MAX_LENGTH,
        description="任务标题",
    )
    description: str | None = Field(
        default=None,
        max_length=DESCRIPTION_MAX_LENGTH,
        description="任务描述",
    )
    status: TaskStatus | None = Field(default=None, description="初始状态")
    priority: TaskPriority | None = Field(default=None, description="优先级")

    @field_validator("title")
    @classmethod
    def reject_blank_title(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            raise ValueError("Title is required")
        return value

    @field_validator("id")
    @classmethod
    def blank_id_as_absent(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value


class TaskUpdateRequest(BaseModel):
    """更新任务请求体 -- 只有出现的字段会被覆盖"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str | None = Field(
        default=None,
        min_length=TITLE_MIN_LENGTH,
        max_length=TITLE_MAX_LENGTH,
    )
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    status: TaskStatus | None = None
    priority: TaskPriority | None = None

    @field_validator("title")
    @classmethod
    def reject_blank_title(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            raise ValueError("Title is required")
        return value

    def to_patch(self) -> TaskPatch:
        """转换为 TaskPatch，保留字段出现信息

        显式置空 title / status / priority 时由 TaskPatch 抛出 ValidationError。
        """
        return TaskPatch(**{name: getattr(self, name) for name in self.model_fields_set})


def _task_not_found(task_id: str) -> JSONResponse:
    return JSONResponse(
        status_code=404,
        content={
            "error": {
                "code": "TASK_NOT_FOUND",
                "message": f"Task with id {task_id} does not exist",
            }
        },
    )


@router.post("/api/v1/tasks", response_model=Task, status_code=201)
async def create_task(
    body: TaskCreateRequest,
    service: TaskService = Depends(get_task_service),
):
    """创建任务，返回 201 + 已创建任务"""
    return service.create_task(
        title=body.title,
        description=body.description,
        status=body.status,
        priority=body.priority,
        task_id=body.id,
    )


@router.get("/api/v1/tasks", response_model=list[Task])
async def list_tasks(
    status: TaskStatus | None = Query(default=None, description="按状态筛选"),
    service: TaskService = Depends(get_task_service),
):
    """查询任务列表，给定 status 时只返回该状态的任务"""
    return service.list_tasks(status)


# 必须注册在 /{task_id} 之前
@router.get("/api/v1/tasks/stats", response_model=TaskStats)
async def get_stats(service: TaskService = Depends(get_task_service)):
    """任务统计：总数 / 待处理 / 已完成"""
    return service.get_stats()


@router.get("/api/v1/tasks/{task_id}", response_model=Task)
async def get_task(
    task_id: str,
    service: TaskService = Depends(get_task_service),
):
    """查询任务详情"""
    task = service.get_task(task_id)
    if task is None:
        return _task_not_found(task_id)
    return task


@router.put("/api/v1/tasks/{task_id}", response_model=Task)
async def update_task(
    task_id: str,
    body: TaskUpdateRequest,
    service: TaskService = Depends(get_task_service),
):
    """部分更新任务，未出现的字段保持不变"""
    task = service.update_task(task_id, body.to_patch())
    if task is None:
        return _task_not_found(task_id)
    return task


@router.delete("/api/v1/tasks/{task_id}", status_code=204)
async def delete_task(
    task_id: str,
    service: TaskService = Depends(get_task_service),
):
    """删除任务，成功返回 204 无响应体"""
    if not service.delete_task(task_id):
        return _task_not_found(task_id)
    return Response(status_code=204)

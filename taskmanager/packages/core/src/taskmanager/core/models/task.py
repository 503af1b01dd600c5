"""Task Domain Model

Task 是系统中唯一的实体；TaskPatch 是更新时使用的部分字段表示。
JSON 序列化统一使用 camelCase 字段名（createdAt / updatedAt）。
"""

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel
from ulid import ULID

from .enums import TaskPriority, TaskStatus

# 不允许显式置空的字段
_NON_NULLABLE_PATCH_FIELDS = ("title", "status", "priority")


def new_task_id() -> str:
    """生成新的任务 ID（ULID 格式）"""
    return str(ULID())


def utc_now() -> datetime:
    return datetime.now(UTC)


class Task(BaseModel):
    """Task 数据模型

    id 创建后不可变；created_at 只在创建时设置；
    updated_at 在创建时设置，每次字段变更时刷新。
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(default_factory=new_task_id, description="唯一标识，ULID 格式")
    title: str = Field(description="任务标题")
    description: str | None = Field(default=None, description="任务描述")
    status: TaskStatus = Field(default=TaskStatus.PENDING, description="当前状态")
    priority: TaskPriority = Field(default=TaskPriority.MEDIUM, description="优先级")
    created_at: datetime = Field(default_factory=utc_now, description="创建时间")
    updated_at: datetime = Field(default_factory=utc_now, description="更新时间")

    @field_validator("created_at", "updated_at")
    @classmethod
    def assume_utc_when_naive(cls, value: datetime) -> datetime:
        # 无时区的时间按 UTC 处理
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    @model_validator(mode="after")
    def check_timestamps(self) -> "Task":
        if self.updated_at < self.created_at:
            raise ValueError("updated_at must not be earlier than created_at")
        return self


class TaskPatch(BaseModel):
    """Task 部分更新

    字段是否"出现"由 model_fields_set 决定，而不是依赖 None：
    - 未出现的字段：保持原值
    - description 显式传 None：清空描述
    - title / status / priority 不允许显式置空
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str | None = None
    description: str | None = None
    status: TaskStatus | None = None
    priority: TaskPriority | None = None

    @model_validator(mode="after")
    def reject_null_required_fields(self) -> "TaskPatch":
        for name in _NON_NULLABLE_PATCH_FIELDS:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def present_fields(self) -> dict[str, Any]:
        """返回调用方实际提供的字段及其值"""
        return {name: getattr(self, name) for name in self.model_fields_set}

    def is_empty(self) -> bool:
        return not self.model_fields_set

"""枚举定义 -- TaskStatus / TaskPriority

状态之间不设流转约束：任意状态都可以通过更新切换到任意状态。
"""

from enum import StrEnum


class TaskStatus(StrEnum):
    """Task 状态"""

    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class TaskPriority(StrEnum):
    """Task 优先级"""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    # 需要立即处理
    CRITICAL = "CRITICAL"

"""健康检查路由 -- 容器编排探针

GET /api/v1/health: 健康状态 + 应用元信息
GET /api/v1/ready: Readiness 检查
GET /api/v1/live: Liveness 检查

均为静态响应，不访问 TaskStore。
"""

from datetime import UTC, datetime

from fastapi import APIRouter
from taskmanager.core.config import APP_NAME, APP_VERSION

router = APIRouter()

# 进程启动时间（模块导入时记录）
START_TIME = datetime.now(UTC)


@router.get("/api/v1/health")
async def health():
    """健康状态 -- 永远返回 200"""
    return {
        "status": "UP",
        "timestamp": datetime.now(UTC).isoformat(),
        "startedAt": START_TIME.isoformat(),
        "application": APP_NAME,
        "version": APP_VERSION,
    }


@router.get("/api/v1/ready")
async def ready():
    """Readiness 检查"""
    return {
        "status": "READY",
        "message": "Application is ready to accept traffic",
    }


@router.get("/api/v1/live")
async def live():
    """Liveness 检查"""
    return {
        "status": "ALIVE",
        "message": "Application is running",
    }

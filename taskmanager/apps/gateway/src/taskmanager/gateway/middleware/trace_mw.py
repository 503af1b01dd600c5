"""TraceMiddleware -- 任务级日志上下文

对 /api/v1/tasks/{task_id} 形式的请求，把 task_id 绑定到 structlog contextvars，
使该请求内的所有日志都能按任务检索。/api/v1/tasks/stats 不是任务路径。
"""

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from taskmanager.core.config import API_PREFIX

_TASKS_PATH = f"{API_PREFIX}/tasks/"
_NON_TASK_SEGMENTS = {"stats"}


def extract_task_id(path: str) -> str | None:
    """从请求路径提取 task_id，非任务路径返回 None"""
    if not path.startswith(_TASKS_PATH):
        return None
    segment = path[len(_TASKS_PATH):].split("/", 1)[0]
    if not segment or segment in _NON_TASK_SEGMENTS:
        return None
    return segment


class TraceMiddleware(BaseHTTPMiddleware):
    """任务级追踪中间件 -- 为任务操作绑定 task_id"""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        task_id = extract_task_id(request.url.path)
        if task_id:
            structlog.contextvars.bind_contextvars(task_id=task_id)

        return await call_next(request)

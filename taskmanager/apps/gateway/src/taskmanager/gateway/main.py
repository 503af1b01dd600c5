"""FastAPI 应用主文件

app 创建 + lifespan 管理：TaskStore 初始化/清理 + 异常映射 + 路由注册。
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from starlette.responses import JSONResponse
from taskmanager.core.config import APP_NAME, APP_VERSION, load_server_config
from taskmanager.core.exceptions import InvalidArgumentError
from taskmanager.core.store import create_task_store

from .middleware.logging_config import setup_logfire, setup_logging
from .middleware.logging_mw import LoggingMiddleware
from .middleware.trace_mw import TraceMiddleware
from .routes import health, tasks

log = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """应用生命周期管理：启动时创建 TaskStore，关闭时清空"""
    app.state.task_store = create_task_store()
    log.info("task_store_initialized", backend="memory")

    yield

    if getattr(app.state, "task_store", None) is not None:
        app.state.task_store.clear()


async def _invalid_argument_handler(
    request: Request, exc: InvalidArgumentError
) -> JSONResponse:
    log.warning("invalid_argument", error=str(exc))
    return JSONResponse(
        status_code=400,
        content={"error": {"code": exc.code, "message": str(exc)}},
    )


def _validation_failed_response(errors: list[dict]) -> JSONResponse:
    details = [
        {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
        for err in errors
    ]
    log.info("request_validation_failed", error_count=len(details))
    return JSONResponse(
        status_code=400,
        content={
            "error": {
                "code": "VALIDATION_FAILED",
                "message": "Request validation failed",
                "details": details,
            }
        },
    )


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return _validation_failed_response(exc.errors())


async def _model_validation_error_handler(
    request: Request, exc: ValidationError
) -> JSONResponse:
    # 请求体转换为领域模型时的校验失败（如 TaskPatch 显式置空必填字段）
    return _validation_failed_response(exc.errors())


def create_app() -> FastAPI:
    """创建 FastAPI 应用实例"""
    app = FastAPI(
        title=APP_NAME,
        version=APP_VERSION,
        description="内存任务管理 REST API",
        lifespan=lifespan,
    )

    # 注册中间件（顺序：先 Trace 后 Logging，Logging 位于最外层）
    app.add_middleware(TraceMiddleware)
    app.add_middleware(LoggingMiddleware)

    # 异常映射：非法参数 / 请求校验失败 -> 400
    app.add_exception_handler(InvalidArgumentError, _invalid_argument_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(ValidationError, _model_validation_error_handler)

    config = load_server_config()
    setup_logging(config.log_format, config.log_level)
    setup_logfire(app)

    app.include_router(tasks.router, tags=["tasks"])
    app.include_router(health.router, tags=["health"])

    return app


# 默认 app 实例（uvicorn 入口）
app = create_app()

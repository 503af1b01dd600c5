"""配置模块 -- 可通过环境变量覆盖

包含服务监听地址、日志配置以及应用元信息常量。
"""

import os
from typing import Literal

import structlog
from pydantic import BaseModel, Field

log = structlog.get_logger()

APP_NAME: str = "TaskManager API"
APP_VERSION: str = "1.0.0"
API_PREFIX: str = "/api/v1"

# 输入校验边界（由请求 schema 执行，store 本身不校验）
TITLE_MIN_LENGTH: int = 3
TITLE_MAX_LENGTH: int = 100
DESCRIPTION_MAX_LENGTH: int = 500

_DEFAULT_PORT = 8080


class ServerConfig(BaseModel):
    """服务配置 -- 从环境变量加载

    环境变量:
        TASKMANAGER_HOST: 监听地址（默认 0.0.0.0）
        TASKMANAGER_PORT: 监听端口（默认 8080）
        TASKMANAGER_LOG_FORMAT: 日志格式（dev/json）
        TASKMANAGER_LOG_LEVEL: 日志级别（默认 INFO）
    """

    host: str = Field(default="0.0.0.0", description="监听地址")
    port: int = Field(default=_DEFAULT_PORT, ge=1, le=65535, description="监听端口")
    log_format: Literal["dev", "json"] = Field(default="dev", description="日志渲染模式")
    log_level: str = Field(default="INFO", description="日志级别")


def load_server_config() -> ServerConfig:
    """从环境变量加载服务配置

    非法端口值不阻塞启动：记录 warning 后回落到默认值。

    Returns:
        ServerConfig 实例
    """
    kwargs: dict = {}

    if val := os.environ.get("TASKMANAGER_HOST"):
        kwargs["host"] = val

    if val := os.environ.get("TASKMANAGER_PORT"):
        try:
            port = int(val)
        except ValueError:
            port = None
        if port is None or not 1 <= port <= 65535:
            log.warning(
                "invalid_port_config",
                env_var="TASKMANAGER_PORT",
                value=val,
                fallback=_DEFAULT_PORT,
            )
        else:
            kwargs["port"] = port

    if val := os.environ.get("TASKMANAGER_LOG_FORMAT"):
        kwargs["log_format"] = "json" if val.lower() == "json" else "dev"

    if val := os.environ.get("TASKMANAGER_LOG_LEVEL"):
        kwargs["log_level"] = val.upper()

    return ServerConfig(**kwargs)

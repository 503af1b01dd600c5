"""服务入口 -- python -m taskmanager.gateway

从环境变量读取监听地址/端口与日志配置，启动 uvicorn。
"""

import uvicorn
from taskmanager.core.config import load_server_config

from .middleware.logging_config import setup_logging


def main() -> None:
    """CLI 主入口"""
    config = load_server_config()
    setup_logging(config.log_format, config.log_level)

    uvicorn.run(
        "taskmanager.gateway.main:app",
        host=config.host,
        port=config.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()

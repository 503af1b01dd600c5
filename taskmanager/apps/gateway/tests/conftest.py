"""apps/gateway 测试配置 -- FastAPI app + httpx AsyncClient"""

from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from taskmanager.core.store import InMemoryTaskStore


@pytest_asyncio.fixture
async def app(monkeypatch, task_store: InMemoryTaskStore):
    """创建测试用 FastAPI app 实例"""
    monkeypatch.setenv("LOGFIRE_SEND_TO_LOGFIRE", "false")

    from taskmanager.gateway.main import create_app

    application = create_app()
    # 手动初始化（绕过 lifespan）
    application.state.task_store = task_store
    yield application


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """提供 httpx AsyncClient 用于测试"""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

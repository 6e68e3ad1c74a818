"""Testes do lifespan da aplicação FastAPI."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from api.routes.meta.webhook_runtime_tasks import ProcessingTaskPool
from app.app import create_app
from app.use_cases.meta import ConversationHandler
from config.settings import get_base_settings, get_meta_settings


@pytest.fixture(autouse=True)
def _development_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ENVIRONMENT", "development")
    get_base_settings.cache_clear()
    get_meta_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_meta_settings.cache_clear()


def test_lifespan_creates_pool_per_app() -> None:
    first = create_app()
    second = create_app()

    with TestClient(first), TestClient(second):
        assert isinstance(first.state.task_pool, ProcessingTaskPool)
        assert isinstance(first.state.conversation_handler, ConversationHandler)
        assert first.state.task_pool is not second.state.task_pool


def test_lifespan_drains_pool_on_shutdown() -> None:
    app = create_app()

    with TestClient(app) as client:
        assert client.get("/health").status_code == 200

    assert len(app.state.task_pool) == 0

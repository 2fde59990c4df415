import os

import pytest

# Keep the app from touching real services before any backend import
os.environ.setdefault("APP_LOAD_ON_STARTUP", "false")
os.environ.setdefault("APP_LOG_LEVEL", "WARNING")
for _var in ("APP_SUPABASE_URL", "APP_SUPABASE_ANON_KEY", "APP_OPENAI_API_KEY"):
    os.environ.pop(_var, None)

from app.core.repositories.implementations.local.memo_cache import LocalMemoCache  # noqa: E402
from app.core.services.memo_store import MemoStore  # noqa: E402

from tests.fakes import FakeOpenAI, InMemoryMemoRepository  # noqa: E402


@pytest.fixture
def repo():
    return InMemoryMemoRepository()


@pytest.fixture
def local_cache(tmp_path):
    return LocalMemoCache(tmp_path / "memos-cache.json")


@pytest.fixture
def store(repo, local_cache):
    return MemoStore(repo, local_cache)


@pytest.fixture
def fake_model():
    return FakeOpenAI(output_text='["travel", "seoul", "food"]')


@pytest.fixture
def client(store, repo, fake_model):
    from fastapi.testclient import TestClient

    from app.dependencies import (
        get_memo_store,
        get_model_client,
        get_optional_memo_repository,
        get_optional_memo_store,
    )
    from app.main import app

    app.dependency_overrides[get_memo_store] = lambda: store
    app.dependency_overrides[get_optional_memo_store] = lambda: store
    app.dependency_overrides[get_optional_memo_repository] = lambda: repo
    app.dependency_overrides[get_model_client] = lambda: fake_model
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()

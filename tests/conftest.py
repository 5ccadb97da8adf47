import pytest
from fastapi.testclient import TestClient

from database.db import JsonDocumentStore, get_store
from main import app

TOKEN = "valid-teacher-token"
AUTH_HEADERS = {"Authorization": f"Bearer {TOKEN}"}


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "database.json"


@pytest.fixture
def store(db_path):
    s = JsonDocumentStore(db_path)
    s.ensure_initialized()
    return s


@pytest.fixture
def client(store):
    # 테스트마다 임시 JSON 파일을 쓰도록 저장소 의존성 교체
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_client(client):
    client.headers.update(AUTH_HEADERS)
    return client

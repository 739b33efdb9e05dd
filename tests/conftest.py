import os

os.environ.setdefault("SESSION_SECRET", "test-secret")
os.environ.setdefault("BACKEND_URL", "http://backend.test/api")

import httpx
import pytest
from fastapi.testclient import TestClient

from app.core.dependencies import get_backend_client
from app.main import app
from app.services.backend_client import BackendClient, create_http_client
from tests.factories import FakeBackend, VIEWER, user_json


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def backend_client(backend):
    return BackendClient(create_http_client(transport=httpx.MockTransport(backend.handler)))


@pytest.fixture
def client(backend_client):
    app.dependency_overrides[get_backend_client] = lambda: backend_client
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def logged_in(client, backend):
    backend.on("POST", "/api/login", body=user_json(VIEWER))
    res = client.post("/api/v1/auth/login", json={"email": "asha@gmail.com", "password": "pw"})
    assert res.status_code == 200
    return client

"""Общие фикстуры: отдельная SQLite-база на каждый тест и подмененное хранилище изображений."""
import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret-for-testing-only")

import json
from typing import List

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import NullPool

from editorcraft.api.http.upload import get_blob_client
from editorcraft.core.db import create_engine, get_db, init_models
from editorcraft.infrastructure.storage.blob_client import BlobStorageClient
from editorcraft.main import app

TEST_PASSWORD = "secret123"
BLOB_API_URL = "https://blob.test"


@pytest_asyncio.fixture
async def async_engine(tmp_path):
    """Файловая SQLite-база: у каждой сессии свое соединение, как в продакшене"""
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'editorcraft.db'}", poolclass=NullPool)
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(async_engine) -> async_sessionmaker:
    return async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_maker):
    async with session_maker() as session:
        yield session


class FakeBlobStore:
    """Запоминает запросы к Blob API и отвечает как настоящий сервис"""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.fail = False

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail:
            return httpx.Response(503, json={"error": "unavailable"})
        if request.method == "PUT":
            pathname = request.url.path.lstrip("/")
            return httpx.Response(200, json={"url": f"{BLOB_API_URL}/{pathname}", "pathname": pathname})
        if request.method == "POST" and request.url.path == "/delete":
            return httpx.Response(200, json={})
        return httpx.Response(404)

    @property
    def uploaded_keys(self) -> List[str]:
        return [r.url.path.lstrip("/") for r in self.requests if r.method == "PUT"]

    def deleted_keys(self) -> List[str]:
        keys = []
        for r in self.requests:
            if r.method == "POST":
                keys.extend(json.loads(r.content)["urls"])
        return keys


@pytest.fixture
def blob_store() -> FakeBlobStore:
    return FakeBlobStore()


@pytest_asyncio.fixture
async def client(session_maker, blob_store):
    async def override_get_db():
        async with session_maker() as session:
            yield session

    async def override_get_blob_client():
        async with httpx.AsyncClient(transport=httpx.MockTransport(blob_store.handler)) as http:
            yield BlobStorageClient(http, "test-token", BLOB_API_URL)

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_blob_client] = override_get_blob_client

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


async def register_user(client: httpx.AsyncClient, email: str, name: str, password: str = TEST_PASSWORD) -> dict:
    response = await client.post(
        "/api/auth/register",
        json={"name": name, "email": email, "password": password}
    )
    assert response.status_code == 201, response.text
    return response.json()


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def alice(client) -> dict:
    return await register_user(client, "a@x.com", "Alice")


@pytest_asyncio.fixture
async def bob(client) -> dict:
    return await register_user(client, "b@x.com", "Bob")


@pytest.fixture
def alice_headers(alice) -> dict:
    return bearer(alice["token"])


@pytest.fixture
def bob_headers(bob) -> dict:
    return bearer(bob["token"])

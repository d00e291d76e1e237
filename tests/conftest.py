"""
Pytest configuration and fixtures
Shared test setup for all test modules
"""

import os

# Configure before the application modules read settings
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SEARCH_API_URL", "http://search.test")
os.environ.setdefault("MASTER_ENCRYPTION_KEY", "test-master-key")
os.environ.setdefault("ENCRYPTION_SALT", "test-salt")

import json
import pytest
import httpx
from typing import AsyncGenerator
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from scanconsole.main import app
from scanconsole.api.dependencies import get_http_client
from scanconsole.db.base import Base
from scanconsole.db.database import get_db
from scanconsole.db import models  # noqa: F401 - register tables
from scanconsole.services.search_client import SearchClient
from scanconsole.services.settings_service import seed_default_settings

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
SEARCH_BASE_URL = "http://search.test"


class FakeSearchService:
    """In-process stand-in for the search / scan results service"""

    def __init__(self):
        self.scans = []
        self.count = 0
        self.download_body = {}
        # exact path -> (status_code, json body)
        self.errors = {}
        # exact path -> (content_type, raw bytes) served with a 200
        self.raw = {}
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path in self.errors:
            status_code, body = self.errors[path]
            return httpx.Response(status_code, json=body)
        if path in self.raw:
            content_type, content = self.raw[path]
            return httpx.Response(200, content=content, headers={"content-type": content_type})

        if path.startswith("/deepfence/search/count/"):
            return httpx.Response(200, json={"count": self.count})
        if path.startswith("/deepfence/search/"):
            return httpx.Response(
                200, content=json.dumps(self.scans).encode(), headers={"content-type": "application/json"}
            )
        if request.method == "DELETE":
            return httpx.Response(204)
        if path.endswith("/download"):
            return httpx.Response(200, json=self.download_body)
        return httpx.Response(404, json={"message": "not found"})

    def bodies(self, path: str):
        return [json.loads(r.content) for r in self.requests if r.url.path == path]


@pytest.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Fresh in-memory database for each test"""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    await engine.dispose()


@pytest.fixture
async def seeded_db(db_session: AsyncSession) -> AsyncSession:
    """Database with the default settings provisioned"""
    await seed_default_settings(db_session)
    return db_session


@pytest.fixture
def search_service() -> FakeSearchService:
    return FakeSearchService()


@pytest.fixture
async def search_http(search_service: FakeSearchService) -> AsyncGenerator[httpx.AsyncClient, None]:
    async with httpx.AsyncClient(
        transport=httpx.MockTransport(search_service),
        base_url=SEARCH_BASE_URL,
    ) as http:
        yield http


@pytest.fixture
def search_client(search_http: httpx.AsyncClient) -> SearchClient:
    return SearchClient(search_http)


@pytest.fixture(scope="function")
async def client(db_session: AsyncSession, search_http: httpx.AsyncClient) -> AsyncGenerator[AsyncClient, None]:
    """API client with database and search service overrides"""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_http_client] = lambda: search_http

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as test_client:
        yield test_client

    app.dependency_overrides.clear()


def make_scan(scan_id: str, **overrides) -> dict:
    """Raw search row as returned by the search service"""
    row = {
        "scan_id": scan_id,
        "node_id": f"node-{scan_id}",
        "node_name": f"node {scan_id}",
        "node_type": "host",
        "status": "COMPLETE",
        "updated_at": 1672531200000,
        "severity_counts": {"critical": 1, "high": 2, "medium": 3, "low": 4, "unknown": 5},
    }
    row.update(overrides)
    return row

"""
Test infrastructure for the Blog CMS.

Strategy
--------
- mongomock-motor provides an in-memory Motor client, so the repositories
  run their real filter/sort/update documents without a MongoDB server.
- Every test gets a fresh client and a uniquely named database, so no
  state leaks between tests.
- The app's ``get_db`` dependency is overridden so every test-time request
  uses the in-memory database instead of ``app.state.database``.  The
  lifespan never runs under ``ASGITransport``, so no real client is opened.
- Redis is disabled by setting ``cache._redis = None``; ``CacheManager``
  reports itself unavailable in that state and nothing else touches it.
"""
import uuid

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from blogcms.cache import cache
from blogcms.dependencies import get_db
from blogcms.main import app
from blogcms.repositories import MongoArticleRepository, MongoCategoryRepository

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def mongo_db():
    """Return an empty in-memory database unique to the test."""
    client = AsyncMongoMockClient()
    return client[f"blogcms_test_{uuid.uuid4().hex}"]


@pytest.fixture
def article_repository(mongo_db) -> MongoArticleRepository:
    return MongoArticleRepository(mongo_db)


@pytest.fixture
def category_repository(mongo_db) -> MongoCategoryRepository:
    return MongoCategoryRepository(mongo_db)


@pytest_asyncio.fixture
async def async_client(mongo_db) -> AsyncClient:
    """
    Yield an httpx.AsyncClient wired to the FastAPI app via ASGITransport,
    with the database dependency pointing at the in-memory database.
    """
    cache._redis = None
    app.dependency_overrides[get_db] = lambda: mongo_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.pop(get_db, None)

"""
Article endpoint tests: full CRUD lifecycle through the HTTP layer,
backed by the in-memory database.

Each test creates the categories and articles it needs via the API, so
test order does not matter.
"""
import asyncio

import pytest
from bson import ObjectId
from httpx import AsyncClient


async def _create_category(client: AsyncClient, name: str = "Tech", slug: str = "tech") -> str:
    resp = await client.post("/api/v1/categories", json={"name": name, "slug": slug, "display_order": 0})
    assert resp.status_code == 201, resp.text
    return resp.json()["id"]


def _payload(category_id: str, **overrides) -> dict:
    data = {
        "title": "Hello",
        "slug": "hello-world",
        "content": "...",
        "author": "A",
        "category_id": category_id,
        "is_published": True,
    }
    data.update(overrides)
    return data


# ---------------------------------------------------------------------------
# Infrastructure / health
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_health(async_client: AsyncClient):
    """Health endpoint reports the app as healthy and the disabled cache."""
    resp = await async_client.get("/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "healthy"
    assert data["cache"] == "unavailable"
    assert "x-response-time-ms" in resp.headers


# ---------------------------------------------------------------------------
# Create + read
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_category_then_article_scenario(async_client: AsyncClient):
    """A new article shows up in its category listing."""
    tech_id = await _create_category(async_client)

    resp = await async_client.post("/api/v1/articles", json=_payload(tech_id))
    assert resp.status_code == 201, resp.text
    article = resp.json()
    assert article["created_at"] == article["updated_at"]
    assert article["view_count"] == 0

    resp = await async_client.get(f"/api/v1/articles/by-category/{tech_id}")
    assert resp.status_code == 200
    listed = resp.json()
    assert [a["id"] for a in listed] == [article["id"]]


@pytest.mark.asyncio
async def test_unpublished_article_excluded_from_category_listing_only(async_client: AsyncClient):
    tech_id = await _create_category(async_client)
    await async_client.post("/api/v1/articles", json=_payload(tech_id, is_published=False))

    by_category = await async_client.get(f"/api/v1/articles/by-category/{tech_id}")
    assert by_category.json() == []

    all_in_category = await async_client.get("/api/v1/articles", params={"category_id": tech_id})
    assert len(all_in_category.json()) == 1

    published_only = await async_client.get("/api/v1/articles", params={"published_only": True})
    assert published_only.json() == []


@pytest.mark.asyncio
async def test_get_article_by_id_and_slug(async_client: AsyncClient):
    tech_id = await _create_category(async_client)
    created = (await async_client.post("/api/v1/articles", json=_payload(tech_id, tags=["b", "a"]))).json()

    resp = await async_client.get(f"/api/v1/articles/{created['id']}")
    assert resp.status_code == 200
    assert resp.json()["tags"] == ["b", "a"]
    assert resp.json()["category_id"] == tech_id

    resp = await async_client.get("/api/v1/articles/by-slug/hello-world")
    assert resp.status_code == 200
    assert resp.json()["id"] == created["id"]


@pytest.mark.asyncio
async def test_get_missing_article_returns_404(async_client: AsyncClient):
    missing_id = str(ObjectId())
    resp = await async_client.get(f"/api/v1/articles/{missing_id}")
    assert resp.status_code == 404
    assert resp.json()["detail"] == f"Article with ID {missing_id} not found"


@pytest.mark.asyncio
async def test_create_invalid_article_returns_400_with_all_errors(async_client: AsyncClient):
    resp = await async_client.post(
        "/api/v1/articles",
        json=_payload("bad", title="x" * 201, tags=[str(i) for i in range(11)]),
    )
    assert resp.status_code == 400
    detail = resp.json()["detail"]
    assert "Title must not exceed 200 characters." in detail
    assert "Category ID must be a valid MongoDB ObjectId." in detail
    assert "Article cannot have more than 10 tags." in detail

    assert (await async_client.get("/api/v1/articles")).json() == []


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_search_articles(async_client: AsyncClient):
    tech_id = await _create_category(async_client)
    await async_client.post("/api/v1/articles", json=_payload(tech_id, title="Motor Tips", slug="motor-tips"))
    await async_client.post("/api/v1/articles", json=_payload(tech_id, title="Other", slug="other"))

    resp = await async_client.get("/api/v1/articles/search", params={"q": "motor"})
    assert resp.status_code == 200
    assert [a["title"] for a in resp.json()] == ["Motor Tips"]


@pytest.mark.asyncio
async def test_search_without_query_returns_400(async_client: AsyncClient):
    resp = await async_client.get("/api/v1/articles/search")
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Search query is required"


# ---------------------------------------------------------------------------
# Update / delete / views
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_update_article_keeps_created_at_and_views(async_client: AsyncClient):
    tech_id = await _create_category(async_client)
    created = (await async_client.post("/api/v1/articles", json=_payload(tech_id))).json()
    await async_client.post(f"/api/v1/articles/{created['id']}/views")
    stored = (await async_client.get(f"/api/v1/articles/{created['id']}")).json()
    await asyncio.sleep(0.002)

    resp = await async_client.put(
        f"/api/v1/articles/{created['id']}", json=_payload(tech_id, title="Changed")
    )
    assert resp.status_code == 200, resp.text
    updated = resp.json()
    assert updated["title"] == "Changed"
    assert updated["view_count"] == 1
    assert updated["created_at"] == stored["created_at"]
    assert updated["updated_at"] != stored["updated_at"]


@pytest.mark.asyncio
async def test_update_missing_article_returns_404(async_client: AsyncClient):
    tech_id = await _create_category(async_client)
    resp = await async_client.put(f"/api/v1/articles/{ObjectId()}", json=_payload(tech_id))
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_delete_article(async_client: AsyncClient):
    tech_id = await _create_category(async_client)
    created = (await async_client.post("/api/v1/articles", json=_payload(tech_id))).json()

    resp = await async_client.delete(f"/api/v1/articles/{created['id']}")
    assert resp.status_code == 204

    resp = await async_client.delete(f"/api/v1/articles/{created['id']}")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Article not found."


@pytest.mark.asyncio
async def test_record_view(async_client: AsyncClient):
    tech_id = await _create_category(async_client)
    created = (await async_client.post("/api/v1/articles", json=_payload(tech_id))).json()

    for _ in range(3):
        resp = await async_client.post(f"/api/v1/articles/{created['id']}/views")
        assert resp.status_code == 204

    detail = (await async_client.get(f"/api/v1/articles/{created['id']}")).json()
    assert detail["view_count"] == 3

    resp = await async_client.post(f"/api/v1/articles/{ObjectId()}/views")
    assert resp.status_code == 404

"""
Category endpoint tests: CRUD plus the root/subcategory hierarchy
queries, backed by the in-memory database.
"""
import pytest
from bson import ObjectId
from httpx import AsyncClient


async def _create(client: AsyncClient, name: str, order: int = 0, **extra) -> dict:
    payload = {"name": name, "slug": name.lower(), "display_order": order, **extra}
    resp = await client.post("/api/v1/categories", json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()


@pytest.mark.asyncio
async def test_create_and_get_category(async_client: AsyncClient):
    created = await _create(async_client, "Tech", description="All things tech")
    assert created["is_active"] is True
    assert created["parent_id"] is None

    resp = await async_client.get(f"/api/v1/categories/{created['id']}")
    assert resp.status_code == 200
    assert resp.json()["description"] == "All things tech"

    resp = await async_client.get("/api/v1/categories/by-slug/tech")
    assert resp.status_code == 200
    assert resp.json()["id"] == created["id"]


@pytest.mark.asyncio
async def test_create_invalid_category_returns_400(async_client: AsyncClient):
    resp = await async_client.post(
        "/api/v1/categories",
        json={"name": "", "slug": "Bad Slug", "parent_id": "123", "display_order": -1},
    )
    assert resp.status_code == 400
    assert resp.json()["detail"] == (
        "Category name is required., "
        "Slug must be lowercase alphanumeric with hyphens only., "
        "Parent category ID must be a valid MongoDB ObjectId., "
        "Display order cannot be negative."
    )


@pytest.mark.asyncio
async def test_list_categories_sorted_by_display_order(async_client: AsyncClient):
    await _create(async_client, "Third", order=3)
    await _create(async_client, "First", order=1)
    await _create(async_client, "Off", order=2, is_active=False)

    names = [c["name"] for c in (await async_client.get("/api/v1/categories")).json()]
    assert names == ["First", "Off", "Third"]

    resp = await async_client.get("/api/v1/categories", params={"active_only": True})
    assert [c["name"] for c in resp.json()] == ["First", "Third"]


@pytest.mark.asyncio
async def test_root_and_subcategories(async_client: AsyncClient):
    tech = await _create(async_client, "Tech", order=1)
    await _create(async_client, "Arts", order=0)
    await _create(async_client, "Hidden", order=2, is_active=False)
    await _create(async_client, "Web", order=1, parent_id=tech["id"])
    await _create(async_client, "Python", order=0, parent_id=tech["id"])

    roots = (await async_client.get("/api/v1/categories/roots")).json()
    assert [c["name"] for c in roots] == ["Arts", "Tech"]

    resp = await async_client.get(f"/api/v1/categories/{tech['id']}/subcategories")
    assert resp.status_code == 200
    assert [c["name"] for c in resp.json()] == ["Python", "Web"]


@pytest.mark.asyncio
async def test_update_category(async_client: AsyncClient):
    created = await _create(async_client, "Tech")
    resp = await async_client.put(
        f"/api/v1/categories/{created['id']}",
        json={"name": "Technology", "slug": "technology", "display_order": 4},
    )
    assert resp.status_code == 200, resp.text
    assert resp.json()["name"] == "Technology"
    assert resp.json()["display_order"] == 4

    resp = await async_client.put(
        f"/api/v1/categories/{ObjectId()}", json={"name": "X", "slug": "x"}
    )
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_delete_category_leaves_articles_in_place(async_client: AsyncClient):
    tech = await _create(async_client, "Tech")
    await async_client.post(
        "/api/v1/articles",
        json={
            "title": "Orphan",
            "slug": "orphan",
            "content": "...",
            "author": "A",
            "category_id": tech["id"],
            "is_published": True,
        },
    )

    resp = await async_client.delete(f"/api/v1/categories/{tech['id']}")
    assert resp.status_code == 204
    assert (await async_client.get(f"/api/v1/categories/{tech['id']}")).status_code == 404

    # No cascade: the article still points at the deleted category.
    orphans = (await async_client.get(f"/api/v1/articles/by-category/{tech['id']}")).json()
    assert [a["title"] for a in orphans] == ["Orphan"]

    resp = await async_client.delete(f"/api/v1/categories/{tech['id']}")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_created_category_matches_later_read(async_client: AsyncClient):
    created = await _create(async_client, "Root", parent_id="")
    assert created["parent_id"] is None

    fetched = (await async_client.get(f"/api/v1/categories/{created['id']}")).json()
    assert fetched == created

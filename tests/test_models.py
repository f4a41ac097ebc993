"""Entity <-> document mapping."""
from datetime import datetime, timezone

from bson import ObjectId

from blogcms.models import Article, Category

CATEGORY_ID = "65a1f0c2e4b0a1b2c3d4e5f6"


def test_article_document_uses_store_field_names():
    article = Article(
        title="Hello",
        slug="hello-world",
        content="Body",
        author="A",
        category_id=CATEGORY_ID,
        tags=["b", "a"],
        is_published=True,
        view_count=3,
    )
    doc = article.to_document()

    assert "_id" not in doc  # new articles get their id from the store
    assert doc["categoryId"] == ObjectId(CATEGORY_ID)
    assert doc["isPublished"] is True
    assert doc["viewCount"] == 3
    assert doc["tags"] == ["b", "a"]
    assert doc["publishedAt"] is None
    assert {"createdAt", "updatedAt"} <= doc.keys()
    assert "category_id" not in doc


def test_article_round_trips_identifiers_as_strings():
    oid = ObjectId()
    doc = {
        "_id": oid,
        "title": "Hello",
        "slug": "hello",
        "content": "Body",
        "author": "A",
        "categoryId": ObjectId(CATEGORY_ID),
        "createdAt": datetime(2024, 1, 1, 12, 0),
        "updatedAt": datetime(2024, 1, 2, 12, 0),
    }
    article = Article.from_document(doc)

    assert article.id == str(oid)
    assert article.category_id == CATEGORY_ID
    assert article.created_at == datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
    assert article.tags == []
    assert article.view_count == 0
    assert article.to_document()["_id"] == oid


def test_blank_parent_is_stored_as_null():
    assert Category(name="Root", slug="root", parent_id="").to_document()["parentId"] is None
    assert Category(name="Root", slug="root").to_document()["parentId"] is None


def test_parent_reference_is_stored_as_object_id():
    doc = Category(name="Sub", slug="sub", parent_id=CATEGORY_ID).to_document()
    assert doc["parentId"] == ObjectId(CATEGORY_ID)
    assert doc["displayOrder"] == 0
    assert doc["isActive"] is True


def test_category_from_document_without_parent():
    category = Category.from_document({"_id": ObjectId(), "name": "Root", "slug": "root", "parentId": None})
    assert category.parent_id is None
    assert category.is_active is True


def test_document_timestamps_keep_millisecond_precision():
    written = datetime(2024, 1, 1, 12, 0, 17, 829024, tzinfo=timezone.utc)
    doc = Article(title="T", created_at=written, published_at=written).to_document()
    assert doc["createdAt"].microsecond == 829000
    assert doc["publishedAt"] == written.replace(microsecond=829000)

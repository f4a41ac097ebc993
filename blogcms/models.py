from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any, ClassVar

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field

# 24 hexadecimal characters: the string form of a MongoDB ObjectId.
OBJECT_ID_RE = re.compile(r"^[0-9a-fA-F]{24}$")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def is_object_id(value: str | None) -> bool:
    return bool(value) and OBJECT_ID_RE.match(value) is not None


def to_object_id(value: str | None) -> ObjectId | None:
    """Return the ObjectId for *value*, or None when it is not a 24-hex string."""
    if is_object_id(value):
        return ObjectId(value)
    return None


def _reference_to_store(value: str | None) -> Any:
    # Blank references collapse to null so "no parent" has one stored form.
    if value is None or not value.strip():
        return None
    return to_object_id(value) or value


def _as_utc(value: datetime) -> datetime:
    # The driver hands back naive datetimes that are already UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _to_millis(value: datetime) -> datetime:
    # BSON dates keep millisecond precision.
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


# ---------------------------------------------------------------------------
# Base document
# ---------------------------------------------------------------------------
class Document(BaseModel):
    """
    Entity stored as one MongoDB document.

    Field aliases are the document field names; ``to_document`` and
    ``from_document`` are the only places where identifiers switch between
    ``str`` (application side) and ``ObjectId`` (store side).
    """

    model_config = ConfigDict(populate_by_name=True)

    # Aliased fields stored as ObjectId references to other documents.
    reference_fields: ClassVar[tuple[str, ...]] = ()

    id: str = ""

    def to_document(self) -> dict[str, Any]:
        doc = self.model_dump(by_alias=True, exclude={"id"})
        for key in self.reference_fields:
            doc[key] = _reference_to_store(doc.get(key))
        for key, value in doc.items():
            if isinstance(value, datetime):
                doc[key] = _to_millis(value)
        oid = to_object_id(self.id)
        if oid is not None:
            doc["_id"] = oid
        return doc

    @classmethod
    def from_document(cls, doc: dict[str, Any]):
        data = dict(doc)
        oid = data.pop("_id", None)
        data["id"] = str(oid) if oid is not None else ""
        for key in cls.reference_fields:
            if data.get(key) is None:
                data.pop(key, None)
            elif isinstance(data[key], ObjectId):
                data[key] = str(data[key])
        for key, value in data.items():
            if isinstance(value, datetime):
                data[key] = _as_utc(value)
        return cls.model_validate(data)


# ---------------------------------------------------------------------------
# Category
# ---------------------------------------------------------------------------
class Category(Document):
    reference_fields: ClassVar[tuple[str, ...]] = ("parentId",)

    name: str = ""
    slug: str = ""
    description: str = ""
    # Single-level hierarchy: None marks a root category.
    parent_id: str | None = Field(None, alias="parentId")
    created_at: datetime = Field(default_factory=utcnow, alias="createdAt")
    updated_at: datetime = Field(default_factory=utcnow, alias="updatedAt")
    display_order: int = Field(0, alias="displayOrder")
    is_active: bool = Field(True, alias="isActive")


# ---------------------------------------------------------------------------
# Article
# ---------------------------------------------------------------------------
class Article(Document):
    reference_fields: ClassVar[tuple[str, ...]] = ("categoryId",)

    title: str = ""
    slug: str = ""
    summary: str = ""
    content: str = ""
    author: str = ""
    # References Category.id; existence is never checked.
    category_id: str = Field("", alias="categoryId")
    tags: list[str] = Field(default_factory=list)
    is_published: bool = Field(False, alias="isPublished")
    created_at: datetime = Field(default_factory=utcnow, alias="createdAt")
    updated_at: datetime = Field(default_factory=utcnow, alias="updatedAt")
    published_at: datetime | None = Field(None, alias="publishedAt")
    view_count: int = Field(0, alias="viewCount")

"""Category repository backed by a Motor (MongoDB) collection."""
from bson.errors import InvalidDocument
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING
from pymongo.errors import PyMongoError

from blogcms.models import Category, to_object_id
from blogcms.repositories.base import CategoryRepository
from blogcms.result import Result

COLLECTION_NAME = "categories"

_NOT_FOUND = "Category not found."

# DocumentTooLarge derives from InvalidDocument, not PyMongoError.
_WRITE_ERRORS = (PyMongoError, InvalidDocument)


class MongoCategoryRepository(CategoryRepository):
    """Implements CategoryRepository on the ``categories`` collection."""

    def __init__(self, database: AsyncIOMotorDatabase):
        self._collection = database[COLLECTION_NAME]

    async def _find(self, query: dict) -> list[Category]:
        cursor = self._collection.find(query).sort("displayOrder", ASCENDING)
        return [Category.from_document(doc) for doc in await cursor.to_list(length=None)]

    async def get_all(self, active_only: bool = False) -> list[Category]:
        return await self._find({"isActive": True} if active_only else {})

    async def get_by_id(self, category_id: str) -> Category | None:
        oid = to_object_id(category_id)
        if oid is None:
            return None
        doc = await self._collection.find_one({"_id": oid})
        return Category.from_document(doc) if doc else None

    async def get_by_slug(self, slug: str) -> Category | None:
        doc = await self._collection.find_one({"slug": slug})
        return Category.from_document(doc) if doc else None

    async def get_subcategories(self, parent_id: str) -> list[Category]:
        parent = to_object_id(parent_id) or parent_id
        return await self._find({"parentId": parent, "isActive": True})

    async def get_root_categories(self) -> list[Category]:
        # {"parentId": None} also matches documents without the field.
        return await self._find(
            {"$or": [{"parentId": None}, {"parentId": ""}], "isActive": True}
        )

    async def create(self, category: Category) -> Result[Category]:
        doc = category.to_document()
        try:
            result = await self._collection.insert_one(doc)
        except _WRITE_ERRORS as exc:
            return Result.failure(f"Failed to create category: {exc}")
        category.id = str(result.inserted_id)
        doc["_id"] = result.inserted_id
        return Result.success(Category.from_document(doc))

    async def update(self, category: Category) -> Result[Category]:
        oid = to_object_id(category.id)
        if oid is None:
            return Result.failure(_NOT_FOUND)
        doc = category.to_document()
        try:
            result = await self._collection.replace_one({"_id": oid}, doc)
        except _WRITE_ERRORS as exc:
            return Result.failure(f"Failed to update category: {exc}")
        if result.matched_count == 0:
            return Result.failure(_NOT_FOUND)
        return Result.success(Category.from_document(doc))

    async def delete(self, category_id: str) -> Result[None]:
        # Articles and subcategories that point at this category are left as is.
        oid = to_object_id(category_id)
        if oid is None:
            return Result.failure(_NOT_FOUND)
        try:
            result = await self._collection.delete_one({"_id": oid})
        except _WRITE_ERRORS as exc:
            return Result.failure(f"Failed to delete category: {exc}")
        if result.deleted_count == 0:
            return Result.failure(_NOT_FOUND)
        return Result.success()

    async def exists(self, category_id: str) -> bool:
        oid = to_object_id(category_id)
        if oid is None:
            return False
        return await self._collection.count_documents({"_id": oid}, limit=1) > 0

    async def count(self) -> int:
        return await self._collection.count_documents({})

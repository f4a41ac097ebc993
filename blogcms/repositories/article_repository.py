"""Article repository backed by a Motor (MongoDB) collection."""
import re

from bson.errors import InvalidDocument
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import DESCENDING
from pymongo.errors import PyMongoError

from blogcms.models import Article, to_object_id
from blogcms.repositories.base import ArticleRepository
from blogcms.result import Result

COLLECTION_NAME = "articles"

_NOT_FOUND = "Article not found."

# DocumentTooLarge derives from InvalidDocument, not PyMongoError.
_WRITE_ERRORS = (PyMongoError, InvalidDocument)


def _category_filter(category_id: str):
    return to_object_id(category_id) or category_id


class MongoArticleRepository(ArticleRepository):
    """Implements ArticleRepository on the ``articles`` collection."""

    def __init__(self, database: AsyncIOMotorDatabase):
        self._collection = database[COLLECTION_NAME]

    async def _find(self, query: dict) -> list[Article]:
        cursor = self._collection.find(query).sort("createdAt", DESCENDING)
        return [Article.from_document(doc) for doc in await cursor.to_list(length=None)]

    async def _find_one(self, query: dict) -> Article | None:
        doc = await self._collection.find_one(query)
        return Article.from_document(doc) if doc else None

    async def get_all(
        self, is_published_only: bool = False, category_id: str | None = None
    ) -> list[Article]:
        query: dict = {}
        if is_published_only:
            query["isPublished"] = True
        if category_id and category_id.strip():
            query["categoryId"] = _category_filter(category_id)
        return await self._find(query)

    async def get_by_id(self, article_id: str) -> Article | None:
        oid = to_object_id(article_id)
        if oid is None:
            return None
        return await self._find_one({"_id": oid})

    async def get_by_slug(self, slug: str) -> Article | None:
        return await self._find_one({"slug": slug})

    async def get_by_category(self, category_id: str) -> list[Article]:
        return await self._find(
            {"categoryId": _category_filter(category_id), "isPublished": True}
        )

    async def search(self, query: str) -> list[Article]:
        # The query is matched literally, not as a user-supplied regex.
        pattern = {"$regex": re.escape(query), "$options": "i"}
        return await self._find(
            {"$or": [{"title": pattern}, {"content": pattern}, {"summary": pattern}]}
        )

    async def create(self, article: Article) -> Result[Article]:
        doc = article.to_document()
        try:
            result = await self._collection.insert_one(doc)
        except _WRITE_ERRORS as exc:
            return Result.failure(f"Failed to create article: {exc}")
        article.id = str(result.inserted_id)
        doc["_id"] = result.inserted_id
        return Result.success(Article.from_document(doc))

    async def update(self, article: Article) -> Result[Article]:
        oid = to_object_id(article.id)
        if oid is None:
            return Result.failure(_NOT_FOUND)
        doc = article.to_document()
        try:
            result = await self._collection.replace_one({"_id": oid}, doc)
        except _WRITE_ERRORS as exc:
            return Result.failure(f"Failed to update article: {exc}")
        if result.matched_count == 0:
            return Result.failure(_NOT_FOUND)
        return Result.success(Article.from_document(doc))

    async def delete(self, article_id: str) -> Result[None]:
        oid = to_object_id(article_id)
        if oid is None:
            return Result.failure(_NOT_FOUND)
        try:
            result = await self._collection.delete_one({"_id": oid})
        except _WRITE_ERRORS as exc:
            return Result.failure(f"Failed to delete article: {exc}")
        if result.deleted_count == 0:
            return Result.failure(_NOT_FOUND)
        return Result.success()

    async def increment_view_count(self, article_id: str) -> Result[None]:
        oid = to_object_id(article_id)
        if oid is None:
            return Result.failure(_NOT_FOUND)
        try:
            # $inc is applied server-side so concurrent increments are not lost.
            result = await self._collection.update_one({"_id": oid}, {"$inc": {"viewCount": 1}})
        except _WRITE_ERRORS as exc:
            return Result.failure(f"Failed to increment view count: {exc}")
        if result.matched_count == 0:
            return Result.failure(_NOT_FOUND)
        return Result.success()

    async def count_by_category(self, category_id: str) -> int:
        return await self._collection.count_documents(
            {"categoryId": _category_filter(category_id)}
        )

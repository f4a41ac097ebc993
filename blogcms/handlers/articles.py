"""
Article handlers, one class per use case.

Design notes
------------
- Input is rejected before any I/O: a missing article or a blank id
  yields a failure and a warning log.
- Create and update run ``validate_article`` first; every violation is
  joined into a single failure message and the repository is never
  called for an invalid article.
- The handler layer owns timestamps: create stamps ``created_at`` and
  ``updated_at`` with the same instant, update refreshes ``updated_at``
  only.
- Write results from the repository are returned unchanged.  Read
  handlers turn a missing article into a failure and convert unexpected
  repository exceptions into failures, so no raw fault reaches the
  caller.  ``asyncio.CancelledError`` is not an ``Exception`` and is
  always propagated.
"""
import logging
from typing import Callable

from blogcms.models import Article, utcnow
from blogcms.repositories.base import ArticleRepository
from blogcms.result import Result
from blogcms.validators import validate_article

logger = logging.getLogger(__name__)

ArticleValidator = Callable[[Article], list[str]]


class _ArticleHandler:
    def __init__(
        self,
        repository: ArticleRepository,
        log: logging.Logger | None = None,
    ) -> None:
        self._repository = repository
        self._logger = log or logger


class _ValidatingArticleHandler(_ArticleHandler):
    def __init__(
        self,
        repository: ArticleRepository,
        validator: ArticleValidator = validate_article,
        log: logging.Logger | None = None,
    ) -> None:
        super().__init__(repository, log)
        self._validator = validator


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

class CreateArticleHandler(_ValidatingArticleHandler):
    async def handle(self, article: Article | None) -> Result[Article]:
        if article is None:
            self._logger.warning("CreateArticle: Article cannot be null")
            return Result.failure("Article cannot be null")

        violations = self._validator(article)
        if violations:
            errors = ", ".join(violations)
            self._logger.warning("CreateArticle: Validation failed. Errors: %s", errors)
            return Result.failure(errors)

        now = utcnow()
        article.created_at = now
        article.updated_at = now

        result = await self._repository.create(article)
        if result.is_success:
            self._logger.info("CreateArticle: Article created successfully with ID: %s", article.id)
        else:
            self._logger.error("CreateArticle: Failed to create article. Error: %s", result.error)
        return result


class UpdateArticleHandler(_ValidatingArticleHandler):
    async def handle(self, article: Article | None) -> Result[Article]:
        if article is None:
            self._logger.warning("UpdateArticle: Article cannot be null")
            return Result.failure("Article cannot be null")

        if not article.id:
            self._logger.warning("UpdateArticle: Article ID cannot be null or empty")
            return Result.failure("Article ID is required")

        violations = self._validator(article)
        if violations:
            errors = ", ".join(violations)
            self._logger.warning(
                "UpdateArticle: Validation failed for article %s. Errors: %s", article.id, errors
            )
            return Result.failure(errors)

        article.updated_at = utcnow()

        result = await self._repository.update(article)
        if result.is_success:
            self._logger.info("UpdateArticle: Article %s updated successfully", article.id)
        else:
            self._logger.error(
                "UpdateArticle: Failed to update article %s. Error: %s", article.id, result.error
            )
        return result


class DeleteArticleHandler(_ArticleHandler):
    async def handle(self, article_id: str | None) -> Result[None]:
        if not article_id or not article_id.strip():
            self._logger.warning("DeleteArticle: Article ID cannot be null or empty")
            return Result.failure("Article ID is required")

        result = await self._repository.delete(article_id)
        if result.is_success:
            self._logger.info("DeleteArticle: Article %s deleted successfully", article_id)
        else:
            self._logger.error(
                "DeleteArticle: Failed to delete article %s. Error: %s", article_id, result.error
            )
        return result


class IncrementArticleViewCountHandler(_ArticleHandler):
    """Bump the view counter without rewriting the rest of the article."""

    async def handle(self, article_id: str | None) -> Result[None]:
        if not article_id or not article_id.strip():
            self._logger.warning("IncrementViewCount: Article ID cannot be null or empty")
            return Result.failure("Article ID is required")

        result = await self._repository.increment_view_count(article_id)
        if result.is_success:
            self._logger.info("IncrementViewCount: View count incremented for article %s", article_id)
        else:
            self._logger.error(
                "IncrementViewCount: Failed for article %s. Error: %s", article_id, result.error
            )
        return result


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------

class GetArticleByIdHandler(_ArticleHandler):
    async def handle(self, article_id: str | None) -> Result[Article]:
        if not article_id or not article_id.strip():
            self._logger.warning("GetArticleById: Article ID cannot be null or empty")
            return Result.failure("Article ID is required")

        try:
            article = await self._repository.get_by_id(article_id)
        except Exception as exc:
            self._logger.exception("GetArticleById: Error retrieving article %s", article_id)
            return Result.failure(f"Error retrieving article: {exc}")

        if article is None:
            self._logger.info("GetArticleById: Article %s not found", article_id)
            return Result.failure(f"Article with ID {article_id} not found")

        self._logger.info("GetArticleById: Article %s retrieved successfully", article_id)
        return Result.success(article)


class GetArticleBySlugHandler(_ArticleHandler):
    async def handle(self, slug: str | None) -> Result[Article]:
        if not slug or not slug.strip():
            self._logger.warning("GetArticleBySlug: Slug cannot be null or empty")
            return Result.failure("Slug is required")

        try:
            article = await self._repository.get_by_slug(slug)
        except Exception as exc:
            self._logger.exception("GetArticleBySlug: Error retrieving article %r", slug)
            return Result.failure(f"Error retrieving article: {exc}")

        if article is None:
            self._logger.info("GetArticleBySlug: Article %r not found", slug)
            return Result.failure(f"Article with slug {slug} not found")

        self._logger.info("GetArticleBySlug: Article %r retrieved successfully", slug)
        return Result.success(article)


class GetAllArticlesHandler(_ArticleHandler):
    async def handle(
        self, is_published_only: bool = False, category_id: str | None = None
    ) -> Result[list[Article]]:
        try:
            articles = await self._repository.get_all(is_published_only, category_id)
        except Exception as exc:
            self._logger.exception("GetAllArticles: Error retrieving articles")
            return Result.failure(f"Error retrieving articles: {exc}")

        self._logger.info(
            "GetAllArticles: Retrieved %d articles (published only: %s, category: %s)",
            len(articles),
            is_published_only,
            category_id or "none",
        )
        return Result.success(articles)


class GetArticlesByCategoryHandler(_ArticleHandler):
    """Published articles of one category (drafts are excluded)."""

    async def handle(self, category_id: str | None) -> Result[list[Article]]:
        if not category_id or not category_id.strip():
            self._logger.warning("GetArticlesByCategory: Category ID cannot be null or empty")
            return Result.failure("Category ID is required")

        try:
            articles = await self._repository.get_by_category(category_id)
        except Exception as exc:
            self._logger.exception(
                "GetArticlesByCategory: Error retrieving articles for category %s", category_id
            )
            return Result.failure(f"Error retrieving articles: {exc}")

        self._logger.info(
            "GetArticlesByCategory: Retrieved %d articles for category %s",
            len(articles),
            category_id,
        )
        return Result.success(articles)


class SearchArticlesHandler(_ArticleHandler):
    async def handle(self, query: str | None) -> Result[list[Article]]:
        if not query or not query.strip():
            self._logger.warning("SearchArticles: Query cannot be null or empty")
            return Result.failure("Search query is required")

        try:
            articles = await self._repository.search(query)
        except Exception as exc:
            self._logger.exception("SearchArticles: Error searching articles with query %r", query)
            return Result.failure(f"Error searching articles: {exc}")

        self._logger.info(
            "SearchArticles: Found %d articles matching query %r", len(articles), query
        )
        return Result.success(articles)

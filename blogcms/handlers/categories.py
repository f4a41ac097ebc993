"""
Category handlers. Same contract as the article handlers: fail fast on
missing input, validate before writing, stamp timestamps, log the
outcome and always return a ``Result``.
"""
import logging
from typing import Callable

from blogcms.models import Category, utcnow
from blogcms.repositories.base import CategoryRepository
from blogcms.result import Result
from blogcms.validators import validate_category

logger = logging.getLogger(__name__)

CategoryValidator = Callable[[Category], list[str]]


class _CategoryHandler:
    def __init__(
        self,
        repository: CategoryRepository,
        log: logging.Logger | None = None,
    ) -> None:
        self._repository = repository
        self._logger = log or logger


class _ValidatingCategoryHandler(_CategoryHandler):
    def __init__(
        self,
        repository: CategoryRepository,
        validator: CategoryValidator = validate_category,
        log: logging.Logger | None = None,
    ) -> None:
        super().__init__(repository, log)
        self._validator = validator


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

class CreateCategoryHandler(_ValidatingCategoryHandler):
    async def handle(self, category: Category | None) -> Result[Category]:
        if category is None:
            self._logger.warning("CreateCategory: Category cannot be null")
            return Result.failure("Category cannot be null")

        violations = self._validator(category)
        if violations:
            errors = ", ".join(violations)
            self._logger.warning("CreateCategory: Validation failed. Errors: %s", errors)
            return Result.failure(errors)

        now = utcnow()
        category.created_at = now
        category.updated_at = now

        result = await self._repository.create(category)
        if result.is_success:
            self._logger.info(
                "CreateCategory: Category created successfully with ID: %s", category.id
            )
        else:
            self._logger.error("CreateCategory: Failed to create category. Error: %s", result.error)
        return result


class UpdateCategoryHandler(_ValidatingCategoryHandler):
    async def handle(self, category: Category | None) -> Result[Category]:
        if category is None:
            self._logger.warning("UpdateCategory: Category cannot be null")
            return Result.failure("Category cannot be null")

        if not category.id:
            self._logger.warning("UpdateCategory: Category ID cannot be null or empty")
            return Result.failure("Category ID is required")

        violations = self._validator(category)
        if violations:
            errors = ", ".join(violations)
            self._logger.warning(
                "UpdateCategory: Validation failed for category %s. Errors: %s",
                category.id,
                errors,
            )
            return Result.failure(errors)

        category.updated_at = utcnow()

        result = await self._repository.update(category)
        if result.is_success:
            self._logger.info("UpdateCategory: Category %s updated successfully", category.id)
        else:
            self._logger.error(
                "UpdateCategory: Failed to update category %s. Error: %s",
                category.id,
                result.error,
            )
        return result


class DeleteCategoryHandler(_CategoryHandler):
    async def handle(self, category_id: str | None) -> Result[None]:
        if not category_id or not category_id.strip():
            self._logger.warning("DeleteCategory: Category ID cannot be null or empty")
            return Result.failure("Category ID is required")

        result = await self._repository.delete(category_id)
        if result.is_success:
            self._logger.info("DeleteCategory: Category %s deleted successfully", category_id)
        else:
            self._logger.error(
                "DeleteCategory: Failed to delete category %s. Error: %s",
                category_id,
                result.error,
            )
        return result


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------

class GetCategoryByIdHandler(_CategoryHandler):
    async def handle(self, category_id: str | None) -> Result[Category]:
        if not category_id or not category_id.strip():
            self._logger.warning("GetCategoryById: Category ID cannot be null or empty")
            return Result.failure("Category ID is required")

        try:
            category = await self._repository.get_by_id(category_id)
        except Exception as exc:
            self._logger.exception("GetCategoryById: Error retrieving category %s", category_id)
            return Result.failure(f"Error retrieving category: {exc}")

        if category is None:
            self._logger.info("GetCategoryById: Category %s not found", category_id)
            return Result.failure(f"Category with ID {category_id} not found")

        self._logger.info("GetCategoryById: Category %s retrieved successfully", category_id)
        return Result.success(category)


class GetCategoryBySlugHandler(_CategoryHandler):
    async def handle(self, slug: str | None) -> Result[Category]:
        if not slug or not slug.strip():
            self._logger.warning("GetCategoryBySlug: Slug cannot be null or empty")
            return Result.failure("Slug is required")

        try:
            category = await self._repository.get_by_slug(slug)
        except Exception as exc:
            self._logger.exception("GetCategoryBySlug: Error retrieving category %r", slug)
            return Result.failure(f"Error retrieving category: {exc}")

        if category is None:
            self._logger.info("GetCategoryBySlug: Category %r not found", slug)
            return Result.failure(f"Category with slug {slug} not found")

        self._logger.info("GetCategoryBySlug: Category %r retrieved successfully", slug)
        return Result.success(category)


class GetAllCategoriesHandler(_CategoryHandler):
    async def handle(self, active_only: bool = False) -> Result[list[Category]]:
        try:
            categories = await self._repository.get_all(active_only)
        except Exception as exc:
            self._logger.exception("GetAllCategories: Error retrieving categories")
            return Result.failure(f"Error retrieving categories: {exc}")

        self._logger.info(
            "GetAllCategories: Retrieved %d categories (active only: %s)",
            len(categories),
            active_only,
        )
        return Result.success(categories)


class GetRootCategoriesHandler(_CategoryHandler):
    async def handle(self) -> Result[list[Category]]:
        try:
            categories = await self._repository.get_root_categories()
        except Exception as exc:
            self._logger.exception("GetRootCategories: Error retrieving root categories")
            return Result.failure(f"Error retrieving root categories: {exc}")

        self._logger.info("GetRootCategories: Retrieved %d root categories", len(categories))
        return Result.success(categories)


class GetSubcategoriesHandler(_CategoryHandler):
    async def handle(self, parent_category_id: str | None) -> Result[list[Category]]:
        if not parent_category_id or not parent_category_id.strip():
            self._logger.warning("GetSubcategories: Parent category ID cannot be null or empty")
            return Result.failure("Parent category ID is required")

        try:
            categories = await self._repository.get_subcategories(parent_category_id)
        except Exception as exc:
            self._logger.exception(
                "GetSubcategories: Error retrieving subcategories for parent %s",
                parent_category_id,
            )
            return Result.failure(f"Error retrieving subcategories: {exc}")

        self._logger.info(
            "GetSubcategories: Retrieved %d subcategories for parent %s",
            len(categories),
            parent_category_id,
        )
        return Result.success(categories)

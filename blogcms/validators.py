"""
Field rules for Article and Category.

Each validator is a pure function returning the list of violated rules
as human-readable messages; an empty list means the entity is valid.
Only the shape of reference fields is checked, never whether the
referenced category exists.
"""
import re
from datetime import datetime, timezone

from blogcms.models import OBJECT_ID_RE, Article, Category

SLUG_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")

MAX_TAGS = 10


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _check_slug(slug: str, max_length: int, errors: list[str]) -> None:
    if _blank(slug):
        errors.append("Slug is required.")
        return
    if len(slug) > max_length:
        errors.append(f"Slug must not exceed {max_length} characters.")
    if not SLUG_RE.match(slug):
        errors.append("Slug must be lowercase alphanumeric with hyphens only.")


def validate_article(article: Article) -> list[str]:
    errors: list[str] = []

    if _blank(article.title):
        errors.append("Title is required.")
    elif len(article.title) > 200:
        errors.append("Title must not exceed 200 characters.")

    _check_slug(article.slug, 250, errors)

    if _blank(article.content):
        errors.append("Content is required.")

    if _blank(article.author):
        errors.append("Author is required.")
    elif len(article.author) > 100:
        errors.append("Author name must not exceed 100 characters.")

    if article.summary and len(article.summary) > 500:
        errors.append("Summary must not exceed 500 characters.")

    if _blank(article.category_id):
        errors.append("Category is required.")
    elif not OBJECT_ID_RE.match(article.category_id):
        errors.append("Category ID must be a valid MongoDB ObjectId.")

    if article.tags is not None and len(article.tags) > MAX_TAGS:
        errors.append(f"Article cannot have more than {MAX_TAGS} tags.")

    if article.view_count < 0:
        errors.append("View count cannot be negative.")

    if article.published_at is not None:
        published_at = article.published_at
        if published_at.tzinfo is None:
            published_at = published_at.replace(tzinfo=timezone.utc)
        if published_at > datetime.now(timezone.utc):
            errors.append("Published date cannot be in the future.")

    return errors


def validate_category(category: Category) -> list[str]:
    errors: list[str] = []

    if _blank(category.name):
        errors.append("Category name is required.")
    elif len(category.name) > 100:
        errors.append("Category name must not exceed 100 characters.")

    _check_slug(category.slug, 150, errors)

    if category.description and len(category.description) > 500:
        errors.append("Description must not exceed 500 characters.")

    if not _blank(category.parent_id) and not OBJECT_ID_RE.match(category.parent_id):
        errors.append("Parent category ID must be a valid MongoDB ObjectId.")

    if category.display_order < 0:
        errors.append("Display order cannot be negative.")

    return errors

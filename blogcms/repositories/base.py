"""Abstract persistence contracts for articles and categories."""

from abc import ABC, abstractmethod

from blogcms.models import Article, Category
from blogcms.result import Result


class ArticleRepository(ABC):
    """
    Persistence port for articles.

    Reads that find nothing return ``None`` or an empty list.  Writes
    return a ``Result``; updating or deleting a missing article is a
    failure, not an empty success.
    """

    @abstractmethod
    async def get_all(
        self, is_published_only: bool = False, category_id: str | None = None
    ) -> list[Article]:
        """Return articles newest first, optionally filtered."""
        ...

    @abstractmethod
    async def get_by_id(self, article_id: str) -> Article | None:
        ...

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Article | None:
        ...

    @abstractmethod
    async def get_by_category(self, category_id: str) -> list[Article]:
        """Return the published articles of a category, newest first."""
        ...

    @abstractmethod
    async def search(self, query: str) -> list[Article]:
        """Case-insensitive match on title, content or summary."""
        ...

    @abstractmethod
    async def create(self, article: Article) -> Result[Article]:
        ...

    @abstractmethod
    async def update(self, article: Article) -> Result[Article]:
        """Replace the stored article that has the same id."""
        ...

    @abstractmethod
    async def delete(self, article_id: str) -> Result[None]:
        ...

    @abstractmethod
    async def increment_view_count(self, article_id: str) -> Result[None]:
        """Atomically add one to the view counter."""
        ...

    @abstractmethod
    async def count_by_category(self, category_id: str) -> int:
        ...


class CategoryRepository(ABC):
    """Persistence port for categories; same read/write conventions as articles."""

    @abstractmethod
    async def get_all(self, active_only: bool = False) -> list[Category]:
        """Return categories ordered by display order."""
        ...

    @abstractmethod
    async def get_by_id(self, category_id: str) -> Category | None:
        ...

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Category | None:
        ...

    @abstractmethod
    async def get_subcategories(self, parent_id: str) -> list[Category]:
        """Return the active children of *parent_id*."""
        ...

    @abstractmethod
    async def get_root_categories(self) -> list[Category]:
        """Return the active categories without a parent."""
        ...

    @abstractmethod
    async def create(self, category: Category) -> Result[Category]:
        ...

    @abstractmethod
    async def update(self, category: Category) -> Result[Category]:
        ...

    @abstractmethod
    async def delete(self, category_id: str) -> Result[None]:
        ...

    @abstractmethod
    async def exists(self, category_id: str) -> bool:
        ...

    @abstractmethod
    async def count(self) -> int:
        ...

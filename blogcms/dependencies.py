"""
FastAPI dependency providers.

The database handle lives on ``app.state`` (opened by the lifespan in
``blogcms.main``).  Repositories and handlers are cheap, stateless
wrappers and are built per request from that handle::

    @router.post("")
    async def create(
        handler: CreateArticleHandler = Depends(article_handler(CreateArticleHandler)),
    ):
        ...

Tests replace ``get_db`` through ``app.dependency_overrides``.
"""
from typing import Callable, TypeVar

from fastapi import Depends, Request
from motor.motor_asyncio import AsyncIOMotorDatabase

from blogcms.repositories import (
    ArticleRepository,
    CategoryRepository,
    MongoArticleRepository,
    MongoCategoryRepository,
)

H = TypeVar("H")


def get_db(request: Request) -> AsyncIOMotorDatabase:
    return request.app.state.database


def get_article_repository(
    db: AsyncIOMotorDatabase = Depends(get_db),
) -> ArticleRepository:
    return MongoArticleRepository(db)


def get_category_repository(
    db: AsyncIOMotorDatabase = Depends(get_db),
) -> CategoryRepository:
    return MongoCategoryRepository(db)


def article_handler(handler_cls: Callable[[ArticleRepository], H]) -> Callable[..., H]:
    """Return a dependency that builds *handler_cls* around the article repository."""

    def provide(repository: ArticleRepository = Depends(get_article_repository)) -> H:
        return handler_cls(repository)

    return provide


def category_handler(handler_cls: Callable[[CategoryRepository], H]) -> Callable[..., H]:
    """Return a dependency that builds *handler_cls* around the category repository."""

    def provide(repository: CategoryRepository = Depends(get_category_repository)) -> H:
        return handler_cls(repository)

    return provide

from blogcms.repositories.article_repository import MongoArticleRepository
from blogcms.repositories.base import ArticleRepository, CategoryRepository
from blogcms.repositories.category_repository import MongoCategoryRepository

__all__ = [
    "ArticleRepository",
    "CategoryRepository",
    "MongoArticleRepository",
    "MongoCategoryRepository",
]

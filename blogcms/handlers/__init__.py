# Handlers package.
#
# Each class coordinates exactly one use case and exposes a single
# ``handle`` coroutine that always returns a ``Result``:
#
#   articles    : create / update / delete / read / search for Article
#   categories  : create / update / delete / read / hierarchy for Category
#
# Collaborators (repository, validator function, logger) are passed to the
# constructor; ``blogcms.dependencies`` builds them per request.
from blogcms.handlers.articles import (
    CreateArticleHandler,
    DeleteArticleHandler,
    GetAllArticlesHandler,
    GetArticleByIdHandler,
    GetArticleBySlugHandler,
    GetArticlesByCategoryHandler,
    IncrementArticleViewCountHandler,
    SearchArticlesHandler,
    UpdateArticleHandler,
)
from blogcms.handlers.categories import (
    CreateCategoryHandler,
    DeleteCategoryHandler,
    GetAllCategoriesHandler,
    GetCategoryByIdHandler,
    GetCategoryBySlugHandler,
    GetRootCategoriesHandler,
    GetSubcategoriesHandler,
    UpdateCategoryHandler,
)

__all__ = [
    "CreateArticleHandler",
    "DeleteArticleHandler",
    "GetAllArticlesHandler",
    "GetArticleByIdHandler",
    "GetArticleBySlugHandler",
    "GetArticlesByCategoryHandler",
    "IncrementArticleViewCountHandler",
    "SearchArticlesHandler",
    "UpdateArticleHandler",
    "CreateCategoryHandler",
    "DeleteCategoryHandler",
    "GetAllCategoriesHandler",
    "GetCategoryByIdHandler",
    "GetCategoryBySlugHandler",
    "GetRootCategoriesHandler",
    "GetSubcategoriesHandler",
    "UpdateCategoryHandler",
]

from fastapi import APIRouter, Depends, Query

from blogcms.dependencies import article_handler
from blogcms.handlers import (
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
from blogcms.models import Article
from blogcms.routers import unwrap
from blogcms.schemas import ArticleResponse, ArticleWrite

router = APIRouter(prefix="/api/v1/articles", tags=["articles"])


def _to_response(article: Article) -> ArticleResponse:
    return ArticleResponse.model_validate(article.model_dump())


@router.get("", response_model=list[ArticleResponse])
async def list_articles(
    published_only: bool = Query(False),
    category_id: str | None = Query(None),
    handler: GetAllArticlesHandler = Depends(article_handler(GetAllArticlesHandler)),
):
    articles = unwrap(await handler.handle(published_only, category_id))
    return [_to_response(a) for a in articles]


@router.get("/search", response_model=list[ArticleResponse])
async def search_articles(
    q: str = Query(""),
    handler: SearchArticlesHandler = Depends(article_handler(SearchArticlesHandler)),
):
    return [_to_response(a) for a in unwrap(await handler.handle(q))]


@router.get("/by-slug/{slug}", response_model=ArticleResponse)
async def get_article_by_slug(
    slug: str,
    handler: GetArticleBySlugHandler = Depends(article_handler(GetArticleBySlugHandler)),
):
    return _to_response(unwrap(await handler.handle(slug)))


@router.get("/by-category/{category_id}", response_model=list[ArticleResponse])
async def get_articles_by_category(
    category_id: str,
    handler: GetArticlesByCategoryHandler = Depends(article_handler(GetArticlesByCategoryHandler)),
):
    return [_to_response(a) for a in unwrap(await handler.handle(category_id))]


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: str,
    handler: GetArticleByIdHandler = Depends(article_handler(GetArticleByIdHandler)),
):
    return _to_response(unwrap(await handler.handle(article_id)))


@router.post("", status_code=201, response_model=ArticleResponse)
async def create_article(
    data: ArticleWrite,
    handler: CreateArticleHandler = Depends(article_handler(CreateArticleHandler)),
):
    article = Article(**data.model_dump())
    return _to_response(unwrap(await handler.handle(article)))


@router.put("/{article_id}", response_model=ArticleResponse)
async def update_article(
    article_id: str,
    data: ArticleWrite,
    get_handler: GetArticleByIdHandler = Depends(article_handler(GetArticleByIdHandler)),
    handler: UpdateArticleHandler = Depends(article_handler(UpdateArticleHandler)),
):
    # Edit the stored article so fields the form does not carry
    # (created_at, view_count) survive the full replace.
    existing = unwrap(await get_handler.handle(article_id))
    article = existing.model_copy(update=data.model_dump())
    return _to_response(unwrap(await handler.handle(article)))


@router.delete("/{article_id}", status_code=204)
async def delete_article(
    article_id: str,
    handler: DeleteArticleHandler = Depends(article_handler(DeleteArticleHandler)),
):
    unwrap(await handler.handle(article_id))


@router.post("/{article_id}/views", status_code=204)
async def record_view(
    article_id: str,
    handler: IncrementArticleViewCountHandler = Depends(
        article_handler(IncrementArticleViewCountHandler)
    ),
):
    unwrap(await handler.handle(article_id))

from fastapi import APIRouter, Depends, Query

from blogcms.dependencies import category_handler
from blogcms.handlers import (
    CreateCategoryHandler,
    DeleteCategoryHandler,
    GetAllCategoriesHandler,
    GetCategoryByIdHandler,
    GetCategoryBySlugHandler,
    GetRootCategoriesHandler,
    GetSubcategoriesHandler,
    UpdateCategoryHandler,
)
from blogcms.models import Category
from blogcms.routers import unwrap
from blogcms.schemas import CategoryResponse, CategoryWrite

router = APIRouter(prefix="/api/v1/categories", tags=["categories"])


def _to_response(category: Category) -> CategoryResponse:
    return CategoryResponse.model_validate(category.model_dump())


@router.get("", response_model=list[CategoryResponse])
async def list_categories(
    active_only: bool = Query(False),
    handler: GetAllCategoriesHandler = Depends(category_handler(GetAllCategoriesHandler)),
):
    return [_to_response(c) for c in unwrap(await handler.handle(active_only))]


@router.get("/roots", response_model=list[CategoryResponse])
async def list_root_categories(
    handler: GetRootCategoriesHandler = Depends(category_handler(GetRootCategoriesHandler)),
):
    return [_to_response(c) for c in unwrap(await handler.handle())]


@router.get("/by-slug/{slug}", response_model=CategoryResponse)
async def get_category_by_slug(
    slug: str,
    handler: GetCategoryBySlugHandler = Depends(category_handler(GetCategoryBySlugHandler)),
):
    return _to_response(unwrap(await handler.handle(slug)))


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: str,
    handler: GetCategoryByIdHandler = Depends(category_handler(GetCategoryByIdHandler)),
):
    return _to_response(unwrap(await handler.handle(category_id)))


@router.get("/{category_id}/subcategories", response_model=list[CategoryResponse])
async def list_subcategories(
    category_id: str,
    handler: GetSubcategoriesHandler = Depends(category_handler(GetSubcategoriesHandler)),
):
    return [_to_response(c) for c in unwrap(await handler.handle(category_id))]


@router.post("", status_code=201, response_model=CategoryResponse)
async def create_category(
    data: CategoryWrite,
    handler: CreateCategoryHandler = Depends(category_handler(CreateCategoryHandler)),
):
    category = Category(**data.model_dump())
    return _to_response(unwrap(await handler.handle(category)))


@router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: str,
    data: CategoryWrite,
    get_handler: GetCategoryByIdHandler = Depends(category_handler(GetCategoryByIdHandler)),
    handler: UpdateCategoryHandler = Depends(category_handler(UpdateCategoryHandler)),
):
    existing = unwrap(await get_handler.handle(category_id))
    category = existing.model_copy(update=data.model_dump())
    return _to_response(unwrap(await handler.handle(category)))


@router.delete("/{category_id}", status_code=204)
async def delete_category(
    category_id: str,
    handler: DeleteCategoryHandler = Depends(category_handler(DeleteCategoryHandler)),
):
    unwrap(await handler.handle(category_id))

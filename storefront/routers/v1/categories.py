"""Category CRUD router."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.pagination import PaginationParams
from storefront.core.response import DataResponse, ListResponse, paginated
from storefront.core.tenancy import get_client_id
from storefront.db.base import get_db
from storefront.schemas.category import CategoryCreate, CategoryOut, CategoryUpdate
from storefront.services.catalog import CategoryService

router = APIRouter(prefix="/categories", tags=["Categories"])


def _svc(
    session: AsyncSession = Depends(get_db),
    client_id: str = Depends(get_client_id),
) -> CategoryService:
    return CategoryService(session, client_id)


@router.get("", response_model=ListResponse[CategoryOut])
async def list_categories(
    pagination: PaginationParams = Depends(),
    svc: CategoryService = Depends(_svc),
):
    items, total = await svc.list(pagination)
    return paginated(
        [CategoryOut.model_validate(c) for c in items],
        total, pagination.page, pagination.limit,
    )


@router.post("", response_model=DataResponse[CategoryOut], status_code=status.HTTP_201_CREATED)
async def create_category(body: CategoryCreate, svc: CategoryService = Depends(_svc)):
    category = await svc.create(body)
    return {"data": CategoryOut.model_validate(category)}


@router.get("/{category_id}", response_model=DataResponse[CategoryOut])
async def get_category(category_id: str, svc: CategoryService = Depends(_svc)):
    return {"data": CategoryOut.model_validate(await svc.get(category_id))}


@router.put("/{category_id}", response_model=DataResponse[CategoryOut])
async def update_category(
    category_id: str,
    body: CategoryUpdate,
    svc: CategoryService = Depends(_svc),
):
    category = await svc.update(category_id, body)
    return {"data": CategoryOut.model_validate(category)}


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(category_id: str, svc: CategoryService = Depends(_svc)):
    await svc.delete(category_id)

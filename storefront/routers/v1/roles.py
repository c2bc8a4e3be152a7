"""Role CRUD router."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.pagination import PaginationParams
from storefront.core.response import DataResponse, ListResponse, paginated
from storefront.core.tenancy import get_client_id
from storefront.db.base import get_db
from storefront.schemas.role import RoleCreate, RoleOut, RoleUpdate
from storefront.services.catalog import RoleService

router = APIRouter(prefix="/roles", tags=["Roles"])


def _svc(
    session: AsyncSession = Depends(get_db),
    client_id: str = Depends(get_client_id),
) -> RoleService:
    return RoleService(session, client_id)


@router.get("", response_model=ListResponse[RoleOut])
async def list_roles(
    include_deleted: bool = Query(default=False, alias="includeDeleted"),
    pagination: PaginationParams = Depends(),
    svc: RoleService = Depends(_svc),
):
    """List roles (paginated). ?includeDeleted=true also returns soft-deleted roles."""
    items, total = await svc.list(pagination, include_deleted=include_deleted)
    return paginated(
        [RoleOut.model_validate(r) for r in items],
        total, pagination.page, pagination.limit,
    )


@router.post("", response_model=DataResponse[RoleOut], status_code=status.HTTP_201_CREATED)
async def create_role(body: RoleCreate, svc: RoleService = Depends(_svc)):
    return {"data": RoleOut.model_validate(await svc.create(body))}


@router.get("/{role_id}", response_model=DataResponse[RoleOut])
async def get_role(role_id: str, svc: RoleService = Depends(_svc)):
    return {"data": RoleOut.model_validate(await svc.get(role_id))}


@router.put("/{role_id}", response_model=DataResponse[RoleOut])
async def update_role(role_id: str, body: RoleUpdate, svc: RoleService = Depends(_svc)):
    return {"data": RoleOut.model_validate(await svc.update(role_id, body))}


@router.delete("/{role_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_role(role_id: str, svc: RoleService = Depends(_svc)):
    await svc.delete(role_id)

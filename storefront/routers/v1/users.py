"""User CRUD router."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.pagination import PaginationParams
from storefront.core.response import DataResponse, ListResponse, paginated
from storefront.core.tenancy import get_client_id
from storefront.db.base import get_db
from storefront.schemas.user import UserCreate, UserOut, UserUpdate
from storefront.services.catalog import UserService

router = APIRouter(prefix="/users", tags=["Users"])


def _svc(
    session: AsyncSession = Depends(get_db),
    client_id: str = Depends(get_client_id),
) -> UserService:
    return UserService(session, client_id)


@router.get("", response_model=ListResponse[UserOut])
async def list_users(
    pagination: PaginationParams = Depends(),
    svc: UserService = Depends(_svc),
):
    items, total = await svc.list(pagination)
    return paginated(
        [UserOut.model_validate(u) for u in items],
        total, pagination.page, pagination.limit,
    )


@router.post("", response_model=DataResponse[UserOut], status_code=status.HTTP_201_CREATED)
async def create_user(body: UserCreate, svc: UserService = Depends(_svc)):
    return {"data": UserOut.model_validate(await svc.create(body))}


@router.get("/{user_id}", response_model=DataResponse[UserOut])
async def get_user(user_id: str, svc: UserService = Depends(_svc)):
    return {"data": UserOut.model_validate(await svc.get(user_id))}


@router.put("/{user_id}", response_model=DataResponse[UserOut])
async def update_user(user_id: str, body: UserUpdate, svc: UserService = Depends(_svc)):
    return {"data": UserOut.model_validate(await svc.update(user_id, body))}


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: str, svc: UserService = Depends(_svc)):
    await svc.delete(user_id)

"""Address router — per-user listing plus CRUD by address id."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.pagination import PaginationParams
from storefront.core.response import DataResponse, ListResponse, paginated
from storefront.core.tenancy import get_client_id
from storefront.db.base import get_db
from storefront.schemas.address import AddressCreate, AddressOut, AddressUpdate
from storefront.services.catalog import AddressService

router = APIRouter(tags=["Addresses"])


def _svc(
    session: AsyncSession = Depends(get_db),
    client_id: str = Depends(get_client_id),
) -> AddressService:
    return AddressService(session, client_id)


@router.get("/users/{user_id}/addresses", response_model=ListResponse[AddressOut])
async def list_user_addresses(
    user_id: str,
    pagination: PaginationParams = Depends(),
    svc: AddressService = Depends(_svc),
):
    items, total = await svc.list_for_user(user_id, pagination)
    return paginated(
        [AddressOut.model_validate(a) for a in items],
        total, pagination.page, pagination.limit,
    )


@router.post("/addresses", response_model=DataResponse[AddressOut], status_code=status.HTTP_201_CREATED)
async def create_address(body: AddressCreate, svc: AddressService = Depends(_svc)):
    return {"data": AddressOut.model_validate(await svc.create(body))}


@router.get("/addresses/{address_id}", response_model=DataResponse[AddressOut])
async def get_address(address_id: str, svc: AddressService = Depends(_svc)):
    return {"data": AddressOut.model_validate(await svc.get(address_id))}


@router.put("/addresses/{address_id}", response_model=DataResponse[AddressOut])
async def update_address(
    address_id: str,
    body: AddressUpdate,
    svc: AddressService = Depends(_svc),
):
    return {"data": AddressOut.model_validate(await svc.update(address_id, body))}


@router.delete("/addresses/{address_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_address(address_id: str, svc: AddressService = Depends(_svc)):
    await svc.delete(address_id)

"""Seller CRUD router."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.pagination import PaginationParams
from storefront.core.response import DataResponse, ListResponse, paginated
from storefront.core.tenancy import get_client_id
from storefront.db.base import get_db
from storefront.schemas.seller import SellerCreate, SellerOut, SellerUpdate
from storefront.services.catalog import SellerService

router = APIRouter(prefix="/sellers", tags=["Sellers"])


def _svc(
    session: AsyncSession = Depends(get_db),
    client_id: str = Depends(get_client_id),
) -> SellerService:
    return SellerService(session, client_id)


@router.get("", response_model=ListResponse[SellerOut])
async def list_sellers(
    filter_status: Optional[str] = Query(default=None, alias="status", description="Filter by status"),
    pagination: PaginationParams = Depends(),
    svc: SellerService = Depends(_svc),
):
    """List sellers (paginated). Filter by ?status=PENDING|APPROVED|REJECTED|SUSPENDED."""
    items, total = await svc.list(pagination, {"status": filter_status})
    return paginated(
        [SellerOut.model_validate(s) for s in items],
        total, pagination.page, pagination.limit,
    )


@router.post("", response_model=DataResponse[SellerOut], status_code=status.HTTP_201_CREATED)
async def create_seller(body: SellerCreate, svc: SellerService = Depends(_svc)):
    return {"data": SellerOut.model_validate(await svc.create(body))}


@router.get("/{seller_id}", response_model=DataResponse[SellerOut])
async def get_seller(seller_id: str, svc: SellerService = Depends(_svc)):
    return {"data": SellerOut.model_validate(await svc.get(seller_id))}


@router.put("/{seller_id}", response_model=DataResponse[SellerOut])
async def update_seller(seller_id: str, body: SellerUpdate, svc: SellerService = Depends(_svc)):
    return {"data": SellerOut.model_validate(await svc.update(seller_id, body))}


@router.delete("/{seller_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_seller(seller_id: str, svc: SellerService = Depends(_svc)):
    await svc.delete(seller_id)

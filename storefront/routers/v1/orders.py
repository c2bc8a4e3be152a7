"""Order router — listing, creation and status updates."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.pagination import PaginationParams
from storefront.core.response import DataResponse, ListResponse, paginated
from storefront.core.tenancy import get_client_id
from storefront.db.base import get_db
from storefront.schemas.order import OrderCreate, OrderOut, OrderUpdate
from storefront.services.catalog import OrderService

router = APIRouter(prefix="/orders", tags=["Orders"])


def _svc(
    session: AsyncSession = Depends(get_db),
    client_id: str = Depends(get_client_id),
) -> OrderService:
    return OrderService(session, client_id)


@router.get("", response_model=ListResponse[OrderOut])
async def list_orders(
    filter_status: Optional[str] = Query(default=None, alias="status"),
    user_id: Optional[str] = Query(default=None, alias="userId"),
    pagination: PaginationParams = Depends(),
    svc: OrderService = Depends(_svc),
):
    """List orders, newest first unless sorted. Filter by ?status= and ?userId=."""
    items, total = await svc.list(pagination, {"status": filter_status, "user_id": user_id})
    return paginated(
        [OrderOut.model_validate(o) for o in items],
        total, pagination.page, pagination.limit,
    )


@router.post("", response_model=DataResponse[OrderOut], status_code=status.HTTP_201_CREATED)
async def create_order(body: OrderCreate, svc: OrderService = Depends(_svc)):
    return {"data": OrderOut.model_validate(await svc.create(body))}


@router.get("/{order_id}", response_model=DataResponse[OrderOut])
async def get_order(order_id: str, svc: OrderService = Depends(_svc)):
    return {"data": OrderOut.model_validate(await svc.get(order_id))}


@router.put("/{order_id}", response_model=DataResponse[OrderOut])
async def update_order_status(order_id: str, body: OrderUpdate, svc: OrderService = Depends(_svc)):
    return {"data": OrderOut.model_validate(await svc.update(order_id, body))}


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_order(order_id: str, svc: OrderService = Depends(_svc)):
    await svc.delete(order_id)

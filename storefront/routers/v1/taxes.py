"""Tax rate CRUD router."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.pagination import PaginationParams
from storefront.core.response import DataResponse, ListResponse, paginated
from storefront.core.tenancy import get_client_id
from storefront.db.base import get_db
from storefront.schemas.tax import TaxCreate, TaxOut, TaxUpdate
from storefront.services.catalog import TaxService

router = APIRouter(prefix="/taxes", tags=["Taxes"])


def _svc(
    session: AsyncSession = Depends(get_db),
    client_id: str = Depends(get_client_id),
) -> TaxService:
    return TaxService(session, client_id)


@router.get("", response_model=ListResponse[TaxOut])
async def list_taxes(
    pagination: PaginationParams = Depends(),
    svc: TaxService = Depends(_svc),
):
    items, total = await svc.list(pagination)
    return paginated(
        [TaxOut.model_validate(t) for t in items],
        total, pagination.page, pagination.limit,
    )


@router.post("", response_model=DataResponse[TaxOut], status_code=status.HTTP_201_CREATED)
async def create_tax(body: TaxCreate, svc: TaxService = Depends(_svc)):
    return {"data": TaxOut.model_validate(await svc.create(body))}


@router.get("/{tax_id}", response_model=DataResponse[TaxOut])
async def get_tax(tax_id: str, svc: TaxService = Depends(_svc)):
    return {"data": TaxOut.model_validate(await svc.get(tax_id))}


@router.put("/{tax_id}", response_model=DataResponse[TaxOut])
async def update_tax(tax_id: str, body: TaxUpdate, svc: TaxService = Depends(_svc)):
    return {"data": TaxOut.model_validate(await svc.update(tax_id, body))}


@router.delete("/{tax_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tax(tax_id: str, svc: TaxService = Depends(_svc)):
    await svc.delete(tax_id)

"""Product CRUD router — REFERENCE pattern for all v1 routers.

Pattern:
  1. Declare a router with prefix and tags
  2. Inject DB session + tenant via Depends
  3. Instantiate the service with (session, client_id)
  4. Call service methods and wrap result in response envelope
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.pagination import PaginationParams
from storefront.core.response import DataResponse, ListResponse, paginated
from storefront.core.tenancy import get_client_id
from storefront.db.base import get_db
from storefront.schemas.product import ProductCreate, ProductOut, ProductUpdate
from storefront.schemas.variant import VariantCreate, VariantOut, VariantUpdate
from storefront.services.product import ProductService
from storefront.services.variant import ProductVariantService

router = APIRouter(prefix="/products", tags=["Products"])


# ------------------------------------------------------------------
# Helper — instantiate service with session + tenant
# ------------------------------------------------------------------

def _svc(
    session: AsyncSession = Depends(get_db),
    client_id: str = Depends(get_client_id),
) -> ProductService:
    return ProductService(session, client_id)


def _variant_svc(
    session: AsyncSession = Depends(get_db),
    client_id: str = Depends(get_client_id),
) -> ProductVariantService:
    return ProductVariantService(session, client_id)


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

@router.get("", response_model=ListResponse[ProductOut])
async def list_products(
    category_id: Optional[str] = Query(default=None, alias="categoryId"),
    is_published: Optional[bool] = Query(default=None, alias="isPublished"),
    pagination: PaginationParams = Depends(),
    svc: ProductService = Depends(_svc),
):
    """List products (paginated). Sortable by id, name, price, isPublished, averageRating, createdAt."""
    items, total = await svc.list_products(
        pagination, category_id=category_id, is_published=is_published
    )
    return paginated(
        [ProductOut.model_validate(p) for p in items],
        total, pagination.page, pagination.limit,
    )


@router.post("", response_model=DataResponse[ProductOut], status_code=status.HTTP_201_CREATED)
async def create_product(body: ProductCreate, svc: ProductService = Depends(_svc)):
    product = await svc.create(body)
    return {"data": ProductOut.model_validate(product)}


@router.get("/{product_id}", response_model=DataResponse[ProductOut])
async def get_product(product_id: str, svc: ProductService = Depends(_svc)):
    product = await svc.get(product_id)
    return {"data": ProductOut.model_validate(product)}


@router.put("/{product_id}", response_model=DataResponse[ProductOut])
async def update_product(
    product_id: str,
    body: ProductUpdate,
    svc: ProductService = Depends(_svc),
):
    product = await svc.update(product_id, body)
    return {"data": ProductOut.model_validate(product)}


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: str, svc: ProductService = Depends(_svc)):
    await svc.delete(product_id)


# ------------------------------------------------------------------
# Variants (/products/{product_id}/variants)
# ------------------------------------------------------------------

@router.get("/{product_id}/variants", response_model=ListResponse[VariantOut])
async def list_variants(
    product_id: str,
    pagination: PaginationParams = Depends(),
    svc: ProductVariantService = Depends(_variant_svc),
):
    """List a product's variants (paginated). Sortable by id, sku, price, createdAt."""
    items, total = await svc.list_for_product(product_id, pagination)
    return paginated(
        [VariantOut.model_validate(v) for v in items],
        total, pagination.page, pagination.limit,
    )


@router.post(
    "/{product_id}/variants",
    response_model=DataResponse[VariantOut],
    status_code=status.HTTP_201_CREATED,
)
async def create_variant(
    product_id: str,
    body: VariantCreate,
    svc: ProductVariantService = Depends(_variant_svc),
):
    variant = await svc.create_for_product(product_id, body)
    return {"data": VariantOut.model_validate(variant)}


@router.put("/{product_id}/variants/{variant_id}", response_model=DataResponse[VariantOut])
async def update_variant(
    product_id: str,
    variant_id: str,
    body: VariantUpdate,
    svc: ProductVariantService = Depends(_variant_svc),
):
    variant = await svc.update_for_product(product_id, variant_id, body)
    return {"data": VariantOut.model_validate(variant)}


@router.delete("/{product_id}/variants/{variant_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_variant(
    product_id: str,
    variant_id: str,
    svc: ProductVariantService = Depends(_variant_svc),
):
    await svc.delete_for_product(product_id, variant_id)

"""Product variant service: SKU-level children addressed through their product."""


import logging

from storefront.core.exceptions import NotFoundError
from storefront.core.pagination import PaginationParams
from storefront.core.sorting import VariantSortField
from storefront.repositories.product import ProductRepository
from storefront.repositories.variant import ProductVariantRepository
from storefront.schemas.variant import VariantCreate, VariantUpdate
from storefront.services.base import ResourceService

logger = logging.getLogger(__name__)


class ProductVariantService(ResourceService[ProductVariantRepository]):
    repository = ProductVariantRepository
    sort_fields = VariantSortField
    entity = "Variant"
    unique_fields = ("sku",)

    def __init__(self, session, client_id: str):
        super().__init__(session, client_id)
        self._products = ProductRepository(session, client_id)

    async def list_for_product(self, product_id: str, pagination: PaginationParams):
        await self._check_product(product_id)
        return await self.list(pagination, {"product_id": product_id})

    async def create_for_product(self, product_id: str, data: VariantCreate):
        await self._check_product(product_id)
        values = data.model_dump(exclude_none=True)
        await self._ensure_unique(values)
        variant = await self._repo.create(product_id=product_id, **values)
        logger.info("Created variant %s (%s) for product %s", variant.id, variant.sku, product_id)
        return variant

    async def update_for_product(self, product_id: str, variant_id: str, data: VariantUpdate):
        await self._get_owned(product_id, variant_id)
        return await self.update(variant_id, data)

    async def delete_for_product(self, product_id: str, variant_id: str) -> None:
        await self._get_owned(product_id, variant_id)
        await self.delete(variant_id)

    async def _get_owned(self, product_id: str, variant_id: str):
        await self._check_product(product_id)
        variant = await self.get(variant_id)
        if variant.product_id != product_id:
            raise NotFoundError(self.entity, variant_id)
        return variant

    async def _check_product(self, product_id: str) -> None:
        if not await self._products.get_by_id(product_id):
            raise NotFoundError("Product", product_id)

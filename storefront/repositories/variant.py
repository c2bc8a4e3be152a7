from storefront.domain.variant import ProductVariant
from storefront.repositories.base import BaseRepository


class ProductVariantRepository(BaseRepository[ProductVariant]):
    model = ProductVariant
    default_ordering = "created_at"

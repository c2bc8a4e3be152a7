"""Product service — REFERENCE pattern for all services.

How to add a new service:
  1. Create storefront/services/my_entity.py
  2. Subclass ResourceService with repository, sort_fields and entity
  3. Add filters or extra rules on top of the shared CRUD

Rule: No SQLAlchemy / no FastAPI here. Pure Python business logic.
"""


from storefront.core.exceptions import NotFoundError
from storefront.core.pagination import PaginationParams
from storefront.core.sorting import ProductSortField
from storefront.repositories.category import CategoryRepository
from storefront.repositories.product import ProductRepository
from storefront.schemas.product import ProductCreate, ProductUpdate
from storefront.services.base import ResourceService

class ProductService(ResourceService[ProductRepository]):
    repository = ProductRepository
    sort_fields = ProductSortField
    entity = "Product"
    unique_fields = ("sku",)

    def __init__(self, session, client_id: str):
        super().__init__(session, client_id)
        self._categories = CategoryRepository(session, client_id)

    async def list_products(
        self,
        pagination: PaginationParams,
        category_id: str | None = None,
        is_published: bool | None = None,
    ):
        filters = {"category_id": category_id, "is_published": is_published}
        return await self.list(pagination, filters)

    async def create(self, data: ProductCreate):
        await self._check_category(data.category_id)
        return await super().create(data)

    async def update(self, entity_id: str, data: ProductUpdate):
        await self._check_category(data.category_id)
        return await super().update(entity_id, data)

    async def _check_category(self, category_id: str | None) -> None:
        if category_id and not await self._categories.get_by_id(category_id):
            raise NotFoundError("Category", category_id)

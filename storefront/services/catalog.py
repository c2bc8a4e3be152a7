"""Services for the smaller catalog and account resources."""


from storefront.core.exceptions import NotFoundError
from storefront.core.pagination import PaginationParams
from storefront.core.sorting import (
    AddressSortField,
    CategorySortField,
    OrderSortField,
    RoleSortField,
    SellerSortField,
    TaxSortField,
    UserSortField,
)
from storefront.repositories.address import AddressRepository
from storefront.repositories.category import CategoryRepository
from storefront.repositories.order import OrderRepository
from storefront.repositories.role import RoleRepository
from storefront.repositories.seller import SellerRepository
from storefront.repositories.tax import TaxRepository
from storefront.repositories.user import UserRepository
from storefront.schemas.address import AddressCreate
from storefront.schemas.order import OrderCreate
from storefront.services.base import ResourceService


class CategoryService(ResourceService[CategoryRepository]):
    repository = CategoryRepository
    sort_fields = CategorySortField
    entity = "Category"
    unique_fields = ("name",)


class SellerService(ResourceService[SellerRepository]):
    repository = SellerRepository
    sort_fields = SellerSortField
    entity = "Seller"
    unique_fields = ("business_name",)


class TaxService(ResourceService[TaxRepository]):
    repository = TaxRepository
    sort_fields = TaxSortField
    entity = "Tax"


class RoleService(ResourceService[RoleRepository]):
    repository = RoleRepository
    sort_fields = RoleSortField
    entity = "Role"
    unique_fields = ("name",)


class UserService(ResourceService[UserRepository]):
    repository = UserRepository
    sort_fields = UserSortField
    entity = "User"
    unique_fields = ("email",)


class _UserOwnedService(ResourceService):
    """Resources that reference a user; the user must exist in the same tenant."""

    def __init__(self, session, client_id: str):
        super().__init__(session, client_id)
        self._users = UserRepository(session, client_id)

    async def _check_user(self, user_id: str) -> None:
        if not await self._users.get_by_id(user_id):
            raise NotFoundError("User", user_id)


class OrderService(_UserOwnedService):
    repository = OrderRepository
    sort_fields = OrderSortField
    entity = "Order"

    async def create(self, data: OrderCreate):
        await self._check_user(data.user_id)
        return await super().create(data)


class AddressService(_UserOwnedService):
    repository = AddressRepository
    sort_fields = AddressSortField
    entity = "Address"

    async def list_for_user(self, user_id: str, pagination: PaginationParams):
        await self._check_user(user_id)
        return await self.list(pagination, {"user_id": user_id})

    async def create(self, data: AddressCreate):
        await self._check_user(data.user_id)
        return await super().create(data)

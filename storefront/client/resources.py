"""Admin list screens: API path, sort allow-list and columns for each resource."""

from __future__ import annotations

from dataclasses import dataclass

from storefront.client.grid import ColumnDef
from storefront.core.sorting import (
    AddressSortField,
    CategorySortField,
    OrderSortField,
    ProductSortField,
    RoleSortField,
    SellerSortField,
    SortField,
    TaxSortField,
    UserSortField,
    VariantSortField,
)


@dataclass(frozen=True)
class Resource:
    name: str
    path: str
    label: str
    sort_fields: type[SortField]
    columns: tuple[ColumnDef, ...]

    def sortable_columns(self) -> list[str]:
        return [c.field for c in self.columns if c.sortable]


PRODUCTS = Resource(
    name="products",
    path="/products",
    label="products",
    sort_fields=ProductSortField,
    columns=(
        ColumnDef("id", "ID", sortable=True),
        ColumnDef("name", "Name", sortable=True),
        ColumnDef("description", "Description"),
        ColumnDef("sku", "SKU"),
        ColumnDef("price", "Price", sortable=True),
        ColumnDef("isPublished", "Status", sortable=True),
        ColumnDef("quantity", "Quantity"),
        ColumnDef("averageRating", "Rating", sortable=True),
    ),
)

CATEGORIES = Resource(
    name="categories",
    path="/categories",
    label="categories",
    sort_fields=CategorySortField,
    columns=(
        ColumnDef("id", "ID", sortable=True),
        ColumnDef("name", "Name", sortable=True),
        ColumnDef("description", "Description"),
        ColumnDef("createdAt", "Created", sortable=True),
    ),
)

SELLERS = Resource(
    name="sellers",
    path="/sellers",
    label="sellers",
    sort_fields=SellerSortField,
    columns=(
        ColumnDef("id", "ID", sortable=True),
        ColumnDef("businessName", "Business Name", sortable=True),
        ColumnDef("status", "Status", sortable=True),
        ColumnDef("rating", "Rating", sortable=True),
        ColumnDef("totalSales", "Total Sales", sortable=True),
        ColumnDef("commissionRate", "Commission"),
    ),
)

TAXES = Resource(
    name="taxes",
    path="/taxes",
    label="taxes",
    sort_fields=TaxSortField,
    columns=(
        ColumnDef("id", "ID", sortable=True),
        ColumnDef("country", "Country", sortable=True),
        ColumnDef("state", "State", sortable=True),
        ColumnDef("rate", "Rate", sortable=True),
    ),
)

ORDERS = Resource(
    name="orders",
    path="/orders",
    label="orders",
    sort_fields=OrderSortField,
    columns=(
        ColumnDef("id", "Order ID", sortable=True),
        ColumnDef("userId", "Customer"),
        ColumnDef("status", "Status", sortable=True),
        ColumnDef("total", "Total", sortable=True),
        ColumnDef("createdAt", "Placed", sortable=True),
    ),
)

USERS = Resource(
    name="users",
    path="/users",
    label="users",
    sort_fields=UserSortField,
    columns=(
        ColumnDef("id", "ID", sortable=True),
        ColumnDef("email", "Email", sortable=True),
        ColumnDef("firstName", "First Name", sortable=True),
        ColumnDef("lastName", "Last Name", sortable=True),
        ColumnDef("telephone", "Telephone", sortable=True),
        ColumnDef("isActive", "Active"),
    ),
)

ROLES = Resource(
    name="roles",
    path="/roles",
    label="roles",
    sort_fields=RoleSortField,
    columns=(
        ColumnDef("id", "ID", sortable=True),
        ColumnDef("name", "Name", sortable=True),
        ColumnDef("description", "Description"),
        ColumnDef("createdAt", "Created", sortable=True),
    ),
)

RESOURCES: dict[str, Resource] = {
    r.name: r for r in (PRODUCTS, CATEGORIES, SELLERS, TAXES, ORDERS, USERS, ROLES)
}


def user_addresses(user_id: str) -> Resource:
    """Address list screen for one user (nested under the user's path)."""
    return Resource(
        name="addresses",
        path=f"/users/{user_id}/addresses",
        label="addresses",
        sort_fields=AddressSortField,
        columns=(
            ColumnDef("addressLine1", "Address"),
            ColumnDef("city", "City", sortable=True),
            ColumnDef("postalCode", "Postal Code", sortable=True),
            ColumnDef("country", "Country", sortable=True),
            ColumnDef("addressType", "Type"),
        ),
    )


def product_variants(product_id: str) -> Resource:
    """Variant list screen for one product."""
    return Resource(
        name="variants",
        path=f"/products/{product_id}/variants",
        label="variants",
        sort_fields=VariantSortField,
        columns=(
            ColumnDef("sku", "SKU", sortable=True),
            ColumnDef("options.color", "Color"),
            ColumnDef("options.size", "Size"),
            ColumnDef("options.material", "Material"),
            ColumnDef("price", "Price", sortable=True),
        ),
    )

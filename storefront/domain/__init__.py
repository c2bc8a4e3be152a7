"""Domain package — all ORM models are imported here so Alembic autogenerate detects them.

Folder intent:
  product.py   — REFERENCE pattern (copy when adding new entities)
  variant.py   — ProductVariant (SKU-level child of Product)
  category.py, seller.py, tax.py, order.py, user.py, role.py, address.py
  mixins.py    — Shared IdMixin, TimestampMixin, SoftDeleteMixin, TenantMixin
"""

from storefront.domain.address import Address
from storefront.domain.category import Category
from storefront.domain.order import Order
from storefront.domain.product import Product
from storefront.domain.role import Role
from storefront.domain.seller import Seller
from storefront.domain.tax import Tax
from storefront.domain.user import User
from storefront.domain.variant import ProductVariant

__all__ = [
    "Address",
    "Category",
    "Order",
    "Product",
    "ProductVariant",
    "Role",
    "Seller",
    "Tax",
    "User",
]

"""SQLAlchemy ORM model for product variants (a sellable SKU of a product)."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from sqlalchemy import JSON, ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from storefront.db.base import Base
from storefront.domain.mixins import IdMixin, SoftDeleteMixin, TenantMixin, TimestampMixin


class ProductVariant(Base, IdMixin, TenantMixin, TimestampMixin, SoftDeleteMixin):
    __tablename__ = "product_variants"

    product_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True
    )
    # Unique per tenant among live variants (enforced by ProductVariantService)
    sku: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    # {"color": ..., "material": ..., "size": ...}
    options: Mapped[Optional[Any]] = mapped_column(JSON, nullable=True)
    # None means the variant sells at the product's price
    price: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)

"""SQLAlchemy ORM model for catalog products.

This is the REFERENCE module showing the pattern for all domain models:
  - Inherit Base plus IdMixin, TenantMixin, TimestampMixin, SoftDeleteMixin
  - client_id for multi-tenancy (from TenantMixin)
  - created_at / updated_at (TimestampMixin), deleted_at (SoftDeleteMixin)
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from sqlalchemy import JSON, Boolean, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from storefront.db.base import Base
from storefront.domain.mixins import IdMixin, SoftDeleteMixin, TenantMixin, TimestampMixin


class Product(Base, IdMixin, TenantMixin, TimestampMixin, SoftDeleteMixin):
    __tablename__ = "products"

    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    # Unique per tenant among live rows (enforced by ProductService)
    sku: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    category_id: Mapped[Optional[str]] = mapped_column(
        String(36), ForeignKey("categories.id", ondelete="SET NULL"), nullable=True, index=True
    )

    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    brand: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    tags: Mapped[Optional[Any]] = mapped_column(JSON, nullable=True)
    is_published: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    average_rating: Mapped[Decimal] = mapped_column(Numeric(3, 2), default=0, nullable=False)

    # Inventory on hand; decremented by checkout, not by this API
    quantity: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

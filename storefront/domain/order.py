"""SQLAlchemy ORM model for customer orders."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from storefront.db.base import Base
from storefront.domain.mixins import IdMixin, SoftDeleteMixin, TenantMixin, TimestampMixin

ORDER_STATUSES = ("PENDING", "PROCESSING", "SHIPPED", "DELIVERED", "CANCELLED")


class Order(Base, IdMixin, TenantMixin, TimestampMixin, SoftDeleteMixin):
    __tablename__ = "orders"

    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    status: Mapped[str] = mapped_column(String(20), default="PENDING", nullable=False, index=True)
    total: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=0, nullable=False)

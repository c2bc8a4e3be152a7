"""SQLAlchemy ORM model for user addresses."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from storefront.db.base import Base
from storefront.domain.mixins import IdMixin, SoftDeleteMixin, TenantMixin, TimestampMixin


class Address(Base, IdMixin, TenantMixin, TimestampMixin, SoftDeleteMixin):
    __tablename__ = "addresses"

    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    address_line1: Mapped[str] = mapped_column(String(255), nullable=False)
    address_line2: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    city: Mapped[str] = mapped_column(String(50), nullable=False)
    postal_code: Mapped[str] = mapped_column(String(10), nullable=False)
    country: Mapped[str] = mapped_column(String(50), nullable=False)
    telephone: Mapped[Optional[str]] = mapped_column(String(15), nullable=True)
    mobile: Mapped[Optional[str]] = mapped_column(String(15), nullable=True)
    # "HOME" | "WORK" | "OTHER"
    address_type: Mapped[str] = mapped_column(String(10), default="HOME", nullable=False)

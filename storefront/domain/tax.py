"""SQLAlchemy ORM model for tax rates."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from sqlalchemy import Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from storefront.db.base import Base
from storefront.domain.mixins import IdMixin, SoftDeleteMixin, TenantMixin, TimestampMixin


class Tax(Base, IdMixin, TenantMixin, TimestampMixin, SoftDeleteMixin):
    __tablename__ = "taxes"

    country: Mapped[str] = mapped_column(String(3), nullable=False, index=True)
    state: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    # Fraction, e.g. 0.18 for 18%
    rate: Mapped[Decimal] = mapped_column(Numeric(6, 4), nullable=False)

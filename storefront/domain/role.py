"""SQLAlchemy ORM model for roles."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from storefront.db.base import Base
from storefront.domain.mixins import IdMixin, SoftDeleteMixin, TenantMixin, TimestampMixin


class Role(Base, IdMixin, TenantMixin, TimestampMixin, SoftDeleteMixin):
    __tablename__ = "roles"

    name: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

"""Reusable SQLAlchemy column mixins shared by every storefront entity."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from typing import Optional

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _uuid() -> str:
    return str(uuid.uuid4())


class IdMixin:
    """UUID string primary key."""

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)


class TimestampMixin:
    """Adds created_at and updated_at; updated_at drives the default list ordering."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_now, server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_now,
        onupdate=_now,
        server_default=func.now(),
        nullable=False,
        index=True,
    )


class SoftDeleteMixin:
    """Rows with deleted_at set are hidden from standard reads."""

    deleted_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True, default=None
    )


class TenantMixin:
    """Adds client_id column for multi-tenancy."""

    client_id: Mapped[str] = mapped_column(String(100), nullable=False, index=True)

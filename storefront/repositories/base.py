"""Generic async repository with soft-delete, pagination, and tenant isolation."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Generic, Optional, TypeVar

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.sorting import SortDirection, SortField
from storefront.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """Generic CRUD repository. All queries are filtered by client_id.

    Soft-deletes: rows with `deleted_at IS NOT NULL` are excluded from all
    standard reads. Hard-delete is intentionally never exposed.

    ``default_ordering`` names the column used (descending) when a list call
    carries no sort field; most resources show the most recently modified
    rows first.
    """

    model: type[ModelT]
    default_ordering: str = "updated_at"

    def __init__(self, session: AsyncSession, client_id: str):
        self._session = session
        self._client_id = client_id

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _base_query(self, *, include_deleted: bool = False):
        """Return a SELECT filtered by client_id, excluding soft-deleted rows unless asked."""
        q = select(self.model).where(self.model.client_id == self._client_id)
        if not include_deleted and hasattr(self.model, "deleted_at"):
            q = q.where(self.model.deleted_at.is_(None))
        return q

    def _order(self, q, sort: Optional[SortField], direction: SortDirection):
        if sort is not None:
            col = getattr(self.model, sort.column)
            q = q.order_by(col.desc() if direction == SortDirection.DESC else col.asc())
        else:
            q = q.order_by(getattr(self.model, self.default_ordering).desc())
        # Stable paging when the sort column has ties
        return q.order_by(self.model.id.desc())

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def get_by_id(self, entity_id: str) -> ModelT | None:
        result = await self._session.execute(
            self._base_query().where(self.model.id == entity_id)
        )
        return result.scalars().first()

    async def exists(self, *, exclude_id: str | None = None, **equals: Any) -> bool:
        """True when a live row matches all *equals* (optionally ignoring one id)."""
        q = self._base_query()
        for col_name, value in equals.items():
            q = q.where(getattr(self.model, col_name) == value)
        if exclude_id is not None:
            q = q.where(self.model.id != exclude_id)
        result = await self._session.execute(q.limit(1))
        return result.scalars().first() is not None

    async def list(
        self,
        *,
        offset: int = 0,
        limit: int = 10,
        sort: Optional[SortField] = None,
        direction: SortDirection = SortDirection.ASC,
        filters: dict[str, Any] | None = None,
        include_deleted: bool = False,
    ) -> tuple[list[ModelT], int]:
        """Return (items, total_count) with pagination and optional column filters."""
        q = self._base_query(include_deleted=include_deleted)

        # Apply simple equality filters
        if filters:
            for col_name, value in filters.items():
                if value is not None and hasattr(self.model, col_name):
                    q = q.where(getattr(self.model, col_name) == value)

        # Count
        count_q = select(func.count()).select_from(q.subquery())
        total = (await self._session.execute(count_q)).scalar_one()

        # Order + paginate
        q = self._order(q, sort, direction).offset(offset).limit(limit)

        items = (await self._session.execute(q)).scalars().all()
        return list(items), total

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def create(self, **kwargs: Any) -> ModelT:
        instance = self.model(client_id=self._client_id, **kwargs)
        self._session.add(instance)
        await self._session.flush()  # populate id
        await self._session.refresh(instance)
        return instance

    async def update(self, entity_id: str, **kwargs: Any) -> ModelT | None:
        kwargs.pop("id", None)
        kwargs.pop("client_id", None)
        if "updated_at" not in kwargs and hasattr(self.model, "updated_at"):
            kwargs["updated_at"] = datetime.now(timezone.utc)

        await self._session.execute(
            update(self.model)
            .where(self.model.id == entity_id)
            .where(self.model.client_id == self._client_id)
            .values(**kwargs)
            .execution_options(synchronize_session=False)
        )
        await self._session.flush()
        instance = await self.get_by_id(entity_id)
        if instance is not None:
            await self._session.refresh(instance)
        return instance

    async def soft_delete(self, entity_id: str) -> bool:
        result = await self._session.execute(
            update(self.model)
            .where(self.model.id == entity_id)
            .where(self.model.client_id == self._client_id)
            .where(self.model.deleted_at.is_(None))
            .values(deleted_at=datetime.now(timezone.utc))
            .execution_options(synchronize_session=False)
        )
        await self._session.flush()
        return result.rowcount > 0

"""Shared CRUD service behaviour for every storefront resource.

Rule: No SQLAlchemy queries / no FastAPI here. Pure Python business logic
delegating persistence to a BaseRepository subclass.
"""

from __future__ import annotations

import logging
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.exceptions import ConflictError, NotFoundError
from storefront.core.pagination import PaginationParams
from storefront.core.sorting import SortField
from storefront.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

RepoT = TypeVar("RepoT", bound=BaseRepository)


class ResourceService(Generic[RepoT]):
    """List/get/create/update/soft-delete for one resource.

    Subclasses set ``repository``, ``sort_fields`` and ``entity``, and may list
    ``unique_fields`` whose values must not repeat among a tenant's live rows.
    """

    repository: type[RepoT]
    sort_fields: type[SortField]
    entity: str
    unique_fields: tuple[str, ...] = ()

    def __init__(self, session: AsyncSession, client_id: str):
        self._repo = self.repository(session, client_id)
        self._client_id = client_id

    async def list(
        self,
        pagination: PaginationParams,
        filters: Optional[dict[str, Any]] = None,
        *,
        include_deleted: bool = False,
    ):
        sort = pagination.sort_field(self.sort_fields)
        logger.debug(
            "Listing %s for %s: page=%s limit=%s sort=%s %s",
            self.entity, self._client_id, pagination.page, pagination.limit,
            sort.value if sort else None, pagination.sort_order.value,
        )
        return await self._repo.list(
            offset=pagination.offset,
            limit=pagination.limit,
            sort=sort,
            direction=pagination.sort_order,
            filters=filters,
            include_deleted=include_deleted,
        )

    async def get(self, entity_id: str):
        instance = await self._repo.get_by_id(entity_id)
        if not instance:
            raise NotFoundError(self.entity, entity_id)
        return instance

    async def create(self, data: BaseModel):
        values = data.model_dump(exclude_none=True)
        await self._ensure_unique(values)
        return await self._repo.create(**values)

    async def update(self, entity_id: str, data: BaseModel):
        _ = await self.get(entity_id)  # raises 404 if missing
        values = data.model_dump(exclude_none=True, exclude_unset=True)
        await self._ensure_unique(values, exclude_id=entity_id)
        updated = await self._repo.update(entity_id, **values)
        return updated

    async def delete(self, entity_id: str) -> None:
        deleted = await self._repo.soft_delete(entity_id)
        if not deleted:
            raise NotFoundError(self.entity, entity_id)

    async def _ensure_unique(self, values: dict[str, Any], exclude_id: str | None = None) -> None:
        for field in self.unique_fields:
            if field in values and await self._repo.exists(
                exclude_id=exclude_id, **{field: values[field]}
            ):
                raise ConflictError(
                    f"{self.entity} with {field} '{values[field]}' already exists"
                )

"""Pagination helpers for list endpoints."""


import math
from typing import Optional

from fastapi import Query

from storefront.core.config import settings
from storefront.core.sorting import SortDirection, SortFieldT
from storefront.schemas.common import CamelModel

# Keeps (page - 1) * limit inside a signed 64-bit SQL integer
MAX_PAGE = 10**15


class PaginationParams:
    """FastAPI dependency for `?page=1&limit=10&sortBy=createdAt&sortOrder=desc`.

    ``sort_by`` is kept raw here; services resolve it against their resource's
    sort enumeration so an unknown field surfaces as ``INVALID_SORT_FIELD``.
    """

    def __init__(
        self,
        page: int = Query(
            default=1, ge=1, le=MAX_PAGE, description="Page number (1-based)",
        ),
        limit: int = Query(
            default=settings.default_page_size,
            ge=1,
            le=settings.max_page_size,
            description="Items per page",
        ),
        sort_by: Optional[str] = Query(default=None, alias="sortBy", description="Sort field"),
        sort_order: SortDirection = Query(
            default=SortDirection.ASC, alias="sortOrder", description="Sort order",
        ),
    ):
        self.page = page
        self.limit = limit
        self.sort_by = sort_by
        self.sort_order = sort_order

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def sort_field(self, fields: type[SortFieldT]) -> Optional[SortFieldT]:
        return fields.resolve(self.sort_by)


class PageMeta(CamelModel):
    total: int
    page: int
    page_size: int
    total_pages: int


def total_pages(total: int, page_size: int) -> int:
    return math.ceil(total / page_size) if page_size else 0


def page_meta(total: int, page: int, page_size: int) -> PageMeta:
    return PageMeta(
        total=total,
        page=page,
        page_size=page_size,
        total_pages=total_pages(total, page_size),
    )

"""Generic grid presentation adapter.

The adapter renders rows from column definitions and turns raw widget gestures
into the three controller callbacks. It holds no list state of its own: the
page, size and sort it consults are whatever the controller last rendered.

Grid widgets emit sort-cleared events while they set themselves up, so sort
events are dropped until :meth:`GridAdapter.grid_ready` moves the adapter from
``UNINITIALIZED`` to ``READY``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from storefront.client.query import PAGE_SIZE_OPTIONS, ListQuery
from storefront.core.pagination import total_pages
from storefront.core.sorting import SortDirection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColumnDef:
    field: str
    header_name: str = ""
    sortable: bool = False

    @property
    def title(self) -> str:
        return self.header_name or self.field

    def value(self, row: Mapping[str, Any]) -> Any:
        """Read ``row[field]``, following dotted paths such as ``inventory.quantity``."""
        current: Any = row
        for part in self.field.split("."):
            if not isinstance(current, Mapping):
                return None
            current = current.get(part)
        return current


@dataclass(frozen=True)
class SortModel:
    field: Optional[str] = None
    sort: Optional[SortDirection] = None


@dataclass
class GridView:
    headers: list[str]
    rows: list[list[Any]]
    page: int
    page_size: int
    total: int
    total_pages: int
    sort: SortModel = field(default_factory=SortModel)
    loading: bool = False


class GridPhase(str, Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"


def next_sort(current: SortModel, clicked: str) -> SortModel:
    """Header click cycle: another column -> asc, asc -> desc, desc -> unsorted."""
    if current.field != clicked or current.sort is None:
        return SortModel(clicked, SortDirection.ASC)
    if current.sort == SortDirection.ASC:
        return SortModel(clicked, SortDirection.DESC)
    return SortModel()


class GridAdapter:
    def __init__(
        self,
        columns: Sequence[ColumnDef],
        *,
        on_page_change: Callable[[int], Any],
        on_page_size_change: Callable[[int], Any],
        on_sort_changed: Callable[[SortModel], Any],
        page_size_options: Sequence[int] = PAGE_SIZE_OPTIONS,
    ):
        self.columns = list(columns)
        self.page_size_options = tuple(page_size_options)
        self.phase = GridPhase.UNINITIALIZED
        self.view: Optional[GridView] = None
        self._on_page_change = on_page_change
        self._on_page_size_change = on_page_size_change
        self._on_sort_changed = on_sort_changed
        self._by_field = {c.field: c for c in self.columns}

    @property
    def ready(self) -> bool:
        return self.phase is GridPhase.READY

    def grid_ready(self) -> None:
        self.phase = GridPhase.READY

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(
        self,
        rows: Sequence[Mapping[str, Any]],
        query: ListQuery,
        total: int,
        *,
        loading: bool = False,
    ) -> GridView:
        sort = SortModel(
            query.sort_field.value if query.sort_field is not None else None,
            query.sort_direction,
        )
        self.view = GridView(
            headers=[c.title for c in self.columns],
            rows=[[c.value(row) for c in self.columns] for row in rows],
            page=query.page,
            page_size=query.page_size,
            total=total,
            total_pages=total_pages(total, query.page_size),
            sort=sort,
            loading=loading,
        )
        return self.view

    # ------------------------------------------------------------------
    # Gestures
    # ------------------------------------------------------------------

    def sort_changed(self, model: SortModel) -> None:
        """Raw sort event from the widget."""
        if not self.ready:
            logger.debug("Ignoring sort event before grid is ready: %s", model)
            return
        if model.field is not None and model.field not in self._by_field:
            logger.warning("Invalid column ID in sort model: %s", model.field)
            return
        if model.field is None or model.sort is None:
            model = SortModel()
        self._on_sort_changed(model)

    def header_clicked(self, field: str) -> None:
        column = self._by_field.get(field)
        if column is None or not column.sortable:
            return
        current = self.view.sort if self.view else SortModel()
        self.sort_changed(next_sort(current, field))

    def page_clicked(self, page: int) -> None:
        if page < 0:
            return
        if self.view is not None and page >= max(self.view.total_pages, 1):
            return
        self._on_page_change(page)

    def next_page(self) -> None:
        if self.view is not None:
            self.page_clicked(self.view.page + 1)

    def previous_page(self) -> None:
        if self.view is not None:
            self.page_clicked(self.view.page - 1)

    def page_size_selected(self, size: int) -> None:
        if size not in self.page_size_options:
            logger.warning("Ignoring unsupported page size %s", size)
            return
        self._on_page_size_change(size)

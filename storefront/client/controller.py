"""ListView controller: paginated, sortable resource listing kept in sync with the URL.

One controller owns the list state of one mounted screen. Every mutation
updates the state, rewrites the URL with a history replace and schedules a
refetch on the running event loop. The URL therefore reflects the last
*requested* state, not the last successfully loaded one.

Loads are not cancelled when superseded. Each one takes a ticket from a
monotonically increasing counter and its outcome is applied only if no newer
load was issued meanwhile, so a slow stale response can never overwrite a
newer page.

A failed load keeps the previous rows on screen and raises exactly one error
notification; it never propagates to the caller.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Any, Optional, Protocol

from storefront.client.api import ApiError, ListResult
from storefront.client.grid import GridAdapter, GridView, SortModel
from storefront.client.location import Location
from storefront.client.notifications import NotificationCenter
from storefront.client.query import PAGE_SIZE_OPTIONS, ListQuery, UrlStateAdapter
from storefront.client.resources import Resource
from storefront.core.pagination import PageMeta
from storefront.core.sorting import SortDirection

logger = logging.getLogger(__name__)


class LoadState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERRORED = "errored"


class PageFetcher(Protocol):
    async def fetch_page(self, path: str, query: ListQuery) -> ListResult: ...


class ListViewController:
    def __init__(
        self,
        resource: Resource,
        api: PageFetcher,
        location: Location,
        notifier: NotificationCenter,
        *,
        url_prefix: str = "",
        page_size_options: tuple[int, ...] = PAGE_SIZE_OPTIONS,
    ):
        self.resource = resource
        self._api = api
        self._location = location
        self._notifier = notifier
        self._url = UrlStateAdapter(resource.sort_fields, prefix=url_prefix)

        self.query: ListQuery = self._url.parse(location.search)
        self.data: list[dict[str, Any]] = []
        self.meta: Optional[PageMeta] = None
        self.state = LoadState.IDLE

        self._issued = 0
        self._tasks: set[asyncio.Task] = set()

        self.grid = GridAdapter(
            resource.columns,
            on_page_change=self.on_page_change,
            on_page_size_change=self.on_page_size_change,
            on_sort_changed=self._grid_sort_changed,
            page_size_options=page_size_options,
        )

    @property
    def total(self) -> int:
        return self.meta.total if self.meta else 0

    @property
    def view(self) -> Optional[GridView]:
        return self.grid.view

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def mount(self) -> asyncio.Task:
        """Write the canonical state to the URL and start the first load."""
        self._sync_url()
        return self._schedule()

    def on_page_change(self, page: int) -> asyncio.Task:
        return self._apply(self.query.with_page(page))

    def on_page_size_change(self, page_size: int) -> asyncio.Task:
        return self._apply(self.query.with_page_size(page_size))

    def on_sort_change(
        self, field: Optional[str], direction: Optional[SortDirection]
    ) -> Optional[asyncio.Task]:
        """Apply a sort; ``None`` for either argument clears it (server default order)."""
        member = None
        if field is not None and direction is not None:
            member = self.resource.sort_fields.parse(field)
            if member is None:
                logger.warning("Ignoring sort on non-sortable field %r for %s", field, self.resource.name)
                return None
        return self._apply(self.query.with_sort(member, direction))

    def refresh(self) -> asyncio.Task:
        return self._schedule()

    def _grid_sort_changed(self, model: SortModel) -> None:
        self.on_sort_change(model.field, model.sort)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    async def load(self) -> None:
        self._issued += 1
        ticket = self._issued
        query = self.query
        self.state = LoadState.LOADING

        try:
            result = await self._api.fetch_page(self.resource.path, query)
        except ApiError as exc:
            if ticket != self._issued:
                logger.debug("Discarding superseded %s failure: %r", self.resource.name, exc)
                return
            logger.warning(
                "Loading %s failed (%s): %s", self.resource.name, exc.status_code, exc.message
            )
            self.state = LoadState.ERRORED
            self._notifier.show_error(f"Failed to load {self.resource.label}")
            self._render()
            return

        if ticket != self._issued:
            logger.debug(
                "Discarding superseded %s response for page %s", self.resource.name, query.page + 1
            )
            return

        self.data = list(result.data)
        self.meta = result.meta
        self.state = LoadState.LOADED
        self._render()

    async def settle(self) -> None:
        """Wait until every scheduled load has finished."""
        while True:
            pending = [t for t in self._tasks if not t.done()]
            if not pending:
                return
            await asyncio.gather(*pending)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _apply(self, query: ListQuery) -> asyncio.Task:
        self.query = query
        self._sync_url()
        return self._schedule()

    def _sync_url(self) -> None:
        self._location.replace(self._url.serialize(self.query))

    def _schedule(self) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(self.load())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        self.state = LoadState.LOADING
        self._render()
        return task

    def _render(self) -> None:
        self.grid.render(
            self.data, self.query, self.total, loading=self.state is LoadState.LOADING
        )

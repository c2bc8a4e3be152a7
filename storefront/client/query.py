"""List query state and its URL representation.

``ListQuery.page`` is 0-indexed, matching the pager widget; the URL and the
REST API are 1-indexed. ``UrlStateAdapter`` is the only place that crosses
that boundary in the URL direction, ``ListQuery.to_request_params`` in the
API direction.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Generic, Optional, Union
from urllib.parse import parse_qsl, urlencode

from storefront.core.config import settings
from storefront.core.sorting import SortDirection, SortField, SortFieldT

logger = logging.getLogger(__name__)

PAGE_SIZE_OPTIONS = tuple(settings.page_size_options)
DEFAULT_PAGE_SIZE = settings.default_page_size


@dataclass(frozen=True)
class ListQuery:
    page: int = 0
    page_size: int = DEFAULT_PAGE_SIZE
    sort_field: Optional[SortField] = None
    sort_direction: Optional[SortDirection] = None

    def __post_init__(self):
        if self.sort_field is None:
            object.__setattr__(self, "sort_direction", None)
        elif self.sort_direction is None:
            object.__setattr__(self, "sort_direction", SortDirection.ASC)

    @property
    def offset(self) -> int:
        return self.page * self.page_size

    @property
    def is_sorted(self) -> bool:
        return self.sort_field is not None

    def with_page(self, page: int) -> ListQuery:
        return replace(self, page=max(0, page))

    def with_page_size(self, page_size: int) -> ListQuery:
        # The old offset means nothing under a new size
        return replace(self, page=0, page_size=page_size)

    def with_sort(
        self, field: Optional[SortField], direction: Optional[SortDirection]
    ) -> ListQuery:
        if field is None or direction is None:
            return replace(self, sort_field=None, sort_direction=None)
        return replace(self, sort_field=field, sort_direction=direction)

    def to_request_params(self) -> dict[str, Union[str, int]]:
        """Query parameters for ``GET <resource>``; sort keys omitted when unsorted."""
        params: dict[str, Union[str, int]] = {"page": self.page + 1, "limit": self.page_size}
        if self.sort_field is not None and self.sort_direction is not None:
            params["sortBy"] = self.sort_field.value
            params["sortOrder"] = self.sort_direction.value
        return params


def _positive_int(raw: Optional[str], default: int, name: str) -> int:
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.debug("Ignoring malformed %s=%r", name, raw)
        return default
    if value < 1:
        logger.debug("Ignoring out-of-range %s=%r", name, raw)
        return default
    return value


class UrlStateAdapter(Generic[SortFieldT]):
    """Reads and writes a ListQuery as ``page``, ``size``, ``sortBy``, ``sortOrder``.

    Malformed values never raise: bad numbers fall back to the defaults and a
    ``sortBy`` outside *sort_fields* drops the sort. *prefix* namespaces the
    keys when several tables share one URL.
    """

    def __init__(
        self,
        sort_fields: type[SortFieldT],
        *,
        prefix: str = "",
        default_page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self.sort_fields = sort_fields
        self.prefix = prefix
        self.default_page_size = default_page_size

    def _key(self, name: str) -> str:
        return f"{self.prefix}{name}"

    def parse(self, query: Union[str, Mapping[str, str]]) -> ListQuery:
        if isinstance(query, str):
            params: dict[str, str] = {}
            for key, value in parse_qsl(query.lstrip("?"), keep_blank_values=True):
                params.setdefault(key, value)
        else:
            params = dict(query)

        page = _positive_int(params.get(self._key("page")), 1, "page")
        size = _positive_int(params.get(self._key("size")), self.default_page_size, "size")

        raw_field = params.get(self._key("sortBy"))
        field = self.sort_fields.parse(raw_field)
        if raw_field and field is None:
            logger.debug("Dropping unknown sortBy=%r for %s", raw_field, self.sort_fields.__name__)

        direction = None
        if field is not None:
            try:
                direction = SortDirection(params.get(self._key("sortOrder"), "asc"))
            except ValueError:
                direction = SortDirection.ASC

        return ListQuery(
            page=page - 1, page_size=size, sort_field=field, sort_direction=direction
        )

    def serialize(self, query: ListQuery) -> str:
        params = [
            (self._key("page"), str(query.page + 1)),
            (self._key("size"), str(query.page_size)),
        ]
        if query.sort_field is not None and query.sort_direction is not None:
            params.append((self._key("sortBy"), query.sort_field.value))
            params.append((self._key("sortOrder"), query.sort_direction.value))
        return urlencode(params)

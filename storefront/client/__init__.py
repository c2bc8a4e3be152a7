"""Admin client — list screens driven by the storefront REST API.

Files:
  controller.py     — ListViewController (state, URL sync, fetch/render cycle)
  query.py          — ListQuery + UrlStateAdapter (URL <-> state)
  grid.py           — GridAdapter (columns, gestures, ready lifecycle)
  api.py            — ApiClient over httpx, ApiError
  location.py       — Location protocol + MemoryLocation
  notifications.py  — NotificationCenter (toasts)
  resources.py      — per-resource path, sort allow-list and columns
"""

from storefront.client.api import ApiClient, ApiError, ListResult
from storefront.client.controller import ListViewController, LoadState
from storefront.client.grid import ColumnDef, GridAdapter, GridPhase, GridView, SortModel
from storefront.client.location import Location, MemoryLocation
from storefront.client.notifications import Notification, NotificationCenter, NotificationType
from storefront.client.query import ListQuery, UrlStateAdapter
from storefront.client.resources import RESOURCES, Resource

__all__ = [
    "ApiClient",
    "ApiError",
    "ColumnDef",
    "GridAdapter",
    "GridPhase",
    "GridView",
    "ListQuery",
    "ListResult",
    "ListViewController",
    "LoadState",
    "Location",
    "MemoryLocation",
    "Notification",
    "NotificationCenter",
    "NotificationType",
    "RESOURCES",
    "Resource",
    "SortModel",
    "UrlStateAdapter",
]

"""The browser URL as an explicit channel: read ``search``, write via ``replace``."""

from __future__ import annotations

from typing import Protocol


class Location(Protocol):
    """Minimal router surface a list screen needs."""

    @property
    def search(self) -> str: ...

    def replace(self, search: str) -> None:
        """Swap the current history entry's query string (never pushes a new entry)."""


class MemoryLocation:
    """In-process Location used by tests and headless tooling.

    ``entries`` is the history stack; ``replace`` rewrites its top so the stack
    never grows from list-state syncing.
    """

    def __init__(self, path: str = "/", search: str = ""):
        self.path = path
        self.entries: list[str] = [search.lstrip("?")]
        self.replace_count = 0

    @property
    def search(self) -> str:
        return self.entries[-1]

    @property
    def url(self) -> str:
        return f"{self.path}?{self.search}" if self.search else self.path

    def replace(self, search: str) -> None:
        self.entries[-1] = search.lstrip("?")
        self.replace_count += 1

    def push(self, search: str) -> None:
        self.entries.append(search.lstrip("?"))

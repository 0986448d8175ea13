"""Exception hierarchy for FavScout.

Fatal kinds (:class:`InputError`, :class:`StorageError` while opening the
store) stop a run; everything raised while handling a single page or favicon
is caught by the pipeline, logged and skipped.
"""
from __future__ import annotations

from typing import Optional

__all__ = [
    "FavScoutError",
    "FetchError",
    "TransportError",
    "StatusError",
    "StorageError",
    "InputError",
]


class FavScoutError(Exception):
    """Base class for all FavScout errors."""

    pass


class FetchError(FavScoutError):
    """A GET request for ``url`` did not produce a usable body."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(message)
        self.url = url


class TransportError(FetchError):
    """Connection, DNS, TLS or timeout failure."""

    def __init__(self, url: str, reason: object) -> None:
        super().__init__(url, f"transport error for {url}: {reason or type(reason).__name__}")
        self.reason = reason


class StatusError(FetchError):
    """Server answered with a non-2xx status."""

    def __init__(self, url: str, status: int) -> None:
        super().__init__(url, f"error: status code {status} for {url}")
        self.status = status


class StorageError(FavScoutError):
    """Schema creation, insert or query on the result store failed."""

    def __init__(self, message: str, link: Optional[str] = None) -> None:
        super().__init__(message)
        self.link = link


class InputError(FavScoutError):
    """Input URL list is missing or unreadable."""

    pass

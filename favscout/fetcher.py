# favscout/fetcher.py
"""
Fetcher module: plain HTTP GET of pages and favicon byte streams.

No retries and no backoff: a failed request is reported once and the caller
moves on to the next item.
"""
from __future__ import annotations

import asyncio
from typing import AsyncIterator, Optional

from aiohttp import ClientError, ClientSession, ClientTimeout

from favscout.errors import StatusError, TransportError
from favscout.logger import logger

__all__ = ["Fetcher"]


def _check_status(url: str, status: int) -> None:
    if not 200 <= status < 300:
        raise StatusError(url, status)


class Fetcher:
    """Owns one aiohttp session for the whole run and maps its failures to FavScout errors."""

    def __init__(self, timeout: float = 10.0, chunk_size: int = 64 * 1024) -> None:
        self.timeout = timeout
        self.chunk_size = chunk_size
        self.session: Optional[ClientSession] = None

    async def __aenter__(self) -> Fetcher:
        self.session = ClientSession(
            timeout=ClientTimeout(total=self.timeout),
            raise_for_status=False,
        )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    def _require_session(self) -> ClientSession:
        if not self.session:
            raise RuntimeError("Session not initialized")
        return self.session

    async def fetch_page(self, url: str) -> str:
        """
        GET *url* and return the decoded body.

        Raises TransportError on connection problems and StatusError on a
        non-2xx answer.
        """
        session = self._require_session()
        try:
            async with session.get(url) as resp:
                _check_status(url, resp.status)
                text = await resp.text(errors="replace")
        except (ClientError, asyncio.TimeoutError) as exc:
            raise TransportError(url, exc) from exc
        logger.debug("Fetched %s (%d chars)", url, len(text))
        return text

    async def iter_bytes(self, url: str) -> AsyncIterator[bytes]:
        """Stream the body of *url* in chunks, with the same error mapping as fetch_page."""
        session = self._require_session()
        try:
            async with session.get(url) as resp:
                _check_status(url, resp.status)
                async for chunk in resp.content.iter_chunked(self.chunk_size):
                    yield chunk
        except (ClientError, asyncio.TimeoutError) as exc:
            raise TransportError(url, exc) from exc

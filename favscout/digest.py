# favscout/digest.py
"""
Favicon digests: MD5 as the fast fingerprint, SHA-256 as the strong one.

Bytes are hashed as served; nothing checks that they are actually an icon.
"""
from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Iterable

from favscout.fetcher import Fetcher

__all__ = ["DigestPair", "digest_bytes", "digest_chunks", "calculate_digests"]


@dataclass(frozen=True, slots=True)
class DigestPair:
    """Lowercase hex digests of one favicon body."""

    md5: str
    sha256: str


def digest_chunks(chunks: Iterable[bytes]) -> DigestPair:
    md5 = hashlib.md5()
    sha256 = hashlib.sha256()
    for chunk in chunks:
        md5.update(chunk)
        sha256.update(chunk)
    return DigestPair(md5.hexdigest(), sha256.hexdigest())


def digest_bytes(data: bytes) -> DigestPair:
    return digest_chunks((data,))


async def _hexdigest(fetcher: Fetcher, url: str, algorithm: str) -> str:
    h = hashlib.new(algorithm)
    async for chunk in fetcher.iter_bytes(url):
        h.update(chunk)
    return h.hexdigest()


async def calculate_digests(fetcher: Fetcher, url: str, refetch: bool = True) -> DigestPair:
    """
    Download *url* and return its DigestPair.

    With ``refetch`` the favicon is requested twice, once per algorithm;
    otherwise a single response feeds both hashes. A fetch error on either
    request aborts the pair.
    """
    if refetch:
        md5 = await _hexdigest(fetcher, url, "md5")
        sha256 = await _hexdigest(fetcher, url, "sha256")
        return DigestPair(md5, sha256)

    md5_h = hashlib.md5()
    sha256_h = hashlib.sha256()
    async for chunk in fetcher.iter_bytes(url):
        md5_h.update(chunk)
        sha256_h.update(chunk)
    return DigestPair(md5_h.hexdigest(), sha256_h.hexdigest())

# favscout/links.py
"""
Favicon link extraction and resolution.

The default ``loose`` extraction scans the whole page text, so references
inside comments, scripts or plain prose are reported as well. ``html`` mode
restricts the scan to tag attribute values.
"""
from __future__ import annotations

import re
from typing import Iterable, List, Literal, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

__all__ = ["FAVICON_RE", "extract_favicon_links", "resolve_link"]

ExtractionMode = Literal["loose", "html"]

FAVICON_RE = re.compile(r'https?://[^"\s]*?/favicon\.ico|/favicon\.ico|favicon\.ico', re.IGNORECASE)

_URL_ATTRS = ("href", "src", "content")


def _dedup(matches: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(matches))


def _attribute_values(text: str) -> Iterable[str]:
    soup = BeautifulSoup(text, "html.parser")
    for tag in soup.find_all(True):
        if not isinstance(tag, Tag):
            continue
        for attr in _URL_ATTRS:
            value = tag.get(attr)
            if isinstance(value, str):
                yield value


def extract_favicon_links(text: str, mode: ExtractionMode = "loose") -> List[str]:
    """
    Return distinct favicon references found in *text*, in first-seen order.

    Matching is case-insensitive; duplicates are compared verbatim.
    """
    if mode == "loose":
        return _dedup(FAVICON_RE.findall(text))
    if mode == "html":
        return _dedup(m for value in _attribute_values(text) for m in FAVICON_RE.findall(value))
    raise ValueError(f"unknown extraction mode: {mode!r}")


def resolve_link(base_url: str, reference: str) -> Optional[str]:
    """
    Make *reference* absolute against *base_url* by plain concatenation.

    Absolute http(s) references are returned unchanged. No normalization is
    done: ``../`` and doubled slashes are kept as they are. Returns ``None``
    for an empty reference.
    """
    if not reference or not reference.strip():
        return None
    if reference.startswith(("http://", "https://")):
        return reference
    if reference.startswith("/"):
        return base_url + reference
    return base_url + "/" + reference

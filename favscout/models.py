# favscout/models.py
"""
Data models for FavScout runs.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(slots=True)
class FaviconRecord:
    """Resolved favicon URL with its digests; ``stored`` is False for a known link."""

    link: str
    md5: str
    sha256: str
    stored: bool = True


@dataclass(slots=True)
class PageResult:
    """Outcome for one target URL."""

    url: str
    favicons: List[FaviconRecord] = field(default_factory=list)
    error: Optional[str] = None
    link_errors: int = 0


@dataclass(slots=True)
class RunSummary:
    """Все результаты одного запуска."""

    pages: List[PageResult] = field(default_factory=list)

    @property
    def failed_pages(self) -> int:
        return sum(1 for p in self.pages if p.error is not None)

    @property
    def favicons(self) -> int:
        return sum(len(p.favicons) for p in self.pages)

    @property
    def stored(self) -> int:
        return sum(1 for p in self.pages for f in p.favicons if f.stored)

    @property
    def errors(self) -> int:
        return self.failed_pages + sum(p.link_errors for p in self.pages)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "pages": [asdict(p) for p in self.pages],
            "totals": {
                "pages": len(self.pages),
                "failed_pages": self.failed_pages,
                "favicons": self.favicons,
                "stored": self.stored,
                "errors": self.errors,
            },
        }

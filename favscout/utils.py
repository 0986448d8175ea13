# File: favscout/utils.py
"""favscout.utils: чтение списка целевых URL."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Union

from favscout.errors import InputError
from favscout.logger import logger

__all__: Sequence[str] = ("read_targets",)


def read_targets(path: Union[str, Path]) -> List[str]:
    """Читает файл со списком URL, возвращает непустые строки без пробелов по краям."""
    p = Path(path).expanduser()
    try:
        text = p.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise InputError(f"Input file not found: {p}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"Error reading URLs from file {p}: {exc}") from exc
    urls = [line.strip() for line in text.splitlines() if line.strip()]
    logger.debug("Loaded %d target URLs from %s", len(urls), p)
    return urls

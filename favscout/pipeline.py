# File: favscout/pipeline.py
"""favscout.pipeline: orchestration of fetch → extract → resolve → hash → store.

Every target URL is handled on its own: a failing page is logged and skipped,
a failing favicon link is logged and the next link of the same page is tried.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import List, Sequence, Union

import click

from favscout.config import FavScoutConfig
from favscout.digest import calculate_digests
from favscout.errors import FetchError, StorageError
from favscout.fetcher import Fetcher
from favscout.links import extract_favicon_links, resolve_link
from favscout.logger import logger
from favscout.models import FaviconRecord, PageResult, RunSummary
from favscout.store import ResultStore
from favscout.utils import read_targets

__all__ = ["FaviconPipeline", "run_pipeline"]


class FaviconPipeline:
    """Drives the components for a list of target URLs against an open store."""

    def __init__(self, config: FavScoutConfig, store: ResultStore, fetcher: Fetcher) -> None:
        self.config = config
        self.store = store
        self.fetcher = fetcher

    async def run(self, targets: Sequence[str]) -> RunSummary:
        """Process *targets* and return the collected results in input order."""
        if self.config.concurrency == 1:
            pages = [await self.process_target(url) for url in targets]
            return RunSummary(pages=pages)

        semaphore = asyncio.Semaphore(self.config.concurrency)

        async def _bounded(url: str) -> PageResult:
            async with semaphore:
                return await self.process_target(url)

        pages = await asyncio.gather(*(_bounded(url) for url in targets))
        return RunSummary(pages=list(pages))

    async def process_target(self, base_url: str) -> PageResult:
        result = PageResult(url=base_url)
        click.echo(f"Processing URL: {base_url}")

        try:
            html = await self.fetcher.fetch_page(base_url)
        except FetchError as exc:
            logger.error("Error fetching HTML: %s", exc)
            result.error = str(exc)
            return result

        references = extract_favicon_links(html, self.config.extraction_mode)
        if not references:
            click.echo("No favicon.ico links found.")
            return result

        for reference in references:
            record = await self._process_link(base_url, reference, result)
            if record is not None:
                result.favicons.append(record)
        return result

    async def _process_link(
        self, base_url: str, reference: str, result: PageResult
    ) -> FaviconRecord | None:
        full_url = resolve_link(base_url, reference)
        if full_url is None:
            logger.debug("Skipping empty favicon reference on %s", base_url)
            return None

        try:
            digests = await calculate_digests(
                self.fetcher, full_url, refetch=self.config.refetch_digests
            )
        except FetchError as exc:
            logger.error("Error calculating hash for %s: %s", full_url, exc)
            result.link_errors += 1
            return None
        click.echo(f"Favicon: {full_url} | MD5: {digests.md5} | SHA256: {digests.sha256}")

        record = FaviconRecord(full_url, digests.md5, digests.sha256, stored=False)
        try:
            record.stored = self.store.insert_if_absent(full_url, digests.md5, digests.sha256)
        except StorageError as exc:
            logger.error("Error saving to database for %s: %s", reference, exc)
            result.link_errors += 1
            return record
        if not record.stored:
            logger.debug("Already recorded: %s", full_url)
        return record


async def run_pipeline(config: FavScoutConfig, input_file: Union[str, Path]) -> RunSummary:
    """
    Full run: read targets, open the store, process every URL, close the store.

    InputError and StorageError from opening the store propagate to the caller;
    everything after that is handled per page.
    """
    targets: List[str] = read_targets(input_file)
    logger.info("Loaded %d target URLs", len(targets))

    with ResultStore.open(config.database) as store:
        store.ensure_schema()
        async with Fetcher(timeout=config.timeout) as fetcher:
            summary = await FaviconPipeline(config, store, fetcher).run(targets)

    logger.info(
        "Done: %d pages, %d favicons, %d new records, %d errors",
        len(summary.pages),
        summary.favicons,
        summary.stored,
        summary.errors,
    )
    return summary

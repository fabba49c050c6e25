# === FILE: seo_doctor/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import time
from typing import List

from seo_doctor.crawler.fetcher import FetchCapability, FetchError, is_ok_status
from seo_doctor.crawler.frontier import CrawlFrontier
from seo_doctor.crawler.link_extractor import extract_links
from seo_doctor.crawler.models import PageData
from seo_doctor.logger import logger
from seo_doctor.utils import is_network_target, normalize_url, origin_of

__all__ = ("Crawler",)


class Crawler:
    """Sequential same-origin breadth-first crawler over an injected fetch capability."""

    def __init__(self, fetcher: FetchCapability, *, max_pages: int = 10, delay: float = 0.05) -> None:
        if max_pages < 1:
            raise ValueError("max_pages must be >= 1")
        if delay < 0:
            raise ValueError("delay must be >= 0")
        self.fetcher = fetcher
        self.max_pages = max_pages
        self.delay = delay

    async def crawl(self, start_url: str) -> List[PageData]:
        """Fetch up to ``max_pages`` pages reachable from *start_url*, in discovery order."""
        start = normalize_url(start_url)
        if not is_network_target(start) or origin_of(start) is None:
            logger.info("Not an http(s) URL, fetching as a single page: %s", start_url)
            page = await self._fetch_page(start)
            return [PageData(start, page.content)] if page else []

        logger.info("Crawl started: %s (max %d pages)", start, self.max_pages)
        began = time.monotonic()
        frontier = CrawlFrontier(start, self.max_pages)
        results: List[PageData] = []

        while not frontier.is_exhausted():
            url = frontier.next()
            page = await self._fetch_page(url)
            if page is not None and self._already_crawled(frontier, url, page.url):
                page = None
            if page is not None:
                frontier.record_fetched()
                results.append(PageData(url, page.content))
                queued = frontier.extend(extract_links(page.content, page.url, start))
                logger.debug("%s: %d new links queued", url, queued)
            if self.delay:
                await asyncio.sleep(self.delay)

        duration = time.monotonic() - began
        logger.info(
            "Crawl finished: %d pages in %.2f s, %d left in queue",
            len(results),
            duration,
            frontier.pending,
        )
        return results

    @staticmethod
    def _already_crawled(frontier: CrawlFrontier, url: str, final_url: str) -> bool:
        """True when *url* redirected to a page this crawl already has."""
        final = normalize_url(final_url)
        if final == url or frontier.mark_visited(final):
            return False
        logger.info("Skipped %s: redirects to already crawled %s", url, final)
        return True

    async def _fetch_page(self, url: str) -> PageData | None:
        """Fetch *url*; the returned page carries the final URL for link resolution."""
        try:
            resp = await self.fetcher.fetch(url)
        except FetchError as exc:
            logger.warning("Dropped %s: %s", url, exc.reason)
            return None
        if not is_ok_status(resp.status):
            logger.warning("Dropped %s: HTTP %s", url, resp.status)
            return None
        return PageData(resp.url or url, resp.text)

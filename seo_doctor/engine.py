# File: seo_doctor/engine.py
"""seo_doctor.engine: orchestration of one audit run, from page discovery to the Report."""

from __future__ import annotations

import asyncio
from contextlib import AsyncExitStack
from typing import Dict, List, Optional

from seo_doctor.aggregator import aggregate_results
from seo_doctor.auditor import audit_page
from seo_doctor.config import AuditConfig
from seo_doctor.crawler.crawler import Crawler
from seo_doctor.crawler.fetcher import FetchCapability, Fetcher
from seo_doctor.logger import logger
from seo_doctor.models import PageAuditResult, Report
from seo_doctor.site_checks import SiteSignals, check_site
from seo_doctor.sources import load_local_pages
from seo_doctor.utils import is_network_target, normalize_url

__all__ = ["Engine", "NoPagesError"]


class NoPagesError(RuntimeError):
    """No page could be fetched or read, so there is nothing to score."""


class Engine:
    """Facade for the CLI and tests: resolve pages, audit them, aggregate."""

    def __init__(self, config: AuditConfig, fetcher: Optional[FetchCapability] = None) -> None:
        """*fetcher* replaces the aiohttp fetcher, mostly for tests."""
        self.config = config
        self._fetcher = fetcher

    @property
    def target(self) -> str:
        if self.is_network:
            return normalize_url(self.config.target)
        return self.config.target

    @property
    def is_network(self) -> bool:
        return is_network_target(self.config.target)

    def start_audit(self) -> Report:
        """Run the audit to completion in a fresh event loop."""
        return asyncio.run(self.run())

    async def run(self) -> Report:
        logger.info("Audit started: %s", self.target)
        async with AsyncExitStack() as stack:
            fetcher = self._fetcher
            if fetcher is None and self.is_network:
                fetcher = await stack.enter_async_context(
                    Fetcher(self.config.timeout, self.config.user_agent)
                )

            pages = await self.collect_pages(fetcher)
            if not pages:
                raise NoPagesError(f"No pages to audit for {self.config.target}")

            results = self.audit_pages(pages)

            site: Optional[SiteSignals] = None
            if self.is_network and fetcher is not None:
                site = await check_site(self.target, fetcher)

        report = aggregate_results(results, target=self.target, site=site)
        logger.info("Audit finished: %d page(s), score %d", report.pages, report.score)
        return report

    async def collect_pages(self, fetcher: Optional[FetchCapability]) -> Dict[str, str]:
        """Resolve the page set into an ordered ``identifier -> html`` mapping."""
        if not self.is_network:
            return load_local_pages(self.config.target)
        if fetcher is None:
            raise RuntimeError("network target requires a fetcher")

        max_pages = self.config.max_pages if self.config.crawl else 1
        crawler = Crawler(fetcher, max_pages=max_pages, delay=self.config.crawl_delay)
        pages = await crawler.crawl(self.target)
        return {page.url: page.content for page in pages}

    @staticmethod
    def audit_pages(pages: Dict[str, str]) -> List[PageAuditResult]:
        """Audit every page in mapping order."""
        return [audit_page(url, html) for url, html in pages.items()]

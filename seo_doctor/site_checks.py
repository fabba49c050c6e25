# File: seo_doctor/site_checks.py
"""seo_doctor.site_checks: robots.txt and sitemap.xml reachability probes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple
from urllib.parse import urlsplit, urlunsplit

from seo_doctor.crawler.fetcher import FetchCapability, FetchError, is_ok_status
from seo_doctor.logger import logger

__all__ = ["SiteSignals", "check_site", "site_root"]

ROBOTS_PATH = "/robots.txt"
SITEMAP_PATH = "/sitemap.xml"


@dataclass(frozen=True, slots=True)
class SiteSignals:
    """Binary reachability of robots.txt and sitemap.xml plus probe evidence."""

    robots_ok: int
    sitemap_ok: int
    robots_evidence: Dict[str, Any] = field(default_factory=dict)
    sitemap_evidence: Dict[str, Any] = field(default_factory=dict)


def site_root(url: str) -> str:
    """``scheme://host[:port]`` of *url*."""
    parts = urlsplit(url)
    return urlunsplit((parts.scheme.lower(), parts.netloc.lower(), "", "", ""))


async def _probe(fetcher: FetchCapability, url: str) -> Tuple[int, Dict[str, Any]]:
    try:
        resp = await fetcher.fetch(url)
    except FetchError as exc:
        logger.info("%s unreachable: %s", url, exc.reason)
        return 0, {"url": url, "error": exc.reason}
    ok = 1 if is_ok_status(resp.status) else 0
    logger.info("%s -> HTTP %s", url, resp.status)
    return ok, {"url": url, "status": resp.status}


async def check_site(origin: str, fetcher: FetchCapability) -> SiteSignals:
    """Probe ``/robots.txt`` and ``/sitemap.xml`` under *origin*, one request each."""
    root = site_root(origin)
    robots_ok, robots_evidence = await _probe(fetcher, root + ROBOTS_PATH)
    sitemap_ok, sitemap_evidence = await _probe(fetcher, root + SITEMAP_PATH)
    return SiteSignals(
        robots_ok=robots_ok,
        sitemap_ok=sitemap_ok,
        robots_evidence=robots_evidence,
        sitemap_evidence=sitemap_evidence,
    )

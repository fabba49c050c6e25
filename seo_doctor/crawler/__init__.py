# seo_doctor/crawler/__init__.py
"""Same-origin crawling: fetch capability, link extraction and the frontier."""
from seo_doctor.crawler.crawler import Crawler
from seo_doctor.crawler.fetcher import Fetcher, FetchError, FetchResponse
from seo_doctor.crawler.frontier import CrawlFrontier
from seo_doctor.crawler.models import PageData

__all__ = ["Crawler", "CrawlFrontier", "Fetcher", "FetchError", "FetchResponse", "PageData"]

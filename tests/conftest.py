# File: tests/conftest.py
from __future__ import annotations

from typing import Dict, List, Tuple, Union

import pytest

from seo_doctor.config import AuditConfig
from seo_doctor.crawler.fetcher import FetchError, FetchResponse
from seo_doctor.logger import init_logging

Answer = Union[Tuple[int, str], Tuple[int, str, str], FetchError]


class FakeFetcher:
    """In-memory fetch capability: URL -> (status, text[, final_url]) or FetchError.

    Unknown URLs give 404.  A final URL stands for a followed redirect.
    """

    def __init__(self, answers: Dict[str, Answer] | None = None) -> None:
        self.answers: Dict[str, Answer] = dict(answers or {})
        self.calls: List[str] = []

    async def fetch(self, url: str) -> FetchResponse:
        self.calls.append(url)
        answer = self.answers.get(url, (404, "not found"))
        if isinstance(answer, FetchError):
            raise answer
        status, text, *final = answer
        return FetchResponse(status=status, text=text, url=final[0] if final else url)


def page(
    *,
    title: str | None = "A" * 30,
    description: str | None = "D" * 100,
    lang: str | None = "en",
    viewport: bool = True,
    canonical: str | None = "https://example.com/page",
    head_extra: str = "",
    body: str = '<h1>Heading</h1><img src="a.png" alt="a">',
) -> str:
    """Build an HTML document; every part can be switched off."""
    head = []
    if title is not None:
        head.append(f"<title>{title}</title>")
    if description is not None:
        head.append(f'<meta name="description" content="{description}">')
    if viewport:
        head.append('<meta name="viewport" content="width=device-width, initial-scale=1">')
    if canonical is not None:
        head.append(f'<link rel="canonical" href="{canonical}">')
    head.append(head_extra)
    lang_attr = f' lang="{lang}"' if lang is not None else ""
    return f"<!DOCTYPE html><html{lang_attr}><head>{''.join(head)}</head><body>{body}</body></html>"


PERFECT_HEAD = (
    '<meta property="og:title" content="T">'
    '<meta property="og:description" content="D">'
    '<meta property="og:image" content="https://example.com/og.jpg">'
    '<meta name="twitter:card" content="summary_large_image">'
    '<script type="application/ld+json">{"@type": "Organization", "name": "Example"}</script>'
)


@pytest.fixture()
def minimal_page() -> str:
    return page()


@pytest.fixture()
def perfect_page() -> str:
    return page(head_extra=PERFECT_HEAD)


@pytest.fixture()
def basic_config() -> AuditConfig:
    """Network config with no politeness delay."""
    return AuditConfig(target="https://example.com/", crawl=True, max_pages=10, timeout=2.0, crawl_delay=0)


@pytest.fixture(autouse=True)
def _reset_logging():
    """CLI runs bind the log handler to their own streams; rebind after each test."""
    yield
    init_logging()

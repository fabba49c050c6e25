# seo_doctor/crawler/link_extractor.py
"""
Link extraction for the crawler.
"""
from __future__ import annotations

from typing import List
from urllib.parse import urljoin

from seo_doctor.parser.html_parser import HtmlDocument
from seo_doctor.utils import normalize_url, same_origin

_SKIPPED_PREFIXES = ("#", "mailto:", "tel:", "javascript:")


def extract_links(html: str, page_url: str, origin_url: str) -> List[str]:
    """
    Return normalized absolute links of *html* that share *origin_url*'s origin.

    Relative hrefs resolve against *page_url*.  Empty, fragment-only,
    mailto:, tel: and javascript: hrefs are ignored.  Order follows the
    document, duplicates are removed.
    """
    links: List[str] = []
    seen = set()
    for href in HtmlDocument(html).hrefs():
        raw = href.strip()
        if not raw or raw.lower().startswith(_SKIPPED_PREFIXES):
            continue
        try:
            absolute = normalize_url(urljoin(page_url, raw))
        except ValueError:
            continue
        if absolute in seen or not same_origin(absolute, origin_url):
            continue
        seen.add(absolute)
        links.append(absolute)
    return links

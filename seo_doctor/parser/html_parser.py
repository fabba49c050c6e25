# === FILE: seo_doctor/parser/html_parser.py ===
"""HTML query helpers for SEO Doctor.

:class:`HtmlDocument` wraps a BeautifulSoup tree and exposes exactly the
lookups the page rules and the crawler need:

* meta tags by ``name`` or ``property`` and ``<link rel>`` hrefs;
* the head ``<title>`` and the root ``lang`` attribute;
* tag lists (headings, images, anchors) and raw script payloads;
* ``href`` values of every anchor, in document order.

Parsing always goes through the stdlib-backed ``html.parser`` builder so the
result does not depend on which optional parsers are installed.
"""
from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any, List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from seo_doctor.models import Invalid, Parsed, ParsedOrInvalid

__all__: Sequence[str] = ("HtmlDocument", "parse_json_payload")

JSON_LD_TYPE = "application/ld+json"


def parse_json_payload(raw: str) -> ParsedOrInvalid[Any]:
    """Parse one script payload as JSON.

    Malformed or pathologically nested payloads come back as :class:`Invalid`.
    """
    try:
        return Parsed(json.loads(raw))
    except json.JSONDecodeError as exc:
        return Invalid(raw=raw, reason=exc.msg)
    except (ValueError, RecursionError) as exc:
        return Invalid(raw=raw, reason=str(exc) or type(exc).__name__)


class HtmlDocument:
    """Read-only view over one parsed HTML page."""

    def __init__(self, html: str) -> None:
        self.soup = BeautifulSoup(html or "", "html.parser")

    # Attribute lookups -----------------------------------------------------
    def title(self) -> str:
        """Trimmed text of the document ``<title>`` or ``""``."""
        head = self.soup.head
        tag = head.find("title") if head is not None else self.soup.find("title")
        return tag.get_text().strip() if isinstance(tag, Tag) else ""

    def meta(self, name: str) -> Optional[str]:
        """``content`` of the first ``<meta name=...>``."""
        return self._attr("meta", {"name": name}, "content")

    def meta_property(self, prop: str) -> Optional[str]:
        """``content`` of the first ``<meta property=...>``."""
        return self._attr("meta", {"property": prop}, "content")

    def link_href(self, rel: str) -> Optional[str]:
        """``href`` of the first ``<link>`` whose ``rel`` contains *rel*."""
        for tag in self.soup.find_all("link", href=True):
            rels = tag.get("rel") or []
            if isinstance(rels, str):
                rels = rels.split()
            if rel in (r.lower() for r in rels):
                return str(tag["href"])
        return None

    def html_lang(self) -> Optional[str]:
        tag = self.soup.find("html")
        if not isinstance(tag, Tag):
            return None
        value = tag.get("lang")
        return str(value) if value is not None else None

    # Element lists ---------------------------------------------------------
    def count(self, tag_name: str) -> int:
        return len(self.soup.find_all(tag_name))

    def images(self) -> List[Tag]:
        return [t for t in self.soup.find_all("img") if isinstance(t, Tag)]

    def anchors(self) -> List[Tag]:
        """Anchors carrying an ``href`` attribute."""
        return [t for t in self.soup.find_all("a", href=True) if isinstance(t, Tag)]

    def hrefs(self) -> List[str]:
        return [str(a["href"]) for a in self.anchors()]

    def script_payloads(self, script_type: str = JSON_LD_TYPE) -> List[str]:
        """Raw text of every ``<script type=...>`` block of the given type."""
        payloads: List[str] = []
        for tag in self.soup.find_all("script"):
            declared = str(tag.get("type") or "").split(";", 1)[0].strip().lower()
            if declared == script_type:
                payloads.append(str(tag.string) if tag.string is not None else tag.get_text())
        return payloads

    def json_ld(self) -> List[ParsedOrInvalid[Any]]:
        return [parse_json_payload(raw) for raw in self.script_payloads(JSON_LD_TYPE)]

    # Internals -------------------------------------------------------------
    def _attr(self, tag_name: str, attrs: dict[str, str], attr: str) -> Optional[str]:
        tag = self.soup.find(tag_name, attrs=attrs)
        if not isinstance(tag, Tag):
            return None
        value = tag.get(attr)
        return str(value) if value is not None else None

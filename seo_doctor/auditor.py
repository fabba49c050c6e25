# File: seo_doctor/auditor.py
"""seo_doctor.auditor: the per-page rule battery.

Every rule looks at one aspect of a page, returns its sub-score in ``[0, 1]``
and appends at most one :class:`~seo_doctor.models.Finding`.  The sub-scores
are then folded into the five weighted categories.  Auditing is pure: the
same HTML and URL always give an equal :class:`PageAuditResult`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from seo_doctor.models import Finding, Invalid, PageAuditResult, Parsed, Severity
from seo_doctor.parser.html_parser import HtmlDocument
from seo_doctor.utils import resolve_url, round_half_up

__all__ = ["score_range", "audit_page", "TITLE_RANGE", "DESCRIPTION_RANGE"]

TITLE_RANGE = (15, 60)
DESCRIPTION_RANGE = (70, 160)


def score_range(low: int, high: int, value: int) -> float:
    """Map *value* into ``[0, 1]``: 1 inside ``[low, high]``, linear falloff outside."""
    if value < low:
        return max(0.0, value / low)
    if value > high:
        return max(0.0, 2 - value / high)
    return 1.0


@dataclass
class _Findings:
    """Collects findings for one page."""

    page: str
    items: List[Finding] = field(default_factory=list)

    def add(
        self,
        id: str,
        title: str,
        severity: Severity,
        score: float,
        suggestion: Optional[str] = None,
        evidence: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.items.append(
            Finding(
                id=id,
                title=title,
                severity=severity,
                score=score,
                page=self.page,
                suggestion=suggestion,
                evidence=evidence,
            )
        )


# --------------------------------------------------------------------------- #
# Metadata                                                                    #
# --------------------------------------------------------------------------- #


def _check_title(doc: HtmlDocument, out: _Findings) -> float:
    title = doc.title()
    if not title:
        out.add(
            "title-missing",
            "Missing <title>",
            "error",
            0,
            "Add a concise, keyword-focused <title> (15-60 chars).",
        )
        return 0.0
    score = score_range(*TITLE_RANGE, len(title))
    if score < 1:
        out.add(
            "title-length",
            f"Title length suboptimal ({len(title)})",
            "warn",
            score,
            "Aim for 15-60 characters with the primary keyword near the front.",
            {"title": title},
        )
    return score


def _check_description(doc: HtmlDocument, out: _Findings) -> float:
    desc = (doc.meta("description") or "").strip()
    if not desc:
        out.add(
            "meta-description-missing",
            "Missing meta description",
            "warn",
            0,
            'Add <meta name="description" content="..."> (70-160 chars).',
        )
        return 0.0
    score = score_range(*DESCRIPTION_RANGE, len(desc))
    if score < 1:
        out.add(
            "meta-description-length",
            f"Meta description length suboptimal ({len(desc)})",
            "info",
            score,
            "Target 70-160 characters that summarize user intent.",
            {"meta_description": desc},
        )
    return score


_OG_SCORES = {3: 1.0, 2: 0.6, 1: 0.3, 0: 0.0}


def _check_social(doc: HtmlDocument, out: _Findings) -> tuple[float, float]:
    """Open Graph score and the binary Twitter card score."""
    og_image = doc.meta_property("og:image")
    present = [doc.meta_property("og:title"), doc.meta_property("og:description"), og_image]
    og_score = _OG_SCORES[sum(1 for value in present if value)]
    if not og_image:
        out.add(
            "og-image-missing",
            "Missing og:image",
            "warn",
            0,
            'Add <meta property="og:image" content="https://.../og.jpg"> (about 1200x630).',
        )
    twitter_card = doc.meta("twitter:card")
    if not twitter_card:
        out.add(
            "twitter-card-missing",
            "Missing Twitter card",
            "info",
            0,
            'Add <meta name="twitter:card" content="summary_large_image">.',
        )
    return og_score, 1.0 if twitter_card else 0.0


# --------------------------------------------------------------------------- #
# Discoverability                                                             #
# --------------------------------------------------------------------------- #


def _check_canonical(doc: HtmlDocument, page_url: str, out: _Findings) -> float:
    canonical = doc.link_href("canonical")
    if not canonical:
        out.add(
            "canonical-missing",
            "Missing canonical",
            "warn",
            0,
            f'Add <link rel="canonical" href="{page_url}">.',
        )
        return 0.0

    resolved = resolve_url(canonical, page_url)
    if isinstance(resolved, Invalid):
        out.add(
            "canonical-invalid",
            "Canonical is invalid URL",
            "warn",
            0.2,
            "Use a valid absolute canonical URL.",
            {"canonical": canonical, "reason": resolved.reason},
        )
        return 0.2

    if resolved.value != canonical:
        out.add(
            "canonical-relative",
            "Canonical is relative",
            "info",
            0.9,
            f"Prefer absolute canonical URLs ({resolved.value}).",
            {"canonical": canonical, "resolved": resolved.value},
        )
    return 1.0


def _check_noindex(doc: HtmlDocument, out: _Findings) -> float:
    robots = (doc.meta("robots") or "").lower()
    if "noindex" not in robots:
        return 1.0
    out.add(
        "noindex-set",
        "noindex is set",
        "error",
        0,
        "Remove noindex for pages that should appear in search.",
        {"robots": robots},
    )
    return 0.0


# --------------------------------------------------------------------------- #
# I18n & mobile                                                               #
# --------------------------------------------------------------------------- #


def _check_i18n_mobile(doc: HtmlDocument, out: _Findings) -> float:
    lang = doc.html_lang()
    viewport = doc.meta("viewport")
    if not lang:
        out.add(
            "html-lang-missing",
            "Missing <html lang>",
            "warn",
            0,
            'Add <html lang="en"> (or appropriate).',
        )
    if not viewport:
        out.add(
            "viewport-missing",
            "Missing meta viewport",
            "warn",
            0,
            'Add <meta name="viewport" content="width=device-width, initial-scale=1">.',
        )
    return (0.5 if lang else 0.0) + (0.5 if viewport else 0.0)


# --------------------------------------------------------------------------- #
# Semantics                                                                   #
# --------------------------------------------------------------------------- #


def _check_headings(doc: HtmlDocument, out: _Findings) -> float:
    h1_count = doc.count("h1")
    if h1_count == 0:
        out.add(
            "h1-missing",
            "Missing <h1>",
            "warn",
            0,
            "Add a single, descriptive <h1> per page.",
        )
        return 0.0
    if h1_count > 1:
        out.add(
            "h1-multiple",
            "Multiple <h1> elements",
            "info",
            0.4,
            "Use one <h1>; demote extras to <h2>/<h3>.",
            {"count": h1_count},
        )
        return 0.4
    return 1.0


def _check_image_alts(doc: HtmlDocument, out: _Findings) -> float:
    images = doc.images()
    if not images:
        return 1.0
    missing = sum(1 for img in images if img.get("alt") is None)
    ratio = missing / len(images)
    if ratio <= 0.10:
        score = 1.0
    elif ratio <= 0.30:
        score = 0.6
    else:
        score = 0.2
    if missing:
        out.add(
            "img-alt-missing",
            f"Images missing alt ({int(round_half_up(ratio * 100))}%)",
            "warn" if ratio > 0.30 else "info",
            score,
            f'Add alt to ~{missing}/{len(images)} images (decorative images may use alt="").',
            {"missing": missing, "total": len(images)},
        )
    return score


def _check_anchor_text(doc: HtmlDocument, out: _Findings) -> float:
    anchors = doc.anchors()
    if not anchors:
        return 1.0
    empty = sum(1 for a in anchors if not a.get_text().strip())
    if empty == 0:
        return 1.0
    score = 0.7 if empty <= 2 else 0.4
    out.add(
        "empty-anchors",
        f"Links with empty text ({empty})",
        "info",
        score,
        'Use descriptive, non-empty anchor text; avoid "click here".',
        {"count": empty, "total": len(anchors)},
    )
    return score


# --------------------------------------------------------------------------- #
# Structured data                                                             #
# --------------------------------------------------------------------------- #


def _check_structured_data(doc: HtmlDocument, out: _Findings) -> float:
    blocks = [block.value for block in doc.json_ld() if isinstance(block, Parsed)]
    if blocks:
        return 1.0
    out.add(
        "jsonld-missing",
        "No JSON-LD structured data",
        "info",
        0,
        "Add JSON-LD (Organization, WebSite; Article/BlogPosting for posts).",
    )
    return 0.0


# --------------------------------------------------------------------------- #
# Public entry point                                                          #
# --------------------------------------------------------------------------- #


def _avg(*scores: float) -> float:
    return min(1.0, sum(scores) / len(scores))


def audit_page(page_url: str, html: str) -> PageAuditResult:
    """Run every rule against one page and fold the sub-scores into categories."""
    doc = HtmlDocument(html)
    out = _Findings(page=page_url)

    title_score = _check_title(doc, out)
    desc_score = _check_description(doc, out)
    og_score, twitter_score = _check_social(doc, out)
    canonical_score = _check_canonical(doc, page_url, out)
    i18n_score = _check_i18n_mobile(doc, out)
    heading_score = _check_headings(doc, out)
    img_alt_score = _check_image_alts(doc, out)
    anchor_score = _check_anchor_text(doc, out)
    noindex_score = _check_noindex(doc, out)
    structured_score = _check_structured_data(doc, out)

    return PageAuditResult(
        url=page_url,
        category_scores={
            "metadata": _avg(title_score, desc_score, og_score, twitter_score),
            "discoverability": _avg(canonical_score, noindex_score),
            "semantics": _avg(heading_score, img_alt_score, anchor_score),
            "i18n_mobile": min(1.0, i18n_score),
            "structured": structured_score,
        },
        findings=tuple(out.items),
    )

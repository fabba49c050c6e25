# File: seo_doctor/aggregator.py
"""seo_doctor.aggregator: merges per-page results and site signals into one Report."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from seo_doctor import __version__
from seo_doctor.models import (
    CATEGORIES,
    CATEGORY_WEIGHTS,
    CategoryId,
    CategoryScore,
    Finding,
    PageAuditResult,
    Report,
)
from seo_doctor.site_checks import SiteSignals
from seo_doctor.utils import round_half_up

__all__ = ["aggregate_results", "average_categories", "blend_discoverability", "overall_score"]

#: share of the page-level discoverability score once site signals are blended in
PAGE_SHARE = 0.7
SITE_SHARE = 0.3


def average_categories(results: Sequence[PageAuditResult]) -> Dict[CategoryId, float]:
    """Unweighted mean of every category over all pages."""
    if not results:
        raise ValueError("cannot average zero pages")
    return {
        cat: sum(r.category_scores[cat] for r in results) / len(results)
        for cat in CATEGORIES
    }


def blend_discoverability(page_avg: float, site: SiteSignals) -> float:
    site_score = (site.robots_ok + site.sitemap_ok) / 2
    return min(1.0, page_avg * PAGE_SHARE + site_score * SITE_SHARE)


def overall_score(categories: Dict[CategoryId, CategoryScore]) -> int:
    """``round(100 * sum(score * weight))`` over the fixed category weights."""
    total = sum(categories[cat].score * categories[cat].weight for cat in CATEGORIES)
    return int(round_half_up(100 * total))


def _site_findings(site: SiteSignals, page: str) -> List[Finding]:
    findings: List[Finding] = []
    if not site.robots_ok:
        findings.append(
            Finding(
                id="robots-missing",
                title="robots.txt missing or unreachable",
                severity="warn",
                score=0,
                page=page,
                suggestion="Provide /robots.txt (allow crawling of indexable content).",
                evidence=dict(site.robots_evidence),
            )
        )
    if not site.sitemap_ok:
        findings.append(
            Finding(
                id="sitemap-missing",
                title="sitemap.xml missing or unreachable",
                severity="info",
                score=0,
                page=page,
                suggestion="Provide /sitemap.xml referencing key URLs.",
                evidence=dict(site.sitemap_evidence),
            )
        )
    return findings


def aggregate_results(
    results: Sequence[PageAuditResult],
    target: str,
    site: Optional[SiteSignals] = None,
    version: str = __version__,
) -> Report:
    """Build the Report.

    *site* is given only for network targets; local targets keep the purely
    page-level discoverability score.
    """
    averages = average_categories(results)
    findings: List[Finding] = [f for r in results for f in r.findings]

    if site is not None:
        averages["discoverability"] = blend_discoverability(averages["discoverability"], site)
        findings.extend(_site_findings(site, results[0].url))

    categories = {
        cat: CategoryScore(score=round_half_up(averages[cat], 2), weight=CATEGORY_WEIGHTS[cat])
        for cat in CATEGORIES
    }
    return Report(
        version=version,
        target=target,
        pages=len(results),
        score=overall_score(categories),
        categories=categories,
        findings=tuple(findings),
    )

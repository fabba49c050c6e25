# File: tests/test_aggregator.py
from __future__ import annotations

import json
import math

import pytest

from seo_doctor import __version__
from seo_doctor.aggregator import aggregate_results, average_categories, blend_discoverability
from seo_doctor.models import CATEGORIES, CATEGORY_WEIGHTS, Finding, PageAuditResult
from seo_doctor.site_checks import SiteSignals


def result(url: str = "https://example.com/", findings=(), **scores: float) -> PageAuditResult:
    category_scores = {cat: 1.0 for cat in CATEGORIES}
    category_scores.update(scores)
    return PageAuditResult(url=url, category_scores=category_scores, findings=tuple(findings))


def finding(finding_id: str, page: str) -> Finding:
    return Finding(id=finding_id, title=finding_id, severity="info", score=0, page=page)


def test_weights_sum_to_one():
    assert math.fsum(CATEGORY_WEIGHTS.values()) == 1.0
    assert set(CATEGORY_WEIGHTS) == set(CATEGORIES)


def test_all_perfect_scores_exactly_100():
    report = aggregate_results([result(), result("https://example.com/a")], target="https://example.com/")
    assert report.score == 100
    assert all(report.categories[cat].score == 1 for cat in CATEGORIES)


def test_category_averages_count_every_page_equally():
    averages = average_categories(
        [result(semantics=0.2), result(semantics=0.6), result(semantics=1.0, structured=0.0)]
    )
    assert averages["semantics"] == pytest.approx(0.6)
    assert averages["structured"] == pytest.approx(2 / 3)


def test_zero_pages_is_an_error():
    with pytest.raises(ValueError):
        aggregate_results([], target="https://example.com/")


def test_unreachable_site_files_lower_discoverability():
    site = SiteSignals(
        robots_ok=0,
        sitemap_ok=0,
        robots_evidence={"url": "https://example.com/robots.txt", "status": 404},
        sitemap_evidence={"url": "https://example.com/sitemap.xml", "error": "timeout"},
    )
    pages = [
        result("https://example.com/", findings=[finding("a", "https://example.com/")]),
        result("https://example.com/b", findings=[finding("b", "https://example.com/b")]),
    ]
    report = aggregate_results(pages, target="https://example.com/", site=site)

    assert report.categories["discoverability"].score == pytest.approx(0.7)
    assert report.categories["discoverability"].score < 1
    assert [f.id for f in report.findings] == ["a", "b", "robots-missing", "sitemap-missing"]
    robots, sitemap = report.findings[-2:]
    assert robots.severity == "warn"
    assert sitemap.severity == "info"
    assert robots.page == sitemap.page == "https://example.com/"
    assert robots.evidence == {"url": "https://example.com/robots.txt", "status": 404}
    assert report.score < 100


def test_half_reachable_site():
    assert blend_discoverability(1.0, SiteSignals(robots_ok=1, sitemap_ok=0)) == pytest.approx(0.85)
    assert blend_discoverability(1.0, SiteSignals(robots_ok=1, sitemap_ok=1)) == 1.0
    assert blend_discoverability(0.5, SiteSignals(robots_ok=1, sitemap_ok=1)) == pytest.approx(0.65)


def test_reachable_site_adds_no_findings():
    report = aggregate_results([result()], target="https://example.com/", site=SiteSignals(1, 1))
    assert report.findings == ()
    assert report.score == 100


def test_local_targets_are_not_blended():
    report = aggregate_results([result(discoverability=0.5)], target="site/")
    assert report.categories["discoverability"].score == 0.5
    assert report.findings == ()


def test_category_scores_are_rounded_to_two_decimals():
    report = aggregate_results([result(semantics=2 / 3, metadata=0.125)], target="x.html")
    assert report.categories["semantics"].score == 0.67
    assert report.categories["metadata"].score == 0.13
    # 25*0.67 + 25*0.13 + 25 + 15 + 10 = 70 -> 70
    assert report.score == 70


def test_report_json_shape():
    page = result(findings=[finding("jsonld-missing", "https://example.com/")], structured=0.0)
    report = aggregate_results([page], target="https://example.com/")
    data = json.loads(report.json())

    assert list(data) == ["version", "target", "pages", "score", "categories", "findings"]
    assert data["version"] == __version__
    assert data["pages"] == 1
    assert data["score"] == 90
    assert isinstance(data["score"], int)
    assert list(data["categories"]) == list(CATEGORIES)
    assert data["categories"]["structured"] == {"score": 0.0, "weight": 0.1}
    assert data["findings"] == [
        {"id": "jsonld-missing", "title": "jsonld-missing", "severity": "info", "score": 0, "page": "https://example.com/"}
    ]

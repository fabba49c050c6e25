# seo_doctor/report/text_report.py
"""
Console summary of a Report.
"""
from __future__ import annotations

from typing import Dict, List, Mapping

from seo_doctor.models import CATEGORIES, CategoryId, Report
from seo_doctor.utils import round_half_up

SHORT_LABELS: Mapping[CategoryId, str] = {
    "discoverability": "Discoverability",
    "semantics": "On-page semantics",
    "metadata": "Metadata",
    "i18n_mobile": "I18n & Mobile",
    "structured": "Structured data",
}

_MARKS = {"error": "x", "warn": "!", "info": "."}


def category_rows(report: Report, labels: Mapping[CategoryId, str] = SHORT_LABELS) -> List[Dict[str, object]]:
    """Per-category ``weighted/max`` points, in report order."""
    rows: List[Dict[str, object]] = []
    for cat in CATEGORIES:
        entry = report.categories[cat]
        rows.append(
            {
                "id": cat,
                "label": labels[cat],
                "weighted": int(round_half_up(entry.score * entry.weight * 100)),
                "max": int(round_half_up(entry.weight * 100)),
            }
        )
    return rows


def render_text(report: Report, limit: int = 10) -> str:
    """Banner, score, category lines and the first *limit* findings."""
    plural = "s" if report.pages > 1 else ""
    lines = [
        f"SEO Doctor  v{report.version}",
        f"Target: {report.target}  ({report.pages} page{plural})",
        "",
        f"Score  {report.score}/100",
        "",
    ]
    lines.extend(f"{row['label']}  {row['weighted']}/{row['max']}" for row in category_rows(report))
    lines.append("")
    for f in report.findings[:limit]:
        suffix = f" -> {f.suggestion}" if f.suggestion else ""
        lines.append(f" {_MARKS[f.severity]} {f.title}{suffix}")
    return "\n".join(lines)

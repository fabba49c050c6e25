# File: seo_doctor/report/markdown_report.py
"""seo_doctor.report.markdown_report: Markdown report rendered with Jinja2."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Union

from jinja2 import Environment, PackageLoader

from seo_doctor.models import CategoryId, Report
from seo_doctor.report.text_report import category_rows

LONG_LABELS: Mapping[CategoryId, str] = {
    "discoverability": "Discoverability",
    "semantics": "On-page semantics",
    "metadata": "Metadata",
    "i18n_mobile": "Internationalization & Mobile",
    "structured": "Structured data",
}

_env = Environment(
    loader=PackageLoader("seo_doctor", "templates"),
    autoescape=False,
    keep_trailing_newline=True,
)


def markdown_text(report: Report) -> str:
    """Render the Markdown body of *report*."""
    template = _env.get_template("report.md.j2")
    context: dict[str, Any] = {
        "target": report.target,
        "pages": report.pages,
        "score": report.score,
        "categories": category_rows(report, LONG_LABELS),
        "findings": report.findings,
    }
    return template.render(**context)


def render_markdown(report: Report, output_path: Union[Path, str]) -> Path:
    """Render the Markdown report and save it at *output_path*.

    Args:
        report: the audit Report.
        output_path: path of the Markdown file.

    Returns:
        Path of the written file.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(markdown_text(report), encoding="utf-8")
    return output_path

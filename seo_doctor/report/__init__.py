# File: seo_doctor/report/__init__.py
"""seo_doctor.report: report writers (JSON, Markdown, console text) used by the CLI."""

from seo_doctor.report.json_report import render_json
from seo_doctor.report.markdown_report import render_markdown
from seo_doctor.report.text_report import render_text

__all__ = ["render_json", "render_markdown", "render_text"]

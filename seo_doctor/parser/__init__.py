# seo_doctor/parser/__init__.py
"""HTML query capability used by the auditor and the crawler."""
from seo_doctor.parser.html_parser import HtmlDocument, parse_json_payload

__all__ = ["HtmlDocument", "parse_json_payload"]

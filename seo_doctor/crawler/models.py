# seo_doctor/crawler/models.py
"""
Data models for the SEO Doctor crawler.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PageData:
    """URL of a successfully fetched page and its HTML."""

    url: str
    content: str

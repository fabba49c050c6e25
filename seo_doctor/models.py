# File: seo_doctor/models.py
"""seo_doctor.models: findings, per-page results, the final report and parse results."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Generic, Literal, Mapping, Optional, Tuple, TypeVar, Union

__all__ = (
    "CATEGORY_WEIGHTS",
    "CATEGORIES",
    "CategoryId",
    "Severity",
    "Finding",
    "PageAuditResult",
    "CategoryScore",
    "Report",
    "Parsed",
    "Invalid",
    "ParsedOrInvalid",
)

CategoryId = Literal["discoverability", "semantics", "metadata", "i18n_mobile", "structured"]
Severity = Literal["info", "warn", "error"]

#: report order of the categories
CATEGORIES: Tuple[CategoryId, ...] = (
    "discoverability",
    "semantics",
    "metadata",
    "i18n_mobile",
    "structured",
)

CATEGORY_WEIGHTS: Mapping[CategoryId, float] = MappingProxyType(
    {
        "discoverability": 0.25,
        "semantics": 0.25,
        "metadata": 0.25,
        "i18n_mobile": 0.15,
        "structured": 0.10,
    }
)

if math.fsum(CATEGORY_WEIGHTS.values()) != 1.0:  # pragma: no cover
    raise RuntimeError("category weights must sum to 1.0")


@dataclass(frozen=True, slots=True)
class Finding:
    """One detected issue or observation about a page."""

    id: str
    title: str
    severity: Severity
    score: float
    page: str
    suggestion: Optional[str] = None
    evidence: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "severity": self.severity,
            "score": self.score,
        }
        if self.suggestion is not None:
            data["suggestion"] = self.suggestion
        if self.evidence is not None:
            data["evidence"] = dict(self.evidence)
        data["page"] = self.page
        return data


@dataclass(frozen=True, slots=True)
class PageAuditResult:
    """Category sub-scores and findings of a single audited page."""

    url: str
    category_scores: Mapping[CategoryId, float]
    findings: Tuple[Finding, ...] = ()


@dataclass(frozen=True, slots=True)
class CategoryScore:
    score: float
    weight: float


@dataclass(frozen=True, slots=True)
class Report:
    """Final audit report: overall score, per-category scores and all findings."""

    version: str
    target: str
    pages: int
    score: int
    categories: Mapping[CategoryId, CategoryScore]
    findings: Tuple[Finding, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "target": self.target,
            "pages": self.pages,
            "score": self.score,
            "categories": {
                cat: {"score": self.categories[cat].score, "weight": self.categories[cat].weight}
                for cat in CATEGORIES
            },
            "findings": [f.to_dict() for f in self.findings],
        }


# --------------------------------------------------------------------------- #
# Best-effort parse results                                                   #
# --------------------------------------------------------------------------- #

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Parsed(Generic[T]):
    """Successfully parsed value."""

    value: T


@dataclass(frozen=True, slots=True)
class Invalid:
    """Input that could not be parsed, with the reason."""

    raw: str
    reason: str


ParsedOrInvalid = Union[Parsed[T], Invalid]

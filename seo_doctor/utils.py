# File: seo_doctor/utils.py
"""seo_doctor.utils: URL helpers shared by the crawler, the auditor and the engine."""

from __future__ import annotations

import re
from typing import Optional, Sequence, Tuple
from urllib.parse import urljoin, urlsplit, urlunsplit

from seo_doctor.models import Invalid, Parsed, ParsedOrInvalid

__all__: Sequence[str] = (
    "is_network_target",
    "normalize_url",
    "origin_of",
    "same_origin",
    "resolve_url",
    "round_half_up",
)

_NETWORK_RE = re.compile(r"^https?://", re.IGNORECASE)
_DEFAULT_PORTS = {"http": 80, "https": 443}

Origin = Tuple[str, str, Optional[int]]


def is_network_target(target: str) -> bool:
    """True for http(s) URLs, False for local paths and anything else."""
    return bool(_NETWORK_RE.match(target))


def normalize_url(url: str) -> str:
    """Lower-cases scheme and host, drops a default port and the fragment,
    turns an empty path into ``/``.

    Values that do not parse as absolute http(s) URLs are returned unchanged.
    """
    try:
        parts = urlsplit(url.strip())
        port = parts.port
    except ValueError:
        return url
    scheme = parts.scheme.lower()
    if scheme not in _DEFAULT_PORTS or not parts.netloc:
        return url
    netloc = parts.netloc.lower()
    if port is not None and port == _DEFAULT_PORTS[scheme]:
        netloc = netloc.rsplit(":", 1)[0]
    return urlunsplit((scheme, netloc, parts.path or "/", parts.query, ""))


def origin_of(url: str) -> Optional[Origin]:
    """Return ``(scheme, host, port)`` with the default port filled in, or None."""
    try:
        parts = urlsplit(url)
        port = parts.port
    except ValueError:
        return None
    scheme = parts.scheme.lower()
    if scheme not in _DEFAULT_PORTS or not parts.hostname:
        return None
    return scheme, parts.hostname.lower(), port or _DEFAULT_PORTS[scheme]


def same_origin(url: str, other: str) -> bool:
    origin = origin_of(url)
    return origin is not None and origin == origin_of(other)


def resolve_url(raw: str, base: str) -> ParsedOrInvalid[str]:
    """Resolve *raw* against *base* into an absolute URL.

    Returns :class:`Parsed` with the resolved URL, or :class:`Invalid` when
    the result has no scheme, or is an http(s) URL without a host.
    Opaque schemes such as ``mailto:`` or ``urn:`` resolve to themselves.
    """
    try:
        resolved = urljoin(base, raw.strip())
        parts = urlsplit(resolved)
        _ = parts.port  # malformed ports only surface here
    except ValueError as exc:
        return Invalid(raw=raw, reason=str(exc))
    if not parts.scheme:
        return Invalid(raw=raw, reason="no scheme after resolution")
    if parts.scheme.lower() in _DEFAULT_PORTS and not parts.netloc:
        return Invalid(raw=raw, reason="no host after resolution")
    if any(ch.isspace() for ch in parts.netloc):
        return Invalid(raw=raw, reason="whitespace in host")
    return Parsed(resolved)


def round_half_up(value: float, digits: int = 0) -> float:
    """Round like ``Math.round``: halves go up, no banker's rounding."""
    factor = 10 ** digits
    return int(value * factor + 0.5) / factor if value >= 0 else -round_half_up(-value, digits)

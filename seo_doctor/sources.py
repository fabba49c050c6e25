# File: seo_doctor/sources.py
"""seo_doctor.sources: turns a local HTML file or directory into audit input."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Union

from seo_doctor.logger import logger

__all__ = ["HTML_SUFFIXES", "load_local_pages", "file_identifier"]

HTML_SUFFIXES = (".html", ".htm")


def file_identifier(path: Path) -> str:
    """URL-like identifier used as the page name of a local file."""
    return path.resolve().as_uri()


def load_local_pages(path: Union[str, Path]) -> Dict[str, str]:
    """Read one HTML file, or every ``.html``/``.htm`` file directly inside a directory.

    Returns an insertion-ordered mapping ``file://... -> html`` (directory
    entries sorted by name).  Raises FileNotFoundError when *path* does not exist.
    """
    p = Path(path).expanduser()
    if not p.exists():
        logger.error("Path not found: %s", p)
        raise FileNotFoundError(f"Path not found: {p}")

    if p.is_file():
        files = [p]
    else:
        files = sorted(
            (f for f in p.iterdir() if f.is_file() and f.suffix.lower() in HTML_SUFFIXES),
            key=lambda f: f.name,
        )

    pages: Dict[str, str] = {}
    for f in files:
        pages[file_identifier(f)] = f.read_text(encoding="utf-8", errors="replace")
    logger.debug("Loaded %d local page(s) from %s", len(pages), p)
    return pages

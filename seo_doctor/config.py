# === FILE: seo_doctor/config.py ===
"""
Loading and validation of the SEO Doctor run configuration.
Pydantic describes the schema; YAML and JSON files are both accepted.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from seo_doctor import __version__


class AuditConfig(BaseModel):
    """Settings for a single audit run."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    target: str = Field(..., min_length=1, description="URL, HTML file or directory of HTML files.")
    crawl: bool = Field(False, description="Follow same-origin links from the target URL.")
    max_pages: int = Field(10, ge=1, description="Page budget for the crawl.")
    timeout: float = Field(15.0, gt=0, description="Per-request timeout (seconds).")
    user_agent: str = Field(f"seo-doctor/{__version__}", min_length=1, description="User-Agent header.")
    crawl_delay: float = Field(0.05, ge=0, description="Pause between crawl fetches (seconds).")
    fail_under: int = Field(0, ge=0, le=100, description="Minimum passing score.")

    @field_validator("target", mode="before")
    def _strip_target(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def _read_file(path: Union[str, Path]) -> Dict[str, Any]:
    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: Union[str, Path, None] = None, **overrides: Any) -> AuditConfig:
    """
    Read a YAML or JSON file and return a validated AuditConfig.

    Keyword overrides that are not None win over values from the file;
    with ``path=None`` the overrides alone are validated.
    """
    data: Dict[str, Any] = _read_file(path) if path is not None else {}
    data.update({key: value for key, value in overrides.items() if value is not None})
    return AuditConfig(**data)


__all__ = ["AuditConfig", "load_config"]

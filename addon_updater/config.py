from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .errors import ConfigError

DEFAULT_ADDON = "ElvUI"
DEFAULT_TOC_SUFFIX = "_Mainline"
DEFAULT_VERSION_PATTERN = r"current version of \S+ is\s*v?([0-9]+(?:\.[0-9]+)?)"
FEED_KINDS = {"json", "html"}


@dataclass(frozen=True)
class UpdaterConfig:
    raw: Dict[str, Any]

    @property
    def page(self) -> str:
        return str(self.raw.get("page") or "")

    @property
    def directories(self) -> List[str]:
        return [str(d) for d in (self.raw.get("directories") or [])]

    @property
    def addon(self) -> str:
        return str(self.raw.get("addon") or DEFAULT_ADDON)

    @property
    def feed(self) -> str:
        return str(self.raw.get("feed") or "json").lower()

    @property
    def toc_suffix(self) -> str:
        value = self.raw.get("toc_suffix")
        return DEFAULT_TOC_SUFFIX if value is None else str(value)

    @property
    def install_path(self) -> Optional[str]:
        value = self.raw.get("install_path")
        return str(value) if value else None

    @property
    def timeout(self) -> float:
        return float(self.raw.get("timeout") or 5)

    @property
    def download_timeout(self) -> float:
        return float(self.raw.get("download_timeout") or 60)

    @property
    def version_pattern(self) -> str:
        return str(self.raw.get("version_pattern") or DEFAULT_VERSION_PATTERN)

    @property
    def download_url_template(self) -> Optional[str]:
        value = self.raw.get("download_url_template")
        return str(value) if value else None


def _detect_format(path: Path) -> str:
    ext = path.suffix.lower().lstrip(".")
    if ext in {"yaml", "yml"}:
        return "yaml"
    # Default to JSON for unknown extensions.
    return "json"


def _validate(raw: Dict[str, Any], path: str) -> None:
    if not raw.get("page"):
        raise ConfigError(f"'page' missing in config {path}")

    dirs = raw.get("directories")
    if not isinstance(dirs, list) or not dirs:
        raise ConfigError(f"'directories' must be a non-empty list in config {path}")
    if not all(isinstance(d, str) and d.strip() for d in dirs):
        raise ConfigError(f"'directories' entries must be non-empty strings in config {path}")

    feed = str(raw.get("feed") or "json").lower()
    if feed not in FEED_KINDS:
        raise ConfigError(f"unknown feed kind {feed!r} (expected one of {sorted(FEED_KINDS)})")

    for key in ("timeout", "download_timeout"):
        value = raw.get(key)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
            raise ConfigError(f"'{key}' must be a positive number of seconds in config {path}")

    pattern = raw.get("version_pattern")
    if pattern is not None:
        try:
            groups = re.compile(str(pattern)).groups
        except re.error as e:
            raise ConfigError(f"invalid 'version_pattern' in config {path}: {e}") from e
        if groups < 1:
            raise ConfigError(f"'version_pattern' needs a group capturing the version in config {path}")


def load_updater_config(path: str) -> UpdaterConfig:
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"cannot read file {path}") from e

    try:
        if _detect_format(p) == "yaml":
            data = yaml.safe_load(text) or {}
        else:
            data = json.loads(text)
    except (ValueError, yaml.YAMLError) as e:
        raise ConfigError(f"cannot unmarshal config {path}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"config {path} must contain a mapping/object")

    # Keys are case-insensitive: the historical config.json uses "Page" / "Directories".
    raw = {str(k).lower(): v for k, v in data.items()}
    _validate(raw, path)
    return UpdaterConfig(raw=raw)

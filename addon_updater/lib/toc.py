from __future__ import annotations

import logging
from pathlib import Path

from ..errors import VersionError
from .version import parse_version

logger = logging.getLogger(__name__)

VERSION_PREFIX = "## Version: "


def toc_path(addons_dir: Path, addon: str, toc_suffix: str = "") -> Path:
    """Locate the addon's .toc, preferring the flavor-suffixed file."""

    folder = Path(addons_dir) / addon
    preferred = folder / f"{addon}{toc_suffix}.toc"
    if toc_suffix and not preferred.exists():
        plain = folder / f"{addon}.toc"
        if plain.exists():
            return plain
    return preferred


def read_local_version(addons_dir: Path, addon: str, toc_suffix: str = "") -> float:
    path = toc_path(addons_dir, addon, toc_suffix)
    try:
        # utf-8-sig: some toc files ship with a BOM.
        with path.open("r", encoding="utf-8-sig", errors="replace", newline="") as f:
            for line in f:
                if line.startswith(VERSION_PREFIX):
                    raw = line[len(VERSION_PREFIX):].strip()
                    logger.debug("Found version line %r in %s", raw, path)
                    return parse_version(raw)
    except OSError as e:
        raise VersionError(f"cannot open file {path}") from e

    raise VersionError(f"local version not found at {path}")

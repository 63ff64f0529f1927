from __future__ import annotations

from ..errors import VersionError


def parse_version(raw: str) -> float:
    """Parse a version string such as "13.01" into a float."""

    text = str(raw).strip()
    try:
        return float(text)
    except ValueError as e:
        raise VersionError(f"cannot parse version number {text!r}") from e


def needs_update(local: float, remote: float) -> bool:
    return remote > local


def fmt_version(v: float) -> str:
    return f"{v:.2f}"

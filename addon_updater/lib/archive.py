from __future__ import annotations

import io
import logging
import shutil
import zipfile
from pathlib import Path, PurePosixPath
from typing import Sequence

import requests

from ..errors import ArchiveError
from .http import http_get

logger = logging.getLogger(__name__)


def download_archive(session: requests.Session, url: str, *, timeout: float) -> bytes:
    """Download the whole archive into memory."""

    try:
        r = http_get(session, url, timeout=timeout)
    except requests.RequestException as e:
        raise ArchiveError(f"cannot download file url {url}") from e

    data = r.content
    logger.debug("Downloaded %d bytes from %s", len(data), url)
    return data


def resolve_inside(root: Path, rel: str) -> Path:
    """Join a relative path onto root, refusing anything that could escape it.

    The check is lexical so symlinks under root are never followed.
    """

    rp = PurePosixPath(rel.replace("\\", "/"))
    if rp.is_absolute() or (rp.parts and rp.parts[0].endswith(":")):
        raise ArchiveError(f"Absolute paths are not allowed: {rel}")
    if ".." in rp.parts:
        raise ArchiveError(f"Path escapes addons directory: {rel}")
    if not rp.parts:
        raise ArchiveError(f"Path resolves to the addons directory itself: {rel}")
    return Path(root).joinpath(*rp.parts)


def open_archive(data: bytes) -> zipfile.ZipFile:
    try:
        return zipfile.ZipFile(io.BytesIO(data))
    except zipfile.BadZipFile as e:
        raise ArchiveError("cannot create zip reader") from e


def remove_directories(addons_dir: Path, directories: Sequence[str]) -> None:
    for name in directories:
        target = resolve_inside(addons_dir, name)
        if target.is_symlink():
            # Drop the link only, never the tree it points at.
            logger.info("Removing link %s", target)
            try:
                target.unlink()
            except OSError as e:
                raise ArchiveError(f"cannot remove link {target}") from e
            continue
        if not target.exists():
            continue
        logger.info("Removing %s", target)
        try:
            if target.is_dir():
                shutil.rmtree(target)
            else:
                target.unlink()
        except OSError as e:
            raise ArchiveError(f"cannot remove directory {target}") from e


def extract_members(zf: zipfile.ZipFile, addons_dir: Path) -> int:
    """Extract every member under addons_dir. Returns the number of files written."""

    written = 0
    for info in zf.infolist():
        out = resolve_inside(addons_dir, info.filename)
        if info.is_dir():
            try:
                out.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise ArchiveError(f"cannot create directory {out}") from e
            continue

        try:
            out.parent.mkdir(parents=True, exist_ok=True)
            with zf.open(info) as src, out.open("wb") as dst:
                shutil.copyfileobj(src, dst)
        except (OSError, zipfile.BadZipFile) as e:
            raise ArchiveError(f"cannot extract content from {info.filename} to {out}") from e
        written += 1
    return written


def install_archive(data: bytes, addons_dir: Path, directories: Sequence[str]) -> int:
    """Replace the configured directories with the archive contents.

    Member names and directory names are checked before anything on disk is
    removed. There is no rollback once extraction has started.
    """

    addons_dir = Path(addons_dir)
    with open_archive(data) as zf:
        for info in zf.infolist():
            resolve_inside(addons_dir, info.filename)
        for name in directories:
            resolve_inside(addons_dir, name)

        remove_directories(addons_dir, directories)
        written = extract_members(zf, addons_dir)

    logger.info("Extracted %d files into %s", written, addons_dir)
    return written

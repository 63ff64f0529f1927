from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import urljoin

import requests
from bs4 import BeautifulSoup

from ..config import UpdaterConfig
from ..errors import FeedError, VersionError
from .http import http_get
from .version import parse_version

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RemoteRelease:
    version: float
    url: str


def parse_json_feed(data: Any) -> RemoteRelease:
    """Parse the JSON API response: {"version": "13.01", "url": "https://..."}."""

    if not isinstance(data, dict):
        raise FeedError(f"feed response must be an object, got {type(data).__name__}")

    raw_version = data.get("version")
    url = data.get("url")
    if raw_version is None:
        raise FeedError("feed response has no 'version'")
    if not url:
        raise FeedError("feed response has no 'url'")

    try:
        version = parse_version(str(raw_version))
    except VersionError as e:
        raise FeedError(str(e)) from e
    return RemoteRelease(version=version, url=str(url))


def _zip_link(soup: BeautifulSoup, page_url: str) -> Optional[str]:
    for a in soup.find_all("a", href=True):
        href = str(a["href"]).strip()
        if href.lower().split("?", 1)[0].endswith(".zip"):
            return urljoin(page_url, href)
    return None


def parse_html_feed(html: str, *, page_url: str, cfg: UpdaterConfig) -> RemoteRelease:
    """Scrape the download page for the current version and an archive link."""

    soup = BeautifulSoup(html, "html.parser")
    text = " ".join(soup.get_text(" ").split())

    m = re.search(cfg.version_pattern, text, re.IGNORECASE)
    if not m:
        raise FeedError(f"version string not found on page {page_url}")
    raw_version = m.group(1)
    try:
        version = parse_version(raw_version)
    except VersionError as e:
        raise FeedError(str(e)) from e

    template = cfg.download_url_template
    if template:
        try:
            url = template.format(addon=cfg.addon, addon_lower=cfg.addon.lower(), version=raw_version)
        except (KeyError, IndexError, ValueError) as e:
            raise FeedError(f"bad download_url_template {template!r}: {e!r}") from e
    else:
        url = _zip_link(soup, page_url)
        if not url:
            raise FeedError(f"download link not found on page {page_url}")

    return RemoteRelease(version=version, url=url)


def fetch_remote(session: requests.Session, cfg: UpdaterConfig) -> RemoteRelease:
    try:
        r = http_get(session, cfg.page, timeout=cfg.timeout)
    except requests.RequestException as e:
        raise FeedError(f"cannot fetch version feed {cfg.page}") from e

    if cfg.feed == "html":
        release = parse_html_feed(r.text, page_url=cfg.page, cfg=cfg)
    else:
        try:
            data = r.json()
        except ValueError as e:
            raise FeedError(f"cannot decode feed response from {cfg.page}") from e
        release = parse_json_feed(data)

    logger.debug("Remote release %s at %s", release.version, release.url)
    return release

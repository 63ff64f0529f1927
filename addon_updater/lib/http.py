from __future__ import annotations

import logging

import requests

logger = logging.getLogger(__name__)

USER_AGENT = "addon-updater/1.0"


def build_session() -> requests.Session:
    s = requests.Session()
    s.headers.update({"User-Agent": USER_AGENT})
    return s


def http_get(session: requests.Session, url: str, *, timeout: float) -> requests.Response:
    """GET url and fail on transport errors or non-2xx status."""

    logger.debug("GET %s (timeout=%ss)", url, timeout)
    r = session.get(url, timeout=timeout)
    r.raise_for_status()
    return r

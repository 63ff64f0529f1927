from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from ..lib.feed import fetch_remote
from ..lib.http import build_session
from ..lib.version import fmt_version
from ._common import config_from_state

logger = logging.getLogger(__name__)


class FetchRemoteVersionStep:
    step_id = "40_fetch_remote_version"

    def __init__(self, session: Optional[requests.Session] = None) -> None:
        self.session = session

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        cfg = config_from_state(state)
        session = self.session or build_session()

        release = fetch_remote(session, cfg)
        state.setdefault("versions", {})["remote"] = release.version
        state.setdefault("update", {})["download_url"] = release.url
        logger.info("Remote %s version %s", cfg.addon, fmt_version(release.version))
        return state

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from ..lib.archive import download_archive, install_archive
from ..lib.http import build_session
from ..lib.version import fmt_version
from ._common import config_from_state

logger = logging.getLogger(__name__)


class InstallUpdateStep:
    step_id = "60_install_update"

    def __init__(self, session: Optional[requests.Session] = None) -> None:
        self.session = session

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        update = state.setdefault("update", {})
        if not update.get("needed"):
            logger.info("Nothing to do")
            return state

        cfg = config_from_state(state)
        versions = state.get("versions") or {}
        addons_dir = (state.get("install") or {}).get("addons_dir")
        url = update.get("download_url")
        if addons_dir is None or not url:
            raise RuntimeError("install.addons_dir / update.download_url missing")

        logger.info("Upgrading %s->%s", fmt_version(versions["local"]), fmt_version(versions["remote"]))

        session = self.session or build_session()
        data = download_archive(session, url, timeout=cfg.download_timeout)
        install_archive(data, addons_dir, cfg.directories)

        update["installed"] = True
        logger.info("Success")
        return state

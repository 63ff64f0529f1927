from __future__ import annotations

import logging
from typing import Any, Dict

from ..lib.toc import read_local_version
from ..lib.version import fmt_version
from ._common import config_from_state

logger = logging.getLogger(__name__)


class ReadLocalVersionStep:
    step_id = "30_read_local_version"

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        cfg = config_from_state(state)
        addons_dir = (state.get("install") or {}).get("addons_dir")
        if addons_dir is None:
            raise RuntimeError("install.addons_dir missing")

        local = read_local_version(addons_dir, cfg.addon, cfg.toc_suffix)
        state.setdefault("versions", {})["local"] = local
        logger.info("Local %s version %s", cfg.addon, fmt_version(local))
        return state

from __future__ import annotations

import logging
from typing import Any, Dict

from ..lib.registry import resolve_addons_dir
from ._common import config_from_state

logger = logging.getLogger(__name__)


class ResolveInstallPathStep:
    step_id = "20_resolve_install_path"

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        cfg = config_from_state(state)
        addons_dir = resolve_addons_dir(cfg.install_path)
        state.setdefault("install", {})["addons_dir"] = addons_dir
        logger.info("AddOns directory: %s", addons_dir)
        return state

from __future__ import annotations

import logging
from typing import Any, Dict

from ..config import load_updater_config

logger = logging.getLogger(__name__)


class LoadConfigStep:
    step_id = "10_load_config"

    def __init__(self, config_path: str) -> None:
        self.config_path = config_path

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        cfg = load_updater_config(self.config_path)
        state["config"] = cfg
        logger.debug(
            "Loaded %s: addon=%s feed=%s directories=%s",
            self.config_path,
            cfg.addon,
            cfg.feed,
            cfg.directories,
        )
        return state

from __future__ import annotations

from typing import Any, Dict

from ..config import UpdaterConfig


def config_from_state(state: Dict[str, Any]) -> UpdaterConfig:
    cfg = state.get("config")
    if not isinstance(cfg, UpdaterConfig):
        raise RuntimeError("config not loaded (10_load_config must run first)")
    return cfg

from __future__ import annotations

import logging
from typing import Any, Dict

from ..lib.version import fmt_version, needs_update

logger = logging.getLogger(__name__)


class CompareVersionsStep:
    step_id = "50_compare_versions"

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        versions = state.get("versions") or {}
        local = versions.get("local")
        remote = versions.get("remote")
        if local is None or remote is None:
            raise RuntimeError("versions.local / versions.remote missing")

        needed = needs_update(local, remote)
        state.setdefault("update", {})["needed"] = needed
        if needed:
            logger.info("Update available %s->%s", fmt_version(local), fmt_version(remote))
        else:
            logger.info("Up to date (local %s, remote %s)", fmt_version(local), fmt_version(remote))
        return state

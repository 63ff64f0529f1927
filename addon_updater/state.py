from __future__ import annotations

from typing import Any, Dict


def ensure_defaults(state: Dict[str, Any]) -> Dict[str, Any]:
    """Fill the run record with empty sections (without overriding values)."""

    state.setdefault("config", {})
    state.setdefault("install", {})
    state.setdefault("versions", {})
    state.setdefault("update", {})
    state.setdefault("execution", {})

    versions = state["versions"]
    versions.setdefault("local", None)
    versions.setdefault("remote", None)

    update = state["update"]
    update.setdefault("download_url", None)
    update.setdefault("needed", False)
    update.setdefault("installed", False)

    exe = state["execution"]
    exe.setdefault("current_step", None)
    exe.setdefault("completed_steps", [])
    exe.setdefault("errors", [])
    exe.setdefault("dry_run", False)

    return state


def mark_step_completed(state: Dict[str, Any], step_id: str) -> None:
    exe = state.setdefault("execution", {})
    completed = exe.setdefault("completed_steps", [])
    if step_id not in completed:
        completed.append(step_id)

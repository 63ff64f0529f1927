from __future__ import annotations

import argparse
import logging
from typing import Any, Dict, Optional

import requests

from .errors import UpdaterError
from .lib.http import build_session
from .logging_utils import configure_logging
from .pipeline import run_pipeline
from .state import ensure_defaults
from .steps import (
    CompareVersionsStep,
    FetchRemoteVersionStep,
    InstallUpdateStep,
    LoadConfigStep,
    ReadLocalVersionStep,
    ResolveInstallPathStep,
)

logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = "config.json"


def build_steps(config_path: str, session: requests.Session):
    return [
        LoadConfigStep(config_path),
        ResolveInstallPathStep(),
        ReadLocalVersionStep(),
        FetchRemoteVersionStep(session),
        CompareVersionsStep(),
        InstallUpdateStep(session),
    ]


def run(
    *,
    config_path: str = DEFAULT_CONFIG_PATH,
    log_path: Optional[str] = None,
    log_level: int = logging.INFO,
    dry_run: bool = False,
    session: Optional[requests.Session] = None,
) -> Dict[str, Any]:
    """Check the addon against its feed and install the newer archive if any."""

    actual_log_path = configure_logging(log_path=log_path, level=log_level)

    state = ensure_defaults({})
    state["execution"]["dry_run"] = dry_run
    state["execution"].setdefault("paths", {})["log_path_requested"] = log_path
    state["execution"].setdefault("paths", {})["log_path_actual"] = actual_log_path

    stop_after = CompareVersionsStep.step_id if dry_run else None

    try:
        if session is None:
            with build_session() as own_session:
                result = run_pipeline(state=state, steps=build_steps(config_path, own_session), stop_after=stop_after)
        else:
            result = run_pipeline(state=state, steps=build_steps(config_path, session), stop_after=stop_after)
    except Exception as e:
        logger.error("Step %s failed", (state.get("execution") or {}).get("current_step"))
        state.setdefault("execution", {}).setdefault("errors", []).append(
            {
                "step": (state.get("execution") or {}).get("current_step"),
                "error": str(e),
            }
        )
        raise

    state = result.state
    state["execution"]["ran_steps"] = result.ran_steps
    if dry_run:
        if state["update"]["needed"]:
            logger.info("Dry run: not downloading %s", state["update"]["download_url"])
        else:
            logger.info("Nothing to do")
    return state


def wait_for_enter() -> None:
    logger.info("Press 'Enter' to finish...")
    try:
        input()
    except EOFError:
        pass


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="addon-updater")
    p.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Path to updater config (json|yaml)")
    p.add_argument("--log", default=None, help="Also write the log to this file")
    p.add_argument("--dry-run", action="store_true", help="Compare versions only, never download")
    p.add_argument("--quiet", action="store_true", help="Don't pause at the end of execution")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = p.parse_args(argv)

    code = 0
    try:
        run(
            config_path=args.config,
            log_path=args.log,
            log_level=logging.DEBUG if args.verbose else logging.INFO,
            dry_run=bool(args.dry_run),
        )
    except UpdaterError as e:
        logger.exception("Fatal: %s", e)
        code = 1
    finally:
        if not args.quiet:
            wait_for_enter()
    return code


if __name__ == "__main__":
    raise SystemExit(main())

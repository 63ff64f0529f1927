from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

FALLBACK_LOG_NAME = "addon-updater.log"


def configure_logging(
    log_path: Optional[str] = None,
    level: int = logging.INFO,
    also_console: bool = True,
) -> Optional[str]:
    """Configure logging.

    Console output is always on (unless also_console=False). A log file is
    only opened when log_path is given; if it cannot be created we fall back
    to a file in the current working directory.

    Returns the actual file path being used, or None for console only.
    """

    logger = logging.getLogger()
    logger.setLevel(level)

    # Avoid duplicate handlers if configure_logging() is called multiple times.
    if getattr(logger, "_addon_updater_configured", False):
        return getattr(logger, "_addon_updater_log_path", log_path)

    chosen_path: Optional[str] = None
    handlers: list[logging.Handler] = []

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )

    warning: Optional[str] = None
    if log_path:
        file_handler: Optional[logging.Handler] = None
        try:
            Path(os.path.dirname(log_path) or ".").mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            chosen_path = log_path
        except OSError:
            # Fall back to a writable location.
            fallback = str(Path.cwd() / FALLBACK_LOG_NAME)
            try:
                file_handler = logging.FileHandler(fallback, encoding="utf-8")
                chosen_path = fallback
            except OSError:
                warning = f"cannot open log file {log_path} or {fallback}, logging to console only"
        if file_handler is not None:
            file_handler.setFormatter(fmt)
            handlers.append(file_handler)

    if also_console:
        console = logging.StreamHandler()
        console.setFormatter(fmt)
        handlers.append(console)

    for h in handlers:
        logger.addHandler(h)

    setattr(logger, "_addon_updater_configured", True)
    setattr(logger, "_addon_updater_log_path", chosen_path)

    if warning:
        logging.getLogger(__name__).warning(warning)
    logging.getLogger(__name__).debug(
        "Logging initialized (requested=%s, actual=%s)", log_path, chosen_path
    )
    return chosen_path

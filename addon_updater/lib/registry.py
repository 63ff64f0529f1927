from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ..errors import InstallPathError

logger = logging.getLogger(__name__)

WOW_REGISTRY_KEY = r"SOFTWARE\Wow6432Node\Blizzard Entertainment\World of Warcraft"
WOW_REGISTRY_VALUE = "InstallPath"


def read_install_path() -> str:
    """Return the WoW install directory recorded by the Blizzard installer."""

    try:
        import winreg
    except ImportError as e:
        raise InstallPathError("cannot find WoW install directory (registry unavailable)") from e

    try:
        with winreg.OpenKey(winreg.HKEY_LOCAL_MACHINE, WOW_REGISTRY_KEY, 0, winreg.KEY_QUERY_VALUE) as key:
            value, _ = winreg.QueryValueEx(key, WOW_REGISTRY_VALUE)
    except OSError as e:
        raise InstallPathError("cannot find WoW install directory") from e

    if not isinstance(value, str) or not value.strip():
        raise InstallPathError("cannot find WoW install directory")
    return value


def addons_dir_for(install_path: str) -> Path:
    return Path(install_path) / "Interface" / "AddOns"


def resolve_addons_dir(install_path: Optional[str] = None) -> Path:
    """Resolve <WoW>/Interface/AddOns, from config when given, else from the registry."""

    if install_path:
        logger.debug("Using configured install path %s", install_path)
        base = install_path
    else:
        base = read_install_path()
        logger.debug("Registry install path %s", base)
    return addons_dir_for(base)

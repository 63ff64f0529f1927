from .step_10_load_config import LoadConfigStep
from .step_20_resolve_install_path import ResolveInstallPathStep
from .step_30_read_local_version import ReadLocalVersionStep
from .step_40_fetch_remote_version import FetchRemoteVersionStep
from .step_50_compare_versions import CompareVersionsStep
from .step_60_install_update import InstallUpdateStep

__all__ = [
    "LoadConfigStep",
    "ResolveInstallPathStep",
    "ReadLocalVersionStep",
    "FetchRemoteVersionStep",
    "CompareVersionsStep",
    "InstallUpdateStep",
]

from __future__ import annotations


class UpdaterError(RuntimeError):
    pass


class ConfigError(UpdaterError):
    pass


class InstallPathError(UpdaterError):
    pass


class VersionError(UpdaterError):
    pass


class FeedError(UpdaterError):
    pass


class ArchiveError(UpdaterError):
    pass

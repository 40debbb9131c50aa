from __future__ import annotations


class FsInfoError(Exception):
    """Base for every error that ends a getfsinfo run."""


class UsageError(FsInfoError):
    pass


class MountTableError(FsInfoError, OSError):
    pass


class VolumeStatsError(FsInfoError, OSError):
    pass


class MountNotFoundError(FsInfoError, LookupError):
    pass

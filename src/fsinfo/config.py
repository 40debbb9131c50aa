from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from fsinfo import paths
from fsinfo.errors import UsageError


@dataclass(frozen=True)
class FsInfoConfig:
    # Live kernel mount list
    mounts_file: str = "/proc/mounts"

    # True = old behaviour, "/da" also matches "/database"
    literal_prefix: bool = False

    # Print byte counts instead of 1.50K style sizes
    raw_bytes: bool = False


DEFAULT_CONFIG = FsInfoConfig()


def load_config(path: Optional[Path] = None) -> FsInfoConfig:
    """Load config.yaml if present and fall back to the defaults.

    The file is optional and never created: getfsinfo only reads.
    """
    cfg_path = Path(path) if path is not None else paths.config_file()
    if not cfg_path.exists():
        if path is not None:
            raise UsageError(f"Config file not found: '{cfg_path}'")
        return DEFAULT_CONFIG

    try:
        raw = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as e:
        raise UsageError(f"Cannot read config '{cfg_path}': {e}") from e

    if not isinstance(raw, dict):
        raise UsageError(f"Invalid config '{cfg_path}': expected a mapping")

    mounts_file = raw.get("mounts_file", DEFAULT_CONFIG.mounts_file)
    if not isinstance(mounts_file, str) or not mounts_file:
        raise UsageError(f"Invalid config '{cfg_path}': mounts_file must be a non-empty path")

    flags = {}
    for key in ("literal_prefix", "raw_bytes"):
        value = raw.get(key, getattr(DEFAULT_CONFIG, key))
        # quoted "false" is a string, not a flag
        if not isinstance(value, bool):
            raise UsageError(f"Invalid config '{cfg_path}': {key} must be true or false")
        flags[key] = value

    return FsInfoConfig(mounts_file=mounts_file, **flags)

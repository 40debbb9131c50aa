from __future__ import annotations
from pathlib import Path


def config_dir() -> Path:
    """User config directory (Linux standard)."""
    return Path.home() / ".config" / "getfsinfo"


def config_file() -> Path:
    return config_dir() / "config.yaml"

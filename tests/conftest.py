from __future__ import annotations

import os
from types import SimpleNamespace

import pytest


@pytest.fixture
def fake_statvfs(monkeypatch):
    """Replace os.statvfs with fixed numbers; missing paths still fail."""

    def _statvfs(path):
        if not os.path.exists(path):
            raise FileNotFoundError(2, "No such file or directory", path)
        return SimpleNamespace(
            f_fsid=0xABC123,
            f_bsize=4096,
            f_blocks=1024,
            f_bfree=512,
            f_bavail=256,
            f_namemax=255,
            f_files=65536,
        )

    monkeypatch.setattr(os, "statvfs", _statvfs)
    return _statvfs


@pytest.fixture
def mount_table(tmp_path):
    """Write a mount table file; returns a function(lines) -> path."""

    def _write(*lines: str) -> str:
        p = tmp_path / "mounts"
        p.write_text("".join(ln + "\n" for ln in lines), encoding="utf-8")
        return str(p)

    return _write

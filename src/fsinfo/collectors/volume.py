from __future__ import annotations

import os
from dataclasses import dataclass

from fsinfo.errors import VolumeStatsError


@dataclass(frozen=True)
class VolumeStats:
    filesystem_id: int
    block_size: int
    total_blocks: int
    free_blocks: int
    available_blocks: int
    max_filename_length: int
    total_file_slots: int


def read_volume_stats(path: str) -> VolumeStats:
    """statvfs() of `path` as VolumeStats."""
    try:
        st = os.statvfs(path)
    except OSError as e:
        raise VolumeStatsError(f"Error opening '{path}': {e.strerror}") from e

    return VolumeStats(
        filesystem_id=int(st.f_fsid),
        block_size=int(st.f_bsize),
        total_blocks=int(st.f_blocks),
        free_blocks=int(st.f_bfree),
        available_blocks=int(st.f_bavail),
        max_filename_length=int(st.f_namemax),
        total_file_slots=int(st.f_files),
    )

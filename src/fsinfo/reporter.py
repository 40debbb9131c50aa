from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from rich.table import Table
from rich.text import Text

from fsinfo.collectors.mounts import MountEntry
from fsinfo.collectors.volume import VolumeStats
from fsinfo.formatting import format_size


@dataclass(frozen=True)
class Report:
    path: str
    mount: MountEntry
    stats: VolumeStats

    @property
    def size_bytes(self) -> int:
        return self.stats.total_blocks * self.stats.block_size

    @property
    def free_bytes(self) -> int:
        return self.stats.free_blocks * self.stats.block_size

    @property
    def available_bytes(self) -> int:
        return self.stats.available_blocks * self.stats.block_size


def build_report(path: str, mount: MountEntry, stats: VolumeStats) -> Report:
    return Report(path=path, mount=mount, stats=stats)


def _fields(report: Report, raw: bool) -> List[Tuple[str, str]]:
    """(label, value) pairs in report order."""
    m = report.mount
    s = report.stats
    return [
        ("ID", f"{s.filesystem_id:x}"),
        ("device", f"{m.source} ({m.fs_type})"),
        ("mount point", m.mount_point),
        ("mount options", m.options),
        ("max filename length", str(s.max_filename_length)),
        ("block size", str(s.block_size)),
        ("size", format_size(report.size_bytes, raw)),
        ("free", format_size(report.free_bytes, raw)),
        ("available", format_size(report.available_bytes, raw)),
        ("number of files", str(s.total_file_slots)),
    ]


def title(report: Report) -> str:
    return f"filesystem of '{report.path}':"


def render_text(report: Report, raw: bool = False) -> str:
    """
    Plain text block, one indented `label: value` line per field:

        filesystem of '/home':
          ID: 3f2a...
          device: /dev/sda2 (ext4)
          ...
    """
    lines = [title(report)]
    lines.extend(f"  {label}: {value}" for label, value in _fields(report, raw))
    return "\n".join(lines)


def render_table(report: Report, raw: bool = False) -> Table:
    table = Table(title=Text(title(report).rstrip(":")), title_justify="left", show_header=False)
    table.add_column("field", style="bold")
    table.add_column("value")
    for label, value in _fields(report, raw):
        table.add_row(label, Text(value))
    return table

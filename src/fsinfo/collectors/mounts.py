from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional

from fsinfo.errors import MountNotFoundError, MountTableError


MOUNTS_FILE = "/proc/mounts"

# /proc/mounts encodes space, tab, newline and backslash as \ooo
_OCTAL_RE = re.compile(r"\\([0-7]{3})")


@dataclass(frozen=True)
class MountEntry:
    source: str
    mount_point: str
    fs_type: str
    options: str


def unescape_field(s: str) -> str:
    return _OCTAL_RE.sub(lambda m: chr(int(m.group(1), 8)), s)


def parse_mount_line(line: str) -> Optional[MountEntry]:
    """One mount table line -> MountEntry, None for blank/comment/short lines."""
    line = line.strip()
    if not line or line.startswith("#"):
        return None
    parts = line.split()
    if len(parts) < 4:
        return None
    source, mount_point, fs_type, options = (unescape_field(p) for p in parts[:4])
    return MountEntry(source=source, mount_point=mount_point, fs_type=fs_type, options=options)


def read_mount_table(path: str = MOUNTS_FILE) -> List[MountEntry]:
    """Read the live mount table. Not cached: mounts change between calls."""
    entries: List[MountEntry] = []
    try:
        with open(path, "r", encoding="utf-8", errors="surrogateescape") as f:
            for line in f:
                entry = parse_mount_line(line)
                if entry is not None:
                    entries.append(entry)
    except OSError as e:
        raise MountTableError(f"Cannot open '{path}': {e.strerror}") from e
    return entries


def _prefix_match(path: str, mount_point: str, literal_prefix: bool) -> bool:
    if not path.startswith(mount_point):
        return False
    if literal_prefix:
        return True
    # the prefix has to end on a path component
    if len(path) == len(mount_point) or mount_point.endswith("/"):
        return True
    return path[len(mount_point)] == "/"


def resolve_mount(path: str, entries: Iterable[MountEntry], literal_prefix: bool = False) -> MountEntry:
    """
    Longest-prefix match of `path` against the mount points in `entries`.

    Ties keep the first entry in table order, so with stacked mounts on the
    same directory the earliest line wins.
    """
    best: Optional[MountEntry] = None
    for entry in entries:
        if not _prefix_match(path, entry.mount_point, literal_prefix):
            continue
        if best is None or len(entry.mount_point) > len(best.mount_point):
            best = entry

    if best is None:
        raise MountNotFoundError(f"No mount point found for '{path}'")
    return best


def find_mount(path: str, mounts_file: str = MOUNTS_FILE, literal_prefix: bool = False) -> MountEntry:
    """Resolve the mount owning `path`, reading a fresh copy of the mount table."""
    target = os.path.realpath(path)
    return resolve_mount(target, read_mount_table(mounts_file), literal_prefix=literal_prefix)

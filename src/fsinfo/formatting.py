from __future__ import annotations

SUFFIXES = ("B", "K", "M", "G", "T")


def human_readable(size: int) -> str:
    """Bytes -> binary magnitude string (1536 -> 1.50K). Saturates at T."""
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    value = float(size)
    idx = 0
    while value >= 1024.0 and idx < len(SUFFIXES) - 1:
        value /= 1024.0
        idx += 1
    return f"{value:.2f}{SUFFIXES[idx]}"


def format_size(size: int, raw: bool = False) -> str:
    return str(size) if raw else human_readable(size)

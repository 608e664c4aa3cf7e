"""Turn raw entry metadata into the strings shown in the listing table."""

from __future__ import annotations

from datetime import datetime, timezone

SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")
MODIFIED_AT_FORMAT = "%Y-%m-%d %H:%M:%S"


def human_readable_size(size: int) -> str:
    """Render ``size`` bytes as ``"<value> <unit>"`` with two decimals.

    The value is divided by 1024 until it drops below 1024 or the largest
    unit is reached; anything past terabytes stays in ``TB``.
    """
    if size < 0:
        raise ValueError(f"size must be >= 0, got {size}")
    value = float(size)
    unit = 0
    while value >= 1024 and unit < len(SIZE_UNITS) - 1:
        value /= 1024
        unit += 1
    return f"{value:.2f} {SIZE_UNITS[unit]}"


def format_modified_at(mtime: float) -> str:
    """Render a POSIX timestamp as ``YYYY-MM-DD HH:MM:SS`` in UTC.

    Raises ``OverflowError``/``OSError``/``ValueError`` for timestamps the
    platform cannot represent.
    """
    return datetime.fromtimestamp(mtime, tz=timezone.utc).strftime(MODIFIED_AT_FORMAT)


__all__ = ["SIZE_UNITS", "MODIFIED_AT_FORMAT", "human_readable_size", "format_modified_at"]

"""Display formatting helpers and duration parsing."""

from __future__ import annotations

import math
import re
from datetime import timedelta

_KI = 1024
_MI = _KI * 1024
_GI = _MI * 1024

_DURATION_PART_RE = re.compile(r"(\d+(?:\.\d+)?)(ms|us|µs|ns|h|m|s)")
_DURATION_UNITS = {
    "h": 3600.0,
    "m": 60.0,
    "s": 1.0,
    "ms": 1e-3,
    "us": 1e-6,
    "µs": 1e-6,
    "ns": 1e-9,
}


def format_cpu(millicores: int) -> str:
    """Format millicores: "250m" below one core, "1.5" cores otherwise."""
    if millicores >= 1000:
        return f"{millicores / 1000:.1f}"
    return f"{millicores}m"


def format_memory(num_bytes: int) -> str:
    """Format bytes with the largest binary unit up to Gi."""
    if num_bytes >= _GI:
        return f"{num_bytes / _GI:.1f}Gi"
    if num_bytes >= _MI:
        return f"{num_bytes / _MI:.0f}Mi"
    if num_bytes >= _KI:
        return f"{num_bytes / _KI:.0f}Ki"
    return f"{num_bytes}B"


def format_percent(percent: float) -> str:
    return f"{percent:.1f}%"


def format_age(elapsed: timedelta) -> str:
    """Format an elapsed time coarsely: "<1s", "42s", "5m", "3h"."""
    seconds = elapsed.total_seconds()
    if seconds < 1:
        return "<1s"
    if seconds < 60:
        return f"{int(seconds)}s"
    if seconds < 3600:
        return f"{int(seconds // 60)}m"
    return f"{int(seconds // 3600)}h"


def truncate(text: str, max_len: int) -> str:
    """Shorten *text* to *max_len* characters, ending in "..." when cut."""
    if len(text) <= max_len:
        return text
    if max_len <= 3:
        return text[:max_len]
    return text[: max_len - 3] + "..."


def parse_duration(value: str) -> float:
    """Parse a duration such as "500ms", "2s", "1m30s" or "2.5" into seconds.

    Raises:
        ValueError: The value is not a recognised, finite duration.
    """
    text = value.strip()
    if not text:
        raise ValueError("empty duration")
    try:
        total = float(text)
    except ValueError:
        total = _parse_duration_parts(text, value)
    if not math.isfinite(total):
        raise ValueError(f"duration must be finite, got {value!r}")
    return total


def _parse_duration_parts(text: str, value: str) -> float:
    position = 0
    total = 0.0
    for match in _DURATION_PART_RE.finditer(text):
        if match.start() != position:
            break
        total += float(match.group(1)) * _DURATION_UNITS[match.group(2)]
        position = match.end()
    if position == 0 or position != len(text):
        raise ValueError(f"invalid duration {value!r}")
    return total

"""Rounding and unit formatting helpers shared by the audit stages."""
from __future__ import annotations

import math

KB_IN_BYTES = 1024


def round_half_up(value: float) -> int:
    # Built-in round() is banker's rounding; report values round .5 upwards.
    return int(math.floor(value + 0.5))


def format_kb(num_bytes: float) -> str:
    return f"{round_half_up(num_bytes / KB_IN_BYTES)} KB"


def format_percent(ratio: float) -> str:
    return f"{round_half_up(ratio * 100)}%"


__all__ = ["KB_IN_BYTES", "format_kb", "format_percent", "round_half_up"]

# utils.py
# Small helpers so core modules stay readable.

from __future__ import annotations


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def sign(value: float) -> int:
    """-1, 0 or 1 depending on the sign of value."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0

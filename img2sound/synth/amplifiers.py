# amplifiers.py
"""
Master-bus stage, applied once after every note has been mixed in.

- peak_normalize(buf)  # scale so the loudest sample hits 1.0
- soft_clip(buf)       # tanh every sample
- normalize(buf)       # both, skipping silent buffers
"""

import math
from typing import List


def peak_normalize(buf: List[float]) -> float:
    """In place. Returns the peak found before scaling (0.0 leaves buf untouched)."""
    peak = max((abs(s) for s in buf), default=0.0)
    if peak > 0:
        for i in range(len(buf)):
            buf[i] /= peak
    return peak


def soft_clip(buf: List[float]) -> None:
    for i in range(len(buf)):
        buf[i] = math.tanh(buf[i])


def normalize(buf: List[float]) -> List[float]:
    if peak_normalize(buf) > 0:
        soft_clip(buf)
    return buf

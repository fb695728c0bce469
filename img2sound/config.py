"""
Project-wide constants and the synthesis parameter bundle.
Edit the bounds/defaults block below to change what a conversion accepts.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from img2sound.errors import InvalidParameterError

# ===== AUDIO FORMAT (EDIT HERE) =====
SAMPLE_RATE = 44_100          # Hz, mono 16-bit PCM only

# ===== PARAMETER BOUNDS (EDIT HERE) =====
MIN_DURATION_MS = 500
MAX_DURATION_MS = 5000
MIN_BASE_FREQ_HZ = 220
MAX_BASE_FREQ_HZ = 880
MIN_DENSITY = 1
MAX_DENSITY = 20

DEFAULT_DURATION_MS = 2000
DEFAULT_BASE_FREQ_HZ = 440
DEFAULT_DENSITY = 10

# ===== OUTPUT =====
OUTPUT_DIR_ENV = "IMG2SOUND_OUTPUT_DIR"
OUTPUT_DIR_DEFAULT = "wav_output"


def clamp(value: int, low: int, high: int) -> int:
    return low if value < low else high if value > high else value


def get_output_dir() -> Path:
    configured = os.environ.get(OUTPUT_DIR_ENV)
    if configured:
        return Path(configured).expanduser()
    return Path(OUTPUT_DIR_DEFAULT)


@dataclass(frozen=True)
class SynthesisParams:
    """
    Immutable snapshot of the three knobs that drive one conversion.

      duration_ms   : 500..5000   length of the rendered audio
      base_freq_hz  : 220..880    pitch of the leftmost pixel
      density       : 1..20       how many notes are sampled across the row
    """

    duration_ms: int = DEFAULT_DURATION_MS
    base_freq_hz: int = DEFAULT_BASE_FREQ_HZ
    density: int = DEFAULT_DENSITY

    def __post_init__(self) -> None:
        _check_range("duration_ms", self.duration_ms, MIN_DURATION_MS, MAX_DURATION_MS)
        _check_range("base_freq_hz", self.base_freq_hz, MIN_BASE_FREQ_HZ, MAX_BASE_FREQ_HZ)
        _check_range("density", self.density, MIN_DENSITY, MAX_DENSITY)

    @classmethod
    def clamped(
        cls,
        duration_ms: int = DEFAULT_DURATION_MS,
        base_freq_hz: int = DEFAULT_BASE_FREQ_HZ,
        density: int = DEFAULT_DENSITY,
    ) -> "SynthesisParams":
        """Build params, pulling out-of-range values back onto the nearest bound."""
        return cls(
            duration_ms=clamp(int(duration_ms), MIN_DURATION_MS, MAX_DURATION_MS),
            base_freq_hz=clamp(int(base_freq_hz), MIN_BASE_FREQ_HZ, MAX_BASE_FREQ_HZ),
            density=clamp(int(density), MIN_DENSITY, MAX_DENSITY),
        )

    @property
    def duration_s(self) -> float:
        return self.duration_ms / 1000.0


def _check_range(name: str, value: int, low: int, high: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}")
    if not (low <= value <= high):
        raise InvalidParameterError(f"{name} must be in {low}..{high}, got {value}")

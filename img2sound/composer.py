from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from img2sound.config import SynthesisParams

# ===== PITCH / NOTE DEFAULTS (EDIT HERE) =====
SEMITONE_SPAN = 24          # full row width covers two octaves
SILENCE_GATE = 0.05         # darker pixels than this play nothing


@dataclass(frozen=True)
class Note:
    position: int           # pixel index on the scanline
    frequency: float        # Hz
    amplitude: float        # 0..1, the pixel's intensity


def position_to_frequency(p: float, base_freq_hz: float) -> float:
    """Map a 0..1 position along the row onto an equal-tempered two-octave climb."""
    semitones = p * SEMITONE_SPAN
    return base_freq_hz * 2 ** (semitones / 12.0)


def note_spacing(width: int, density: int) -> int:
    return max(1, width // density)


def compose_notes(intensities: Sequence[float], params: SynthesisParams) -> List[Note]:
    """
    Walk the row with a fixed stride and keep the pixels bright enough to sound.
    Every kept note spans the whole render; they stack into one chord.
    """
    width = len(intensities)
    if width == 0:
        return []

    notes: List[Note] = []
    for i in range(0, width, note_spacing(width, params.density)):
        amplitude = intensities[i]
        if amplitude < SILENCE_GATE:
            continue
        notes.append(Note(i, position_to_frequency(i / width, params.base_freq_hz), amplitude))
    return notes

# generator.py
"""
Waveform synthesizer:
composer notes -> harmonic oscillator -> envelope -> additive mix -> amplifier

Every note covers the full duration, so the result is one sustained chord
whose voicing follows the bright pixels of the scanline.
"""

import logging
from typing import List, Sequence

from img2sound.composer import Note, compose_notes
from img2sound.config import SAMPLE_RATE, SynthesisParams
from img2sound.synth.amplifiers import normalize
from img2sound.synth.envelopes import apply_envelope
from img2sound.synth.oscillators import harmonic_sample

logger = logging.getLogger(__name__)

Samples = List[float]


def frames_for_duration(duration_s: float, sample_rate: int = SAMPLE_RATE) -> int:
    return max(0, int(round(sample_rate * duration_s)))


def render_note(buf: Samples, note: Note, duration_s: float, sample_rate: int = SAMPLE_RATE) -> None:
    """Add one enveloped note into `buf` (in place) across its whole length."""
    total = len(buf)
    for j in range(total):
        t = j / sample_rate
        raw = harmonic_sample(note.frequency, note.amplitude, t)
        # Envelope position is the fraction of the buffer, measured against duration in seconds.
        buf[j] += apply_envelope(raw, j / total, duration_s)


def generate_samples(
    intensities: Sequence[float],
    params: SynthesisParams,
    *,
    sample_rate: int = SAMPLE_RATE,
) -> Samples:
    """
    Render a scanline to a mono float buffer in [-1, 1].

    Args:
        intensities: per-pixel brightness (0..1) of one image row
        params:      duration / base pitch / density for this conversion
        sample_rate: samples per second

    Returns:
        list[float] of length round(sample_rate * duration_s). A row with no
        pixel above the silence gate yields all zeros.
    """
    duration_s = params.duration_s
    buf: Samples = [0.0] * frames_for_duration(duration_s, sample_rate)

    notes = compose_notes(intensities, params)
    logger.info("Rendering %d notes over %d samples", len(notes), len(buf))
    for note in notes:
        render_note(buf, note, duration_s, sample_rate)

    return normalize(buf)

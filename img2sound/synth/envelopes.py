# envelopes.py
"""
Fixed ADSR shape applied per sample.

Segments are expressed as fractions of the note length:
  attack   0.0 .. 0.1   gain 0   -> 1
  decay    0.1 .. 0.3   gain 1   -> 0.7
  sustain  0.3 .. 0.8   gain 0.7
  release  0.8 .. 1.0   gain 0.7 -> 0
"""

# ===== ENVELOPE SHAPE (EDIT HERE) =====
ATTACK = 0.1
DECAY = 0.2
SUSTAIN_LEVEL = 0.7
RELEASE = 0.2


def envelope_gain(normalized: float) -> float:
    if normalized < ATTACK:
        return normalized / ATTACK
    if normalized < ATTACK + DECAY:
        decay_pos = (normalized - ATTACK) / DECAY
        return 1.0 - (1.0 - SUSTAIN_LEVEL) * decay_pos
    if normalized > 1.0 - RELEASE:
        release_pos = (normalized - (1.0 - RELEASE)) / RELEASE
        return SUSTAIN_LEVEL * (1.0 - release_pos)
    return SUSTAIN_LEVEL


def apply_envelope(sample: float, position: float, duration: float) -> float:
    """Scale `sample` by the envelope gain at `position` within `duration`."""
    return sample * envelope_gain(position / duration)

# oscillators.py
"""
Bare-bones harmonic oscillator.
A fundamental plus three harmonics, each at half the amplitude of the one below.
Returns one float sample per call; no state between calls.
"""

import math

# (multiple of fundamental, relative amplitude)
HARMONICS = (
    (1, 1.0),
    (2, 0.5),
    (3, 0.25),
    (4, 0.125),
)


def harmonic_sample(frequency: float, amplitude: float, t: float) -> float:
    omega_t = 2 * math.pi * frequency * t
    return sum(amplitude * weight * math.sin(k * omega_t) for k, weight in HARMONICS)

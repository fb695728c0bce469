from __future__ import annotations

import pytest

from img2sound.composer import (
    SILENCE_GATE,
    compose_notes,
    note_spacing,
    position_to_frequency,
)
from img2sound.config import SynthesisParams


def test_position_to_frequency_octaves():
    assert position_to_frequency(0.0, 440) == pytest.approx(440.0)
    assert position_to_frequency(0.5, 440) == pytest.approx(880.0)
    assert position_to_frequency(1.0, 440) == pytest.approx(1760.0)


def test_position_to_frequency_one_semitone():
    assert position_to_frequency(1 / 24, 220) == pytest.approx(220 * 2 ** (1 / 12))


@pytest.mark.parametrize("base", [220, 440, 880])
def test_position_to_frequency_is_monotonic(base):
    width = 97
    freqs = [position_to_frequency(i / width, base) for i in range(width)]
    assert all(a <= b for a, b in zip(freqs, freqs[1:]))


@pytest.mark.parametrize(
    "width,density,expected",
    [(10, 20, 1), (10, 1, 10), (10, 3, 3), (100, 10, 10), (1, 1, 1), (5, 20, 1)],
)
def test_note_spacing(width, density, expected):
    assert note_spacing(width, density) == expected


def test_compose_notes_every_pixel_when_density_exceeds_width():
    notes = compose_notes([1.0] * 10, SynthesisParams(density=20))
    assert [n.position for n in notes] == list(range(10))


def test_compose_notes_stride_and_pitch():
    notes = compose_notes([0.5] * 10, SynthesisParams(base_freq_hz=440, density=3))
    assert [n.position for n in notes] == [0, 3, 6, 9]
    assert notes[0].frequency == pytest.approx(440.0)
    assert notes[1].frequency == pytest.approx(position_to_frequency(0.3, 440))
    assert all(n.amplitude == 0.5 for n in notes)


def test_compose_notes_silence_gate():
    row = [0.0, SILENCE_GATE - 1e-9, SILENCE_GATE, 1.0]
    notes = compose_notes(row, SynthesisParams(density=20))
    assert [n.position for n in notes] == [2, 3]


def test_compose_notes_empty_row():
    assert compose_notes([], SynthesisParams()) == []

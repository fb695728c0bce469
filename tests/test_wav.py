from __future__ import annotations

import re
import struct
import wave
from array import array
from datetime import datetime
from pathlib import Path

import pytest

from img2sound.wav import (
    encode_wav,
    pcm16_from_float,
    unique_output_path,
    wav_header,
    write_wav,
)


def _as_int16(buf: bytes) -> list:
    a = array("h"); a.frombytes(buf); return list(a)


def test_pcm16_truncates_toward_zero():
    samples = _as_int16(pcm16_from_float([1.0, -1.0, 0.0, 0.5, -0.5]))
    # -1.0 maps to -32767; -32768 is never produced
    assert samples == [32767, -32767, 0, 16383, -16383]


def test_pcm16_clamps_out_of_range():
    assert _as_int16(pcm16_from_float([3.0, -7.5])) == [32767, -32767]


def test_pcm16_is_little_endian():
    assert pcm16_from_float([1.0]) == b"\xff\x7f"


def test_header_layout():
    h = wav_header(4, 44_100)
    assert len(h) == 44
    riff, riff_size, wave_id = struct.unpack("<4sI4s", h[:12])
    assert (riff, riff_size, wave_id) == (b"RIFF", 36 + 8, b"WAVE")

    fmt = struct.unpack("<4sIHHIIHH", h[12:36])
    assert fmt == (b"fmt ", 16, 1, 1, 44_100, 88_200, 2, 16)

    data_id, data_size = struct.unpack("<4sI", h[36:44])
    assert (data_id, data_size) == (b"data", 8)


def test_encode_known_buffer():
    blob = encode_wav([1.0, -1.0, 0.0, 0.5], 44_100)
    assert len(blob) == 44 + 8
    assert _as_int16(blob[44:]) == [32767, -32767, 0, 16383]


def test_write_wav_roundtrip_with_wave_module(tmp_path: Path):
    out = write_wav(tmp_path / "known.wav", [1.0, -1.0, 0.0, 0.5], 44_100)
    assert out.stat().st_size == 52
    with wave.open(str(out), "rb") as w:
        assert w.getnchannels() == 1
        assert w.getsampwidth() == 2
        assert w.getframerate() == 44_100
        assert w.getnframes() == 4
        assert _as_int16(w.readframes(4)) == [32767, -32767, 0, 16383]


def test_write_wav_empty_buffer(tmp_path: Path):
    out = write_wav(tmp_path / "empty.wav", [])
    assert out.read_bytes() == wav_header(0)


def test_write_wav_creates_missing_directories(tmp_path: Path):
    nested = tmp_path / "deep/nested/dir/out.wav"
    out = write_wav(nested, [0.0])
    assert out.exists()
    assert out.parent.is_dir()


def test_write_wav_failure_leaves_no_temp_file(tmp_path: Path):
    target = tmp_path / "taken"
    target.mkdir()
    with pytest.raises(OSError):
        write_wav(target, [0.5, 0.5])
    assert [p.name for p in tmp_path.iterdir()] == ["taken"]


def test_write_wav_parent_is_a_file(tmp_path: Path):
    blocker = tmp_path / "blocker"
    blocker.write_bytes(b"x")
    with pytest.raises(OSError):
        write_wav(blocker / "out.wav", [0.0])


def test_unique_output_path_format(tmp_path: Path):
    p = unique_output_path(tmp_path, now=datetime(2024, 1, 2, 3, 4, 5))
    assert p.parent == tmp_path
    assert re.fullmatch(r"output_20240102_030405_[0-9a-f]{8}\.wav", p.name)


def test_unique_output_path_differs_each_call(tmp_path: Path):
    now = datetime(2024, 1, 2, 3, 4, 5)
    names = {unique_output_path(tmp_path, now=now).name for _ in range(20)}
    assert len(names) == 20

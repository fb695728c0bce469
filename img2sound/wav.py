from __future__ import annotations

import logging
import os
import secrets
import struct
import sys
import tempfile
from array import array
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional

from img2sound.config import SAMPLE_RATE

logger = logging.getLogger(__name__)

NUM_CHANNELS = 1
BITS_PER_SAMPLE = 16
PCM_FORMAT_TAG = 1
FMT_CHUNK_SIZE = 16
PCM16_SCALE = 32767


def pcm16_from_float(buf: Iterable[float]) -> bytes:
    """
    Float samples in [-1, 1] -> int16 little-endian bytes.

    Out-of-range input is clamped first. Conversion truncates toward zero,
    so -1.0 becomes -32767 and -32768 is never written.
    """
    out = array("h")
    for x in buf:
        if x < -1.0:
            x = -1.0
        elif x > 1.0:
            x = 1.0
        out.append(int(x * PCM16_SCALE))
    if sys.byteorder == "big":
        out.byteswap()
    return out.tobytes()


def wav_header(n_samples: int, sample_rate: int = SAMPLE_RATE) -> bytes:
    """RIFF (12 bytes) + fmt (24 bytes) + data chunk header (8 bytes)."""
    block_align = NUM_CHANNELS * BITS_PER_SAMPLE // 8
    byte_rate = sample_rate * block_align
    data_size = n_samples * block_align
    return (
        struct.pack("<4sI4s", b"RIFF", 36 + data_size, b"WAVE")
        + struct.pack(
            "<4sIHHIIHH",
            b"fmt ",
            FMT_CHUNK_SIZE,
            PCM_FORMAT_TAG,
            NUM_CHANNELS,
            sample_rate,
            byte_rate,
            block_align,
            BITS_PER_SAMPLE,
        )
        + struct.pack("<4sI", b"data", data_size)
    )


def encode_wav(samples, sample_rate: int = SAMPLE_RATE) -> bytes:
    payload = pcm16_from_float(samples)
    return wav_header(len(payload) // 2, sample_rate) + payload


def write_wav(path: str | Path, samples, sample_rate: int = SAMPLE_RATE) -> Path:
    """
    Write a mono 16-bit PCM WAV file, creating parent folders as needed.

    The bytes land in a temporary file next to `path` and are moved into
    place in one step; on any OSError the temporary file is removed and the
    error propagates.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    data = encode_wav(samples, sample_rate)

    fd, tmp_name = tempfile.mkstemp(prefix=".tmp_", suffix=".wav", dir=p.parent)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(tmp_name, p)
    except OSError:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    logger.debug("Wrote %d bytes to %s", len(data), p)
    return p


def unique_output_path(output_dir: str | Path, now: Optional[datetime] = None) -> Path:
    """output_<YYYYMMDD_HHMMSS>_<8 hex>.wav inside output_dir."""
    stamp = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
    return Path(output_dir) / f"output_{stamp}_{secrets.token_hex(4)}.wav"

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Optional

from img2sound.config import SAMPLE_RATE, SynthesisParams
from img2sound.converter import middle_row, scanline_intensities
from img2sound.synth.generator import generate_samples
from img2sound.wav import unique_output_path, write_wav

logger = logging.getLogger(__name__)


def convert_image(
    image,
    params: SynthesisParams,
    output_dir: str | Path,
    *,
    row: Optional[int] = None,
    sample_rate: int = SAMPLE_RATE,
) -> Path:
    """
    One full conversion: scanline -> samples -> freshly named WAV.

    `row` defaults to the vertical middle of the image. Bounds and I/O
    errors propagate; nothing is retried.
    """
    if row is None:
        row = middle_row(image)
    logger.info(
        "Converting row %d (duration=%dms, base=%dHz, density=%d)",
        row, params.duration_ms, params.base_freq_hz, params.density,
    )
    intensities = scanline_intensities(image, row)
    samples = generate_samples(intensities, params, sample_rate=sample_rate)
    out = write_wav(unique_output_path(output_dir), samples, sample_rate)
    logger.info("Created new audio file: %s", out)
    return out


class ImageConverter:
    """
    Runs conversions of one image in the background, one at a time.

    start() returns the worker thread, or None when a conversion is already
    running. Failures are logged and never escape the worker.
    """

    def __init__(self, image, output_dir: str | Path):
        self.image = image
        self.output_dir = Path(output_dir)
        self.last_output: Optional[Path] = None
        self.last_error: Optional[BaseException] = None
        self._lock = threading.Lock()
        self._converting = False

    @property
    def converting(self) -> bool:
        with self._lock:
            return self._converting

    def start(self, params: SynthesisParams) -> Optional[threading.Thread]:
        with self._lock:
            if self._converting:
                logger.info("Conversion already in progress; ignoring request")
                return None
            self._converting = True
        worker = threading.Thread(target=self._run, args=(params,), daemon=True)
        try:
            worker.start()
        except RuntimeError:
            with self._lock:
                self._converting = False
            raise
        return worker

    def _run(self, params: SynthesisParams) -> None:
        output: Optional[Path] = None
        error: Optional[BaseException] = None
        try:
            output = convert_image(self.image, params, self.output_dir)
        except Exception as e:
            error = e
            logger.exception("Failed to convert image to audio")
        finally:
            # results become visible together with the cleared flag
            with self._lock:
                self.last_output = output
                self.last_error = error
                self._converting = False

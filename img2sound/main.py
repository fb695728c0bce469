# main.py
"""
Bare-bones entry point to turn the middle row of an image into a WAV file.
No CLI flags; just edit the constants below.

Flow:
  converter.read_image -> conversion.convert_image -> ./wav_output/output_*.wav
"""

import logging

from img2sound.config import (
    DEFAULT_BASE_FREQ_HZ,
    DEFAULT_DENSITY,
    DEFAULT_DURATION_MS,
    SynthesisParams,
    get_output_dir,
)
from img2sound.conversion import convert_image
from img2sound.converter import read_image

# ===== EDIT HERE (hard-coded constants) =====
IMAGE_PATH = "image.png"                  # path to your source image
DURATION_MS = DEFAULT_DURATION_MS         # 500..5000
BASE_FREQ_HZ = DEFAULT_BASE_FREQ_HZ       # 220..880
DENSITY = DEFAULT_DENSITY                 # 1..20


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    print(f"Converting from: {IMAGE_PATH}")
    image = read_image(IMAGE_PATH)
    params = SynthesisParams.clamped(DURATION_MS, BASE_FREQ_HZ, DENSITY)
    out_path = convert_image(image, params, get_output_dir())
    print(f"Done. Wrote {out_path}")


if __name__ == "__main__":
    main()

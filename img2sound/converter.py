from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from PIL import Image, ImageOps

from img2sound.errors import ImageReadError, ScanlineRangeError
from img2sound.pixel_luma import PixelLuma

logger = logging.getLogger(__name__)

# Modes whose getpixel() values PixelLuma reads directly.
DIRECT_MODES = {"RGB", "RGBA", "L", "LA"}
SIXTEEN_BIT_MODES = {"I;16", "I;16L", "I;16B", "I;16N"}


def read_image(path: str | Path) -> Image.Image:
    """
    Open an image with Pillow, honour EXIF orientation and return an RGB copy.
    Transparent areas are composited onto black, so they read as dark.

    Raises FileNotFoundError for a missing path and ImageReadError when the
    file exists but is not a decodable image.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(str(p))
    try:
        with Image.open(p) as im:
            im = ImageOps.exif_transpose(im)
            if _has_alpha(im):
                rgba = im.convert("RGBA")
                black = Image.new("RGBA", rgba.size, (0, 0, 0, 255))
                return Image.alpha_composite(black, rgba).convert("RGB")
            return im.convert("RGB")
    except OSError as e:
        raise ImageReadError(f"Failed to open/read image: {p.name}") from e


def _has_alpha(im: Image.Image) -> bool:
    return "A" in im.getbands() or "transparency" in im.info


def middle_row(image) -> int:
    _, h = image.size
    return h // 2


def scanline_intensities(image, row: int, *, bit_depth: int = 8) -> List[float]:
    """
    Brightness of every pixel on one horizontal row, each in 0..1.

    `image` only needs Pillow's `size` and `getpixel((x, y))`. A Pillow image
    outside RGB/RGBA/L/LA (palette, CMYK, ...) is converted first, and 16-bit
    grayscale modes override `bit_depth`. Alpha darkens a pixel in proportion.
    """
    w, h = image.size
    if not (0 <= row < h):
        raise ScanlineRangeError(f"row {row} outside image height {h}")

    if isinstance(image, Image.Image):
        if image.mode in SIXTEEN_BIT_MODES:
            bit_depth = 16
        else:
            if image.mode not in DIRECT_MODES:
                image = image.convert("RGBA" if _has_alpha(image) else "RGB")
            bit_depth = 8

    out: List[float] = []
    for x in range(w):
        out.append(PixelLuma.from_color(image.getpixel((x, row)), bit_depth).intensity)
    logger.debug("Extracted %d intensities from row %d", len(out), row)
    return out

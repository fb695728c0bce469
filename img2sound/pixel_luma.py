from __future__ import annotations

import math

# Perceptual weights for red, green, blue.
LUMA_WEIGHTS = (0.30, 0.59, 0.11)


class PixelLuma:
    """One pixel with its channels scaled to 0..1 and a weighted brightness."""

    def __init__(self, r, g, b, bit_depth: int = 8, alpha=None):
        top = float((1 << bit_depth) - 1)
        # premultiplied: a transparent pixel is black
        cover = 1.0 if alpha is None else alpha / top
        self.r = r / top * cover
        self.g = g / top * cover
        self.b = b / top * cover

    @property
    def intensity(self) -> float:
        wr, wg, wb = LUMA_WEIGHTS
        return self.r * wr + self.g * wg + self.b * wb

    def __repr__(self):
        return f"PixelLuma(r={self.r}, g={self.g}, b={self.b})"

    def __eq__(self, other):
        if not isinstance(other, PixelLuma):
            return NotImplemented
        return (
            math.isclose(self.r, other.r) and math.isclose(self.g, other.g) and math.isclose(self.b, other.b)
        )

    @staticmethod
    def from_color(color, bit_depth: int = 8) -> "PixelLuma":
        """Accept whatever getpixel() hands back: an int (grayscale), L/LA, RGB or RGBA."""
        if isinstance(color, (int, float)):
            return PixelLuma(color, color, color, bit_depth)
        if len(color) < 3:
            alpha = color[1] if len(color) == 2 else None
            return PixelLuma(color[0], color[0], color[0], bit_depth, alpha)
        r, g, b = color[:3]
        alpha = color[3] if len(color) > 3 else None
        return PixelLuma(r, g, b, bit_depth, alpha)

"""Pixel colour rules: flat foreground/background or a diagonal two-stop gradient.

The gradient sweeps from the top-left corner (first colour) to the
bottom-right corner (second colour) with

    t = clamp((x + y) / (width + height), 0, 1)

and only dark pixels take the interpolated colour. Light pixels always keep
the flat background colour.

The sweep spans the whole canvas, quiet zone included. Only the canvas
corners sit at t = 0 and t -> 1; the outermost dark modules land strictly
inside. At size 300 with a 4-module border, the top-left finder starts near
t = 0.15 and the last bottom-right module ends near t = 0.85.
"""

import numpy as np
from PIL import Image

from qrstyle.config import RGB, StyleConfig


def color_for(is_dark: bool, config: StyleConfig) -> RGB:
    """Flat-mode colour of a module."""
    return config.fg_color if is_dark else config.bg_color


def _sweep(x, y, width: int, height: int):
    return np.clip((x + y) / float(width + height), 0.0, 1.0)


def _lerp(c1: RGB, c2: RGB, t):
    start = np.asarray(c1, dtype=np.float64)
    end = np.asarray(c2, dtype=np.float64)
    t = np.asarray(t, dtype=np.float64)[..., None]
    return np.rint(start + (end - start) * t).astype(np.uint8)


def color_at(x: int, y: int, width: int, height: int, config: StyleConfig) -> RGB:
    """Colour of a dark pixel at (x, y) on a width x height image."""
    if config.gradient is None:
        return config.fg_color
    c1, c2 = config.gradient
    r, g, b = _lerp(c1, c2, _sweep(x, y, width, height))
    return int(r), int(g), int(b)


def gradient_layer(width: int, height: int, config: StyleConfig) -> Image.Image:
    """Full-image RGB layer holding :func:`color_at` for every pixel."""
    c1, c2 = config.gradient
    ys, xs = np.mgrid[0:height, 0:width]
    return Image.fromarray(_lerp(c1, c2, _sweep(xs, ys, width, height)), "RGB")


def foreground_layer(width: int, height: int, config: StyleConfig) -> Image.Image:
    """Colour source for dark pixels: gradient when configured, else flat fg."""
    if config.gradient is not None:
        return gradient_layer(width, height, config)
    return Image.new("RGB", (width, height), config.fg_color)


# ---------------------------------------------------------------------------
# WCAG contrast ratio
# ---------------------------------------------------------------------------

def _linearize(channel: int) -> float:
    """Convert sRGB channel (0-255) to linear light value."""
    c = channel / 255.0
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def _luminance(rgb: RGB) -> float:
    """Relative luminance per WCAG 2.0."""
    r, g, b = [_linearize(ch) for ch in rgb]
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def check_contrast(fg: RGB, bg: RGB) -> float:
    """WCAG contrast ratio between two RGB colours (1.0 - 21.0)."""
    l1 = _luminance(fg[:3])
    l2 = _luminance(bg[:3])
    if l1 < l2:
        l1, l2 = l2, l1
    return (l1 + 0.05) / (l2 + 0.05)

"""Module geometry: paint where a module is dark on a single-channel mask.

Shapes only decide *which pixels* are dark. Colour is applied later by
compositing a colour layer through the mask, so every shape works with
every colour mode.
"""

from PIL import ImageDraw

from qrstyle.config import DotStyle, EyeStyle, StyleConfig
from qrstyle.regions import EYE_SIZE, Region

INK = 255
PAPER = 0

ROUNDED_CORNER = 0.3

# below this many pixels per module a curved shape loses pixels; fill the square
MIN_SHAPE_PX = 3

Rect = tuple[int, int, int, int]


def module_rect(row: int, col: int, layout) -> Rect:
    """Inclusive pixel box (x0, y0, x1, y1) of module (row, col)."""
    m = layout.module_px
    x0 = layout.offset + col * m
    y0 = layout.offset + row * m
    return x0, y0, x0 + m - 1, y0 + m - 1


def _inset(rect: Rect, px: int) -> Rect:
    x0, y0, x1, y1 = rect
    return x0 + px, y0 + px, x1 - px, y1 - px


# ---------------------------------------------------------------------------
# Per-module shapes
# ---------------------------------------------------------------------------

def _square(draw: ImageDraw.ImageDraw, rect: Rect) -> None:
    draw.rectangle(rect, fill=INK)


def _circle(draw: ImageDraw.ImageDraw, rect: Rect) -> None:
    if rect[2] - rect[0] + 1 < MIN_SHAPE_PX:
        return _square(draw, rect)
    draw.ellipse(rect, fill=INK)


def _rounded(draw: ImageDraw.ImageDraw, rect: Rect) -> None:
    side = rect[2] - rect[0] + 1
    if side < MIN_SHAPE_PX:
        return _square(draw, rect)
    radius = max(1, round(side * ROUNDED_CORNER))
    draw.rounded_rectangle(rect, radius=radius, fill=INK)


_DOT_SHAPES = {
    DotStyle.SQUARE: _square,
    DotStyle.CIRCLE: _circle,
    DotStyle.ROUNDED: _rounded,
}

# a lone eye module drawn at module scale
_EYE_MODULE_SHAPES = {
    EyeStyle.SQUARE: _square,
    EyeStyle.CIRCLE: _circle,
    EyeStyle.FRAME: _rounded,
}


def draw_module(
    draw: ImageDraw.ImageDraw,
    region: Region,
    is_dark: bool,
    rect: Rect,
    config: StyleConfig,
) -> None:
    """Paint one module. Light modules leave the mask untouched."""
    if not is_dark:
        return
    if region.is_eye:
        _EYE_MODULE_SHAPES[config.eye_style](draw, rect)
    else:
        _DOT_SHAPES[config.dot_style](draw, rect)


# ---------------------------------------------------------------------------
# Whole-eye shapes
# ---------------------------------------------------------------------------

def _eye_square(draw, rect, modules, m):
    x0, y0 = rect[0], rect[1]
    for r in range(EYE_SIZE):
        for c in range(EYE_SIZE):
            if modules[r][c]:
                px, py = x0 + c * m, y0 + r * m
                draw.rectangle((px, py, px + m - 1, py + m - 1), fill=INK)


def _eye_circle(draw, rect, modules, m):
    draw.ellipse(rect, fill=INK)
    draw.ellipse(_inset(rect, m), fill=PAPER)
    draw.ellipse(_inset(rect, 2 * m), fill=INK)


def _eye_frame(draw, rect, modules, m):
    draw.rounded_rectangle(rect, radius=m, outline=INK, width=m)
    draw.rounded_rectangle(_inset(rect, 2 * m), radius=max(1, m // 2), fill=INK)


_EYE_SHAPES = {
    EyeStyle.SQUARE: _eye_square,
    EyeStyle.CIRCLE: _eye_circle,
    EyeStyle.FRAME: _eye_frame,
}


def draw_eye(
    draw: ImageDraw.ImageDraw,
    region: Region,
    rect: Rect,
    modules,
    config: StyleConfig,
) -> None:
    """Paint a whole 7x7 finder block as one shape.

    Args:
        draw:    Drawer over the dark-pixel mask.
        region:  Which eye is being drawn.
        rect:    Inclusive pixel box of the full 7x7 block.
        modules: The block's 7x7 module values (row-major).
        config:  Resolved style; only ``eye_style`` is read.
    """
    if not region.is_eye:
        raise ValueError(f"draw_eye called for {region}")
    m = (rect[2] - rect[0] + 1) // EYE_SIZE
    if m < MIN_SHAPE_PX:
        return _eye_square(draw, rect, modules, m)
    _EYE_SHAPES[config.eye_style](draw, rect, modules, m)

"""Canvas assembly: layout, module iteration and final compositing."""

from dataclasses import dataclass

import numpy as np
from PIL import Image, ImageDraw

from qrstyle.color import check_contrast, foreground_layer
from qrstyle.config import StyleConfig
from qrstyle.errors import InvalidDimension, InvalidMatrixSize
from qrstyle.logging import audit, get_logger, trace
from qrstyle.logo import apply_logo
from qrstyle.regions import EYE_SIZE, Region, classify, eye_origins
from qrstyle.shapes import PAPER, draw_eye, draw_module, module_rect

log = get_logger("canvas")

MIN_MODULES = 21   # version 1
MAX_MODULES = 177  # version 40

MIN_CONTRAST = 4.5


@dataclass(frozen=True)
class Layout:
    """Pixel geometry of a symbol on the canvas."""

    n: int
    module_px: int
    offset: int  # pixels from the canvas edge to module (0, 0)
    size: int

    @property
    def symbol_px(self) -> int:
        return self.n * self.module_px


def validate_matrix(matrix) -> np.ndarray:
    """Return *matrix* as an N x N bool array, or raise InvalidMatrixSize."""
    try:
        grid = np.asarray(matrix, dtype=bool)
    except ValueError as exc:
        raise InvalidMatrixSize(f"Module matrix is ragged: {exc}") from exc

    if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
        raise InvalidMatrixSize(f"Module matrix must be square, got shape {grid.shape}")
    n = grid.shape[0]
    if not (MIN_MODULES <= n <= MAX_MODULES) or (n - 17) % 4:
        raise InvalidMatrixSize(
            f"{n} modules per side is not a QR symbol size (21, 25, ..., 177)"
        )
    return grid


def compute_layout(n: int, config: StyleConfig) -> Layout:
    """Fit n modules plus the quiet zone into a config.size square.

    Modules get a whole number of pixels each. Pixels left over from the
    division are split evenly around the symbol, widening the quiet zone.
    """
    module_px = config.size // (n + 2 * config.border)
    if module_px < 1:
        raise InvalidDimension(
            f"{config.size}px cannot fit {n} modules with a {config.border}-module border"
        )
    offset = (config.size - n * module_px) // 2
    return Layout(n=n, module_px=module_px, offset=offset, size=config.size)


def _paint_mask(grid: np.ndarray, layout: Layout, config: StyleConfig) -> Image.Image:
    """Mode 'L' mask of every dark pixel, shapes applied."""
    n = layout.n
    mask = Image.new("L", (layout.size, layout.size), PAPER)
    draw = ImageDraw.Draw(mask)

    for row in range(n):
        for col in range(n):
            region = classify(row, col, n)
            if region is Region.DATA:
                draw_module(draw, region, bool(grid[row, col]), module_rect(row, col, layout), config)

    span = EYE_SIZE * layout.module_px
    for region, (row, col) in eye_origins(n).items():
        x0, y0, _, _ = module_rect(row, col, layout)
        block = grid[row:row + EYE_SIZE, col:col + EYE_SIZE]
        draw_eye(draw, region, (x0, y0, x0 + span - 1, y0 + span - 1), block, config)

    return mask


@trace
def render(matrix, config: StyleConfig) -> Image.Image:
    """Render a module matrix to a config.size x config.size RGB image.

    Args:
        matrix: N x N dark/light values from the QR encoder (not modified).
        config: Resolved style from :func:`qrstyle.config.resolve_style`.

    Returns:
        A new PIL image; the caller owns it from here on.

    Raises:
        InvalidMatrixSize: the matrix is not a QR symbol shape.
        InvalidDimension: config.size is too small for the symbol.
    """
    grid = validate_matrix(matrix)
    layout = compute_layout(grid.shape[0], config)

    dark = config.gradient or (config.fg_color,)
    ratio = min(check_contrast(c, config.bg_color) for c in dark)
    if ratio < MIN_CONTRAST:
        log.warning("Contrast ratio %.1f:1 is below %.1f:1, scannability at risk", ratio, MIN_CONTRAST)

    mask = _paint_mask(grid, layout, config)
    canvas = Image.new("RGB", (config.size, config.size), config.bg_color)
    canvas.paste(foreground_layer(config.size, config.size, config), (0, 0), mask)

    if config.logo is not None:
        apply_logo(canvas, config.logo, config)

    audit(
        "canvas.rendered", logger=log,
        modules=f"{layout.n}x{layout.n}",
        module_px=layout.module_px,
        offset=layout.offset,
        image_px=f"{config.size}x{config.size}",
        dot=config.dot_style.value,
        eye=config.eye_style.value,
        gradient=config.gradient is not None,
        logo=config.logo is not None,
    )
    return canvas

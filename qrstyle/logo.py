"""Logo compositing: centred overlay on a background-coloured clearing plate.

The overlay destroys the modules underneath it. Readers recover them through
error correction, so callers should encode with a high level (H recommended)
whenever a logo is set. Nothing here checks scannability.
"""

from pathlib import Path

from PIL import Image, ImageDraw

from qrstyle.config import RGB, StyleConfig
from qrstyle.errors import LogoDecodeFailure
from qrstyle.logging import audit, get_logger, trace

log = get_logger("logo")


def logo_box(size: int, ratio: float) -> tuple[int, int, int]:
    """Top-left corner and side (x0, y0, side) of the centred logo square."""
    side = max(1, round(size * ratio))
    x0 = (size - side) // 2
    return x0, x0, side


def plate_margin(side: int) -> int:
    """Padding in pixels between the logo square and the clearing plate edge."""
    return max(2, side // 20)


def _scale_preserving_aspect(original_size: tuple[int, int], target: int) -> tuple[int, int]:
    """Scale (w, h) so the larger dimension equals *target*, preserving aspect."""
    w, h = original_size
    aspect = w / h
    if aspect >= 1:
        return target, max(1, round(target / aspect))
    return max(1, round(target * aspect)), target


@trace
def fit_logo(logo: Image.Image, side: int, bg_color: RGB) -> Image.Image:
    """Letterbox *logo* into an opaque side x side RGB square.

    The logo keeps its aspect ratio. Transparent pixels and the letterbox bars
    take the background colour.
    """
    rgba = logo.convert("RGBA")
    new_w, new_h = _scale_preserving_aspect(rgba.size, side)
    resized = rgba.resize((new_w, new_h), Image.LANCZOS)

    square = Image.new("RGB", (side, side), bg_color)
    square.paste(resized, ((side - new_w) // 2, (side - new_h) // 2), resized)
    return square


@trace
def apply_logo(canvas: Image.Image, logo: Image.Image, config: StyleConfig) -> Image.Image:
    """Overlay *logo* at the centre of *canvas* in place and return it.

    Args:
        canvas: Rendered RGB symbol, modified in place.
        logo:   Decoded logo image, any mode.
        config: Supplies ``logo_ratio``, ``logo_plate`` and ``bg_color``.
    """
    width = canvas.size[0]
    x0, y0, side = logo_box(width, config.logo_ratio)

    if config.logo_plate:
        pad = plate_margin(side)
        ImageDraw.Draw(canvas).rectangle(
            [x0 - pad, y0 - pad, x0 + side - 1 + pad, y0 + side - 1 + pad],
            fill=config.bg_color,
        )

    canvas.paste(fit_logo(logo, side, config.bg_color), (x0, y0))

    audit(
        "logo.composited", logger=log,
        canvas=f"{width}x{canvas.size[1]}",
        box=f"{side}x{side}@{x0},{y0}",
        ratio=config.logo_ratio,
        plate=config.logo_plate,
    )
    return canvas


@trace
def load_logo(path: str | Path) -> Image.Image:
    """Open and fully decode a logo file.

    Raises:
        LogoDecodeFailure: the file is missing, unreadable, not an image, or
            exceeds Pillow's decompression-bomb limit.
    """
    try:
        with Image.open(path) as img:
            img.load()
            return img.copy()
    except (OSError, Image.DecompressionBombError) as exc:
        raise LogoDecodeFailure(f"Cannot decode logo {str(path)!r}: {exc}") from exc

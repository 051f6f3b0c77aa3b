"""Style configuration: option parsing and eager validation."""

import re
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from PIL import Image, ImageColor

from qrstyle.errors import (
    InvalidColor,
    InvalidDimension,
    InvalidGradientArity,
    InvalidLogoRatio,
    InvalidStyle,
)
from qrstyle.logging import audit, get_logger

log = get_logger("config")

RGB = tuple[int, int, int]

LOGO_RATIO_MIN = 0.1
LOGO_RATIO_MAX = 0.4

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class DotStyle(Enum):
    SQUARE = "square"
    CIRCLE = "circle"
    ROUNDED = "rounded"


class EyeStyle(Enum):
    SQUARE = "square"
    CIRCLE = "circle"
    FRAME = "frame"


@dataclass(frozen=True)
class StyleConfig:
    """Fully resolved rendering options. Build it with :func:`resolve_style`."""

    dot_style: DotStyle = DotStyle.SQUARE
    eye_style: EyeStyle = EyeStyle.SQUARE
    fg_color: RGB = (0, 0, 0)
    bg_color: RGB = (255, 255, 255)
    gradient: tuple[RGB, RGB] | None = None
    size: int = 300
    border: int = 4
    logo: Image.Image | None = None
    logo_ratio: float = 0.2
    logo_plate: bool = True


def parse_color(value: str) -> RGB:
    """Parse '#rgb' or '#rrggbb' into an RGB tuple."""
    if not isinstance(value, str) or not _HEX_COLOR.match(value.strip()):
        raise InvalidColor(value)
    return ImageColor.getrgb(value.strip())[:3]


def parse_gradient(value: str | Sequence[str]) -> tuple[RGB, RGB]:
    """Parse a two-stop gradient.

    Accepts "#ff0000,#0000ff" or a sequence of two colour strings. Arity is
    checked before colour syntax, so "#ff0000" alone is an arity error.
    """
    parts = value.split(",") if isinstance(value, str) else list(value)
    if len(parts) == 1 and isinstance(parts[0], str) and not parts[0].strip():
        parts = []
    if len(parts) != 2:
        raise InvalidGradientArity(len(parts))
    return parse_color(parts[0]), parse_color(parts[1])


def _parse_enum(enum_cls, value, kind: str):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).lower())
    except ValueError:
        raise InvalidStyle(kind, value, [m.value for m in enum_cls]) from None


def resolve_style(
    *,
    dot_style: str | DotStyle = "square",
    eye_style: str | EyeStyle = "square",
    fg_color: str = "#000000",
    bg_color: str = "#ffffff",
    gradient: str | Sequence[str] | None = None,
    size: int = 300,
    border: int = 4,
    logo: Image.Image | None = None,
    logo_ratio: float = 0.2,
    logo_plate: bool = True,
) -> StyleConfig:
    """Validate raw options and freeze them into a :class:`StyleConfig`.

    Every configuration error surfaces here, before any pixel buffer is
    allocated.

    Raises:
        InvalidColor, InvalidGradientArity, InvalidStyle, InvalidLogoRatio,
        InvalidDimension
    """
    config = StyleConfig(
        dot_style=_parse_enum(DotStyle, dot_style, "dot"),
        eye_style=_parse_enum(EyeStyle, eye_style, "eye"),
        fg_color=parse_color(fg_color),
        bg_color=parse_color(bg_color),
        gradient=parse_gradient(gradient) if gradient is not None else None,
        size=size,
        border=border,
        logo=logo,
        logo_ratio=logo_ratio,
        logo_plate=logo_plate,
    )

    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise InvalidDimension(f"Image size must be a positive integer, got {size!r}")
    if isinstance(border, bool) or not isinstance(border, int) or border < 0:
        raise InvalidDimension(f"Border must be a non-negative integer, got {border!r}")
    if logo is not None and not (LOGO_RATIO_MIN <= logo_ratio <= LOGO_RATIO_MAX):
        raise InvalidLogoRatio(logo_ratio, LOGO_RATIO_MIN, LOGO_RATIO_MAX)

    audit(
        "style.resolved", logger=log,
        dot=config.dot_style.value, eye=config.eye_style.value,
        fg=config.fg_color, bg=config.bg_color,
        gradient=config.gradient, size=size, border=border,
        logo=logo is not None,
    )
    return config

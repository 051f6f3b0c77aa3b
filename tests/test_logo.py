from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from qrstyle.config import resolve_style
from qrstyle.errors import LogoDecodeFailure
from qrstyle.logo import apply_logo, fit_logo, load_logo, logo_box


@pytest.mark.parametrize(
    ("size", "ratio", "expected"),
    [
        (500, 0.2, (200, 200, 100)),
        (300, 0.1, (135, 135, 30)),
        (301, 0.4, (90, 90, 120)),
    ],
)
def test_logo_box_is_centred(size: int, ratio: float, expected) -> None:
    assert logo_box(size, ratio) == expected


def test_fit_logo_letterboxes_wide_logo(logo) -> None:
    square = fit_logo(logo, 100, (255, 255, 255))
    arr = np.asarray(square)
    assert square.size == (100, 100)
    assert square.mode == "RGB"
    assert tuple(arr[0, 50]) == (255, 255, 255)
    assert tuple(arr[99, 50]) == (255, 255, 255)
    assert tuple(arr[50, 0]) == (200, 30, 30)
    assert tuple(arr[50, 99]) == (200, 30, 30)


def test_fit_logo_transparent_pixels_take_background() -> None:
    clear = Image.new("RGBA", (20, 20), (0, 0, 0, 0))
    arr = np.asarray(fit_logo(clear, 40, (10, 20, 30)))
    assert (arr == (10, 20, 30)).all()


def test_apply_logo_modifies_canvas_in_place(logo) -> None:
    canvas = Image.new("RGB", (200, 200), (0, 0, 0))
    config = resolve_style(logo=logo, logo_ratio=0.3, bg_color="#ffffff")
    result = apply_logo(canvas, logo, config)

    assert result is canvas
    arr = np.asarray(canvas)
    assert tuple(arr[100, 100]) == (200, 30, 30)
    assert tuple(arr[0, 0]) == (0, 0, 0)
    # plate extends past the logo square
    x0, y0, side = logo_box(200, 0.3)
    assert tuple(arr[y0 - 1, x0 - 1]) == (255, 255, 255)


def test_load_logo_roundtrip(tmp_path: Path, logo) -> None:
    path = tmp_path / "logo.png"
    logo.save(path)
    loaded = load_logo(path)
    assert loaded.size == (64, 32)
    assert loaded.mode == "RGBA"


def test_load_logo_missing_file(tmp_path: Path) -> None:
    with pytest.raises(LogoDecodeFailure) as excinfo:
        load_logo(tmp_path / "nope.png")
    assert isinstance(excinfo.value.__cause__, OSError)


def test_load_logo_not_an_image(tmp_path: Path) -> None:
    path = tmp_path / "logo.png"
    path.write_text("definitely not a png")
    with pytest.raises(LogoDecodeFailure):
        load_logo(path)


def test_load_logo_decompression_bomb(tmp_path: Path, logo, monkeypatch) -> None:
    path = tmp_path / "logo.png"
    logo.save(path)
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 10)
    with pytest.raises(LogoDecodeFailure) as excinfo:
        load_logo(path)
    assert isinstance(excinfo.value.__cause__, Image.DecompressionBombError)

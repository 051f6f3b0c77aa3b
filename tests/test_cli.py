import logging
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from qrstyle.cli import build_parser, format_terminal, main


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    logging.getLogger("qrstyle").handlers.clear()


def test_parser_defaults() -> None:
    args = build_parser().parse_args(["generate", "hello"])
    assert args.output == "qrcode.png"
    assert args.fg_color == "#000000"
    assert args.bg_color == "#ffffff"
    assert args.dot_style == "square"
    assert args.eye_style == "square"
    assert args.ecc == "M"
    assert (args.size, args.border, args.logo_size) == (300, 4, 0.2)
    assert args.gradient is None and args.logo is None and args.version is None


def test_format_terminal() -> None:
    out = format_terminal([[True, False], [False, True]], border=1)
    lines = out.split("\n")
    assert len(lines) == 4
    assert lines[1] == "  ██    "
    assert all(len(line) == 8 for line in lines)


def test_generate_writes_image(tmp_path: Path, capsys) -> None:
    output = tmp_path / "out" / "qr.png"
    main([
        "generate", "https://example.com",
        "-o", str(output),
        "--dot-style", "rounded",
        "--eye-style", "frame",
        "-g", "#ff0000,#0000ff",
        "-s", "320",
        "--show",
    ])
    assert output.exists()
    with Image.open(output) as img:
        assert img.size == (320, 320)
    out = capsys.readouterr().out
    assert "██" in out
    assert "QR code saved to" in out


def test_generate_with_logo(tmp_path: Path) -> None:
    logo_path = tmp_path / "logo.png"
    Image.new("RGB", (40, 40), (0, 128, 0)).save(logo_path)
    output = tmp_path / "qr.png"
    main(["generate", "hello", "-o", str(output), "-l", str(logo_path), "-e", "H", "-s", "400"])
    with Image.open(output) as img:
        arr = np.asarray(img.convert("RGB"))
    assert tuple(arr[200, 200]) == (0, 128, 0)


@pytest.mark.parametrize(
    "extra",
    [
        ["--fg-color", "ff0000"],
        ["-g", "#ff0000"],
        ["-l", "missing.png"],
        ["-v", "1", "-e", "H"],
        ["-v", "0"],
        ["-v", "41"],
    ],
)
def test_generate_reports_errors(tmp_path: Path, capsys, extra) -> None:
    output = tmp_path / "qr.png"
    data = "x" * 100
    with pytest.raises(SystemExit) as excinfo:
        main(["generate", data, "-o", str(output), *extra])
    assert excinfo.value.code == 2
    assert not output.exists()
    assert "error:" in capsys.readouterr().err


def test_no_command_prints_help() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 1

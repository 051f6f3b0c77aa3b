"""qrstyle CLI: encode text and save a styled QR image."""

import argparse
import sys
from pathlib import Path

from qrcode.exceptions import DataOverflowError

from qrstyle.errors import StyleError
from qrstyle.logging import audit, get_logger, setup_logging

log = get_logger("cli")


def format_terminal(matrix, border: int = 1) -> str:
    """Render a module matrix as rows of '██' / '  ' for a terminal."""
    n = len(matrix)
    blank = "  " * (n + 2 * border)
    lines = [blank] * border
    for row in matrix:
        pad = "  " * border
        lines.append(pad + "".join("██" if cell else "  " for cell in row) + pad)
    lines.extend([blank] * border)
    return "\n".join(lines)


def cmd_generate(args):
    """Generate a styled QR code image."""
    from qrstyle.canvas import render
    from qrstyle.config import resolve_style
    from qrstyle.generator import check_logo_ecc, encode_payload, get_module_matrix
    from qrstyle.logo import load_logo

    logo = load_logo(args.logo) if args.logo else None
    config = resolve_style(
        dot_style=args.dot_style,
        eye_style=args.eye_style,
        fg_color=args.fg_color,
        bg_color=args.bg_color,
        gradient=args.gradient,
        size=args.size,
        border=args.border,
        logo=logo,
        logo_ratio=args.logo_size,
        logo_plate=not args.no_logo_plate,
    )
    check_logo_ecc(config, args.ecc)

    matrix = get_module_matrix(encode_payload(args.data, args.encode), version=args.version, ecc=args.ecc)

    if args.show:
        print()
        print(format_terminal(matrix))
        print()

    img = render(matrix, config)

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    img.save(output)
    print(f"QR code saved to: {output} ({img.size[0]}x{img.size[1]})")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="qrstyle", description="Generate QR codes with custom styling")

    # Global logging flags
    parser.add_argument("-V", "--verbose", action="store_true", help="Enable DEBUG-level logging")
    parser.add_argument("--log-file", default=None, help="Write JSON logs to file")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- generate ---
    p_gen = subparsers.add_parser("generate", help="Generate a styled QR code")
    p_gen.add_argument("data", help="Text or URL to encode")
    p_gen.add_argument("-o", "--output", default="qrcode.png",
                       help="Output file path (format follows the suffix)")
    p_gen.add_argument("--fg-color", default="#000000", help="Foreground colour (#rrggbb)")
    p_gen.add_argument("--bg-color", default="#ffffff", help="Background colour (#rrggbb)")
    p_gen.add_argument("-g", "--gradient", default=None, help="Gradient colours, e.g. '#ff0000,#0000ff'")
    p_gen.add_argument("--dot-style", default="square", choices=["square", "circle", "rounded"])
    p_gen.add_argument("--eye-style", default="square", choices=["square", "circle", "frame"])
    p_gen.add_argument("-l", "--logo", default=None, help="Logo image path")
    p_gen.add_argument("--logo-size", type=float, default=0.2, help="Logo width as a fraction of the image (0.1-0.4)")
    p_gen.add_argument("--no-logo-plate", action="store_true", help="Do not clear a plate behind the logo")
    p_gen.add_argument("-e", "--ecc", default="M", choices=["L", "M", "Q", "H"], help="Error correction level")
    p_gen.add_argument("-s", "--size", type=int, default=300, help="Image size in pixels")
    p_gen.add_argument("-b", "--border", type=int, default=4, help="Quiet zone in modules")
    p_gen.add_argument("-v", "--version", type=int, default=None, help="QR version 1-40 (auto if omitted)")
    p_gen.add_argument("--encode", action="store_true", help="Base64-encode the data before generating")
    p_gen.add_argument("--show", action="store_true", help="Print the QR code in the terminal")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    # Setup logging before any command runs
    level = "DEBUG" if args.verbose else "INFO"
    setup_logging(level=level, log_file=args.log_file)
    audit("cli.start", logger=log, command=args.command, verbose=args.verbose)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    commands = {
        "generate": cmd_generate,
    }
    try:
        commands[args.command](args)
    except (StyleError, DataOverflowError) as exc:
        log.error("%s", exc)
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(2)
    audit("cli.done", logger=log, command=args.command)


if __name__ == "__main__":
    main()

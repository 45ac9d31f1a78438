from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from ..model import NamedColorRegistry, format_argb
from ..modes import MODE_NAMES
from .convert import ConvertSettings, Converter
from .images import save_image
from .snippets import SNIPPET_WRAPPERS


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="xpixmap",
        description="Convert between X PixMap (XPM) text and raster images.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    encode = commands.add_parser("encode", help="Convert an image (.png/.bmp/.jpg/.gif) to XPM text")
    encode.add_argument("path", help="Image file to convert")
    encode.add_argument("-o", "--output", help="Output file (default: stdout)")
    encode.add_argument("--mode", choices=sorted(MODE_NAMES), default="default", help="Color variants to write")
    encode.add_argument(
        "--as", dest="snippet", choices=sorted(SNIPPET_WRAPPERS), help="Wrap the lines as a source array literal"
    )

    decode = commands.add_parser("decode", help="Render an XPM file (.xpm/.txt) to an image file")
    decode.add_argument("path", help="XPM file to render")
    decode.add_argument("-o", "--output", required=True, help="Output image; format follows the extension")
    decode.add_argument("--mode", choices=sorted(MODE_NAMES), default="default", help="Color variant to read")

    check = commands.add_parser("check", help="Parse an XPM file and print its header")
    check.add_argument("path", help="XPM file to check")

    commands.add_parser("colors", help="List the color names accepted in color definitions")
    return parser.parse_args(argv)


def _settings(args: argparse.Namespace) -> ConvertSettings:
    settings = ConvertSettings()
    mode = getattr(args, "mode", None)
    if mode:
        settings.mode = MODE_NAMES[mode]
    settings.snippet = getattr(args, "snippet", None)
    return settings


def run_encode(args: argparse.Namespace) -> int:
    text = Converter(_settings(args)).image_to_xpm(args.path)
    if args.output:
        with open(args.output, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(text)
    else:
        sys.stdout.write(text)
    return 0


def run_decode(args: argparse.Namespace) -> int:
    img = Converter(_settings(args)).xpm_to_image(args.path)
    save_image(img, args.output)
    return 0


def run_check(args: argparse.Namespace) -> int:
    document = Converter(_settings(args)).read_document(args.path)
    header = document.header
    print(f"{args.path}: {header.width}x{header.height}, {header.number_of_colors} colors, "
          f"{header.characters_per_pixel} chars/pixel")
    if header.hotspot is not None:
        print(f"hotspot: {header.hotspot[0]},{header.hotspot[1]}")
    if document.extensions.lines:
        print(f"extensions: {len(document.extensions.lines)} lines")
    return 0


def list_colors(args: argparse.Namespace) -> int:
    registry = NamedColorRegistry.load()
    for name in registry.names:
        print(f"{name} {format_argb(registry.get(name))}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    handlers = {"encode": run_encode, "decode": run_decode, "check": run_check, "colors": list_colors}
    try:
        return handlers[args.command](args)
    except Exception as exc:
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())

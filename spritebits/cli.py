"""Command-line entry point for sprite-to-byte-table conversion."""

import argparse
import logging
import sys

from . import __version__
from .core import BitOrder, ConversionSettings, FrameMode
from .core.converter import convert
from .core.errors import SpritebitsError
from .core.packer import FOREGROUND_RULES

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="[%(levelname)s] %(name)s: %(message)s",
    )
    logging.getLogger("spritebits").setLevel(level)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spritebits",
        description="Convert a sprite image into a packed 1-bit C byte table.",
    )
    parser.add_argument("--in", dest="input", default="-", help="Input image file or - for stdin (default: -)")
    parser.add_argument("--out", dest="output", default="-", help="Output file or - for stdout (default: -)")
    parser.add_argument("--name", default="sprite", help="Name of the emitted array variable (default: sprite)")
    parser.add_argument(
        "--json",
        dest="metadata",
        help="Sprite sheet frame data (JSON); when given, every frame is emitted",
    )
    parser.add_argument(
        "--order",
        choices=[order.value for order in BitOrder],
        default=BitOrder.COLUMN_MAJOR.value,
        help="Pack 8 pixels per byte along a row or down a column (default: column)",
    )
    parser.add_argument(
        "--header-guard",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Wrap the output in #ifndef/#define/#endif (default: on)",
    )
    parser.add_argument(
        "--progmem",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Qualify the byte table with PROGMEM (default: on)",
    )
    parser.add_argument(
        "--foreground",
        choices=sorted(FOREGROUND_RULES),
        default="visible",
        help="Which pixels become set bits: any visible pixel, or visible non-black pixels (default: visible)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def settings_from_args(args: argparse.Namespace) -> ConversionSettings:
    return ConversionSettings(
        input_path=args.input,
        output_path=args.output,
        name=args.name,
        metadata_path=args.metadata,
        mode=FrameMode.MULTI if args.metadata is not None else FrameMode.SINGLE,
        bit_order=BitOrder(args.order),
        header_guard=args.header_guard,
        progmem=args.progmem,
        foreground=args.foreground,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        convert(settings_from_args(args))
    except SpritebitsError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

from __future__ import annotations

import argparse
import json
import logging
import sys

from .colors import InvalidColorFormat
from .config import PaletteSettings
from .contrast import adaptive_text_color
from .io import write_result_json
from .pipeline import PaletteExtractor


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="brand-palette",
        description="Logo palette extraction and adaptive text contrast.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log errors.")

    subparsers = parser.add_subparsers(dest="command", required=True)

    extract = subparsers.add_parser(
        "extract",
        help="Extract up to four brand colors from a logo image.",
    )
    extract.add_argument(
        "--image", required=True, help="Path or URL to the logo image."
    )
    extract.add_argument(
        "--stride",
        type=int,
        default=None,
        help="Sample every Nth pixel (default 10).",
    )
    extract.add_argument(
        "--target-samples",
        type=int,
        default=None,
        help="Derive the stride from the image area to take about this many samples.",
    )
    extract.add_argument(
        "--out",
        default=None,
        help="Optional JSON output path. If omitted, prints JSON to stdout.",
    )

    contrast = subparsers.add_parser(
        "contrast",
        help="Print the legible text color for each background color.",
    )
    contrast.add_argument("colors", nargs="+", help="Background colors as #RRGGBB.")

    return parser


def _setup_logging(verbose: bool, quiet: bool) -> None:
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose, args.quiet)

    if args.command == "extract":
        overrides: dict[str, int] = {}
        if args.stride is not None:
            overrides["stride"] = args.stride
        if args.target_samples is not None:
            overrides["target_samples"] = args.target_samples
        extractor = PaletteExtractor(settings=PaletteSettings(**overrides))
        result = extractor.extract(args.image)

        if args.out:
            write_result_json(result, args.out)
        else:
            print(json.dumps(result.to_dict(), indent=2))
        return 0

    if args.command == "contrast":
        status = 0
        for color in args.colors:
            try:
                print(f"{color} {adaptive_text_color(color)}")
            except InvalidColorFormat as exc:
                logging.error("%s", exc)
                status = 2
        return status

    parser.error("unknown command")
    return 2


if __name__ == "__main__":
    sys.exit(main())

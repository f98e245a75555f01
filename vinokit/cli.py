"""Command line tool that turns an image into a raw tensor file."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from vinokit.converter import ConversionError, Dimensions, convert


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tensor-converter",
        description="Decode and resize images into valid tensors.",
    )
    parser.add_argument("input", type=Path, metavar="INPUT_FILE", help="Input file.")
    parser.add_argument("output", type=Path, metavar="OUTPUT_FILE", help="Output file.")
    parser.add_argument(
        "dimensions",
        metavar="OUTPUT_DIMENSIONS",
        help='The dimensions of the output file as "[height]x[width]x[channels]x[precision]"; '
        "e.g. 300x300x3xfp32.",
    )
    parser.add_argument(
        "format",
        metavar="OUTPUT_FORMAT",
        nargs="?",
        default="nchw",
        help='Format of the output tensor: "nchw" or "nhwc".',
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the converter and return the process exit status."""
    logging.basicConfig(level=logging.WARNING)
    options = _build_parser().parse_args(argv)

    try:
        dimensions = Dimensions.parse(options.dimensions)
    except ConversionError as error:
        print(f"Failed to parse dimensions: {error}", file=sys.stderr)
        return 1

    try:
        tensor = convert(options.input, dimensions, options.format)
    except ConversionError as error:
        print(f"Failed to convert image: {error}", file=sys.stderr)
        return 1

    try:
        options.output.write_bytes(tensor)
    except OSError as error:
        print(f"Failed to write tensor: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
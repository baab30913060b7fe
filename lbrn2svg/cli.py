"""
lbrn2svg: convert a LightBurn project to SVG.

Usage:
  lbrn2svg input.lbrn2 output.svg
  lbrn2svg input.lbrn2 output.svg --stroke-width 0.1mm --show-warnings

Exit codes: 1 usage, 2 read failure, 3 parse failure, 4 conversion failure,
5 write failure.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from lbrn2svg.config import settings
from lbrn2svg.engine.context import Diagnostics
from lbrn2svg.lbrn.builder import ProjectParseError, parse_project
from lbrn2svg.svg.serializer import render_svg

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_READ = 2
EXIT_PARSE = 3
EXIT_CONVERT = 4
EXIT_WRITE = 5


class _ArgumentParser(argparse.ArgumentParser):
    # argparse exits with 2 on bad usage, which is the read-failure code here
    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="lbrn2svg", description="LightBurn .lbrn2 → SVG converter")
    parser.add_argument("input", help="LBRN2 project file")
    parser.add_argument("output", help="SVG file to write")
    parser.add_argument("--stroke-width", help="Stroke width for layers without one (e.g. 0.1mm)")
    parser.add_argument("-w", "--show-warnings", action="store_true", help="Print conversion warnings")
    parser.add_argument(
        "--log-level",
        default=settings.lbrn2svg_log_level,
        help="Logging level (debug, info, warning, error)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    input_path = Path(args.input)
    output_path = Path(args.output)

    try:
        xml_text = input_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Failed to read input file: {input_path} ({e})", file=sys.stderr)
        return EXIT_READ

    try:
        document = parse_project(xml_text)
    except ProjectParseError as e:
        print(f"Failed to parse LBRN2 file: {e}", file=sys.stderr)
        return EXIT_PARSE

    diagnostics = Diagnostics()
    try:
        svg = render_svg(
            document,
            config=settings.converter_config(args.stroke_width),
            diagnostics=diagnostics,
        )
    except Exception as e:
        logger.exception("Conversion failed")
        print(f"Failed to convert to SVG: {e}", file=sys.stderr)
        return EXIT_CONVERT

    try:
        output_path.write_text(svg, encoding="utf-8")
    except OSError as e:
        print(f"Failed to write output file: {output_path} ({e})", file=sys.stderr)
        return EXIT_WRITE

    if args.show_warnings:
        for warning in diagnostics.warnings:
            print(f"  warning: {warning}", file=sys.stderr)
    print(f"SVG written to {output_path}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

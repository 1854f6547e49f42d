#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromakit/subcommands/convert.py

import argparse
import sys

from chromakit.core import config as c
from chromakit.core.conversions import hex_to_rgb
from chromakit.shared.formatting import format_color
from chromakit.shared.logger import ChromakitArgumentParser
from chromakit.shared.sanitizer import INPUT_HANDLERS


def handle_convert_command(args: argparse.Namespace) -> None:
    color = hex_to_rgb(args.hex)
    out = format_color(color, args.to_format)

    def bold(t): return f"{c.BOLD_WHITE}{t}{c.RESET}"

    if args.verbose:
        print(f"{bold(color.hex)} {c.MSG_BOLD_COLORS['info']}->{c.RESET} {bold(out)}")
    else:
        print(out)


def get_convert_parser() -> argparse.ArgumentParser:
    parser = ChromakitArgumentParser(
        prog="chromakit convert",
        description="chromakit convert: render a hex color in another notation",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-H", "--hex",
        required=True,
        type=INPUT_HANDLERS["hex"],
        help="6-digit hex color code, '#' optional",
    )
    parser.add_argument(
        "-t", "--to-format",
        type=INPUT_HANDLERS["color_format"],
        default=c.DEFAULT_COLOR_FORMAT,
        help=f"output format: {', '.join(c.COLOR_FORMATS)} (default: {c.DEFAULT_COLOR_FORMAT})",
    )
    parser.add_argument(
        "-V", "--verbose",
        action="store_true",
        help="show the source color next to the result",
    )
    return parser


def main(argv=None) -> None:
    parser = get_convert_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    handle_convert_command(args)


if __name__ == "__main__":
    main()

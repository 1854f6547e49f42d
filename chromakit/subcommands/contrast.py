#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromakit/subcommands/contrast.py

import argparse
import sys

from chromakit.core import config as c
from chromakit.core.contrast import evaluate_contrast
from chromakit.core.conversions import hex_to_rgb
from chromakit.shared.formatting import format_ratio
from chromakit.shared.logger import ChromakitArgumentParser, log
from chromakit.shared.preview import print_color_block
from chromakit.shared.sanitizer import INPUT_HANDLERS


def _level(name: str, verdict: str) -> str:
    color = c.MSG_BOLD_COLORS["success"] if verdict == "Pass" else c.MSG_BOLD_COLORS["error"]
    return f"{name:<18}{c.BOLD_WHITE}:{c.RESET}   {color}{verdict}{c.RESET}"


def handle_contrast_command(args: argparse.Namespace) -> None:
    result = evaluate_contrast(args.background, args.foreground)
    if result is None:
        log("error", "could not compute contrast for the given colors")
        sys.exit(2)

    print()
    print_color_block(hex_to_rgb(args.background), "background")
    print_color_block(hex_to_rgb(args.foreground), "foreground")
    print()
    print(f"{'contrast ratio':<18}{c.BOLD_WHITE}:{c.RESET}   {c.BOLD_WHITE}{format_ratio(result.ratio)}{c.RESET}")
    for name, verdict in result.levels.items():
        print(_level(f"WCAG {name}", verdict))
    print()


def get_contrast_parser() -> argparse.ArgumentParser:
    parser = ChromakitArgumentParser(
        prog="chromakit contrast",
        description="chromakit contrast: WCAG contrast ratio between two colors",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-b", "--background",
        type=INPUT_HANDLERS["hex"],
        default="FFFFFF",
        help="background hex color (default: FFFFFF)",
    )
    parser.add_argument(
        "-f", "--foreground",
        type=INPUT_HANDLERS["hex"],
        default="000000",
        help="foreground hex color (default: 000000)",
    )
    return parser


def main(argv=None) -> None:
    parser = get_contrast_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    handle_contrast_command(args)


if __name__ == "__main__":
    main()

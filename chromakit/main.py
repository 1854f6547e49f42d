#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromakit/main.py

import argparse
import sys

from chromakit import __version__
from chromakit.core import config as c
from chromakit.core.color import Color
from chromakit.core.contrast import evaluate_contrast
from chromakit.core.conversions import hex_to_rgb, rgb_to_hsl, rgb_to_oklch
from chromakit.core.luminance import relative_luminance
from chromakit.shared.formatting import format_hsl, format_oklch, format_ratio, format_rgb
from chromakit.shared.logger import ChromakitArgumentParser, log
from chromakit.shared.preview import print_color_block
from chromakit.shared.sanitizer import INPUT_HANDLERS
from chromakit.subcommands.command_registry import SUBCOMMANDS

WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)


def get_color_parser() -> argparse.ArgumentParser:
    """Create argument parser for the main color (inspector) command."""
    parser = ChromakitArgumentParser(
        prog="chromakit",
        description="chromakit: color conversion, WCAG contrast and vision simulation",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )

    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"chromakit {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show full help message including subcommands",
    )
    parser.add_argument(
        "-H",
        "--hex",
        dest="hex",
        type=INPUT_HANDLERS["hex"],
        help="6-digit hex color code, '#' optional",
    )

    # Technical Information Flags
    info_group = parser.add_argument_group("technical information flags")
    info_group.add_argument(
        "-all",
        "--all-tech-infos",
        action="store_true",
        help="show all technical information",
    )
    info_group.add_argument(
        "-rgb",
        "--red-green-blue",
        action="store_true",
        dest="rgb",
        help="show RGB values",
    )
    info_group.add_argument(
        "-hsl",
        "--hue-saturation-lightness",
        action="store_true",
        dest="hsl",
        help="show HSL values",
    )
    info_group.add_argument(
        "--oklch",
        action="store_true",
        dest="oklch",
        help="show OKLCH values",
    )
    info_group.add_argument(
        "-l",
        "--luminance",
        action="store_true",
        help="show relative luminance",
    )
    info_group.add_argument(
        "-wcag",
        "--contrast",
        action="store_true",
        help="show WCAG contrast against white and black",
    )

    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def _info_line(label: str, value: str) -> str:
    return f"{c.MSG_BOLD_COLORS['info']}{label:<18}{c.RESET}{c.BOLD_WHITE}: {value}{c.RESET}"


def print_color_and_info(color: Color, args: argparse.Namespace) -> None:
    """Print color block and technical information based on arguments."""
    print()
    print_color_block(color, f"{c.BOLD_WHITE}color{c.RESET}")

    if getattr(args, "rgb", False):
        print("\n" + _info_line("rgb", format_rgb(color)))
    if getattr(args, "hsl", False):
        print("\n" + _info_line("hsl", format_hsl(rgb_to_hsl(*color.rgb))))
    if getattr(args, "oklch", False):
        print("\n" + _info_line("oklch", format_oklch(rgb_to_oklch(*color.rgb))))
    if getattr(args, "luminance", False):
        print("\n" + _info_line("luminance", f"{relative_luminance(color):.6f}"))
    if getattr(args, "contrast", False):
        print()
        for name, other in (("white", WHITE), ("black", BLACK)):
            result = evaluate_contrast(other, color)
            levels = " ".join(f"{lvl}:{verdict}" for lvl, verdict in result.levels.items())
            print(_info_line(f"contrast {name}", f"{format_ratio(result.ratio)}  {levels}"))
    print()


def handle_color_command(args: argparse.Namespace) -> None:
    """Entry point for the core color command."""
    parser = get_color_parser()

    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            getter = getattr(module, f"get_{name}_parser")
            getter().print_help()
        sys.exit(0)

    # Routing Validation (if a command was passed in the wrong place)
    if args.command:
        if args.command.lower() in SUBCOMMANDS:
            log("error", f"the '{args.command}' command must be the first argument")
        else:
            log("error", f"unrecognized command or argument: '{args.command}'")
        sys.exit(2)

    if not args.hex:
        log("error", "the argument -H/--hex is required")
        log("info", "use 'chromakit --help' for more information")
        sys.exit(2)

    if args.all_tech_infos:
        for key in c.TECH_INFO_KEYS:
            setattr(args, key, True)

    print_color_and_info(hex_to_rgb(args.hex), args)


def main(argv=None) -> None:
    """Main entry point for chromakit CLI"""
    argv = list(sys.argv[1:] if argv is None else argv)

    # Subcommand Routing (Global behavior)
    if argv:
        cmd = argv[0].lower()
        if cmd in SUBCOMMANDS:
            SUBCOMMANDS[cmd].main(argv[1:])
            sys.exit(0)

    parser = get_color_parser()
    args = parser.parse_args(argv)
    handle_color_command(args)


if __name__ == "__main__":
    main()

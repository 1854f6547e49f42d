#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromakit/subcommands/vision.py

import argparse
import sys

from chromakit.core import config as c
from chromakit.core.conversions import hex_to_rgb
from chromakit.core.vision import DeficiencyKind, apply_deficiency, svg_filter
from chromakit.shared.logger import ChromakitArgumentParser, log
from chromakit.shared.preview import print_color_block
from chromakit.shared.sanitizer import INPUT_HANDLERS

# (short flag, long flag, kind)
SIMULATE_FLAGS = [
    ("-p", "--protanopia", DeficiencyKind.PROTANOPIA),
    ("-d", "--deuteranopia", DeficiencyKind.DEUTERANOPIA),
    ("-t", "--tritanopia", DeficiencyKind.TRITANOPIA),
    ("-pa", "--protanomaly", DeficiencyKind.PROTANOMALY),
    ("-da", "--deuteranomaly", DeficiencyKind.DEUTERANOMALY),
    ("-ta", "--tritanomaly", DeficiencyKind.TRITANOMALY),
    ("-a", "--achromatopsia", DeficiencyKind.ACHROMATOPSIA),
    ("-am", "--achromatomaly", DeficiencyKind.ACHROMATOMALY),
]


def selected_kinds(args: argparse.Namespace):
    if args.all_simulates:
        return list(DeficiencyKind)
    return [kind for _, _, kind in SIMULATE_FLAGS if getattr(args, kind.value)]


def handle_vision_command(args: argparse.Namespace) -> None:
    kinds = selected_kinds(args)
    if not kinds:
        log("warning", "no simulation type selected, use -all to show every type")
        return

    if args.svg:
        for kind in kinds:
            print(svg_filter(kind, f"{c.DEFAULT_FILTER_ID}-{kind.value}"))
        return

    base = hex_to_rgb(args.hex)
    factor = args.intensity / 100.0
    perc_str = f"{args.intensity}%"

    print()
    print_color_block(base, f"{c.BOLD_WHITE}base color{c.RESET}")
    print()
    for kind in kinds:
        sim = apply_deficiency(base, kind, factor)
        label = f"{c.MSG_BOLD_COLORS['info']}{kind.value:<14}{perc_str:>4}{c.RESET}"
        print_color_block(sim, label)
    print()


def get_vision_parser() -> argparse.ArgumentParser:
    parser = ChromakitArgumentParser(
        prog="chromakit vision",
        description="chromakit vision: simulate color vision deficiencies",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-H", "--hex",
        type=INPUT_HANDLERS["hex"],
        default="6366F1",
        help="base hex code (default: 6366F1)",
    )
    parser.add_argument(
        "-i", "--intensity",
        type=INPUT_HANDLERS["intensity"],
        default=100,
        help="simulation intensity: 0 to 100 (default: 100)",
    )
    parser.add_argument(
        "--svg",
        action="store_true",
        help="print SVG filter markup for the selected types instead of swatches",
    )
    simulate_group = parser.add_argument_group("simulation types")
    simulate_group.add_argument(
        "-all", "--all-simulates",
        action="store_true",
        help="show all simulation types",
    )
    for short, long, kind in SIMULATE_FLAGS:
        simulate_group.add_argument(
            short, long,
            dest=kind.value,
            action="store_true",
            help=f"simulate {kind.label.lower()}",
        )
    return parser


def main(argv=None) -> None:
    parser = get_vision_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    handle_vision_command(args)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromakit/shared/preview.py

import re

from chromakit.core import config as c
from chromakit.core.color import Color

ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')


def get_visible_len(s: str) -> int:
    return len(ANSI_ESCAPE.sub('', s))


def print_color_block(color: Color, title: str = "color", end: str = "\n") -> None:
    vis_len = get_visible_len(title)
    padding = " " * max(0, 18 - vis_len)

    print(
        f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   "
        f"\033[48;2;{color.r};{color.g};{color.b}m                {c.RESET}  "
        f"{c.BOLD_WHITE}{color.hex}{c.RESET}",
        end=end,
    )

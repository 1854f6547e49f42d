#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromakit/shared/logger.py

import argparse
import sys

from chromakit.core import config as c

# Levels that are normal program output; everything else is diagnostics.
STDOUT_LEVELS = frozenset({"info", "success", "dim"})


def _one_line(message) -> str:
    """Collapse whitespace so echoed user input cannot forge extra log lines."""
    return " ".join(str(message).split())


def log(level: str, message: str) -> None:
    """
    Print a ``[level] message`` line.

    Unknown levels are reported as ``error``. Messages are flattened to a
    single line because they often quote raw command-line input.
    """
    level = str(level).strip().lower()
    if level not in c.MSG_BOLD_COLORS:
        level = "error"
    stream = sys.stdout if level in STDOUT_LEVELS else sys.stderr
    tag_color = c.MSG_BOLD_COLORS[level]
    msg_color = c.MSG_COLORS[level]
    print(f"{tag_color}[{level}]{c.RESET} {msg_color}{_one_line(message)}{c.RESET}", file=stream)


class ChromakitArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """Report argparse errors through ``log`` and exit with status 2."""
        log("error", message)
        sys.exit(2)

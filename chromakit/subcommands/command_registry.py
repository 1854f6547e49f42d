#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromakit/subcommands/command_registry.py

from . import (
    contrast,
    convert,
    vision
)

SUBCOMMANDS = {
    'convert': convert,
    'contrast': contrast,
    'vision': vision
}

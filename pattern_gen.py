#!/usr/bin/env python3
"""
Random Pattern Generator
========================
Prints a square grid where every cell is independently filled with '#'
(or left blank) based on a fill frequency.

Usage: pattern_gen.py [size] [frequency]

The output can be saved straight to a file and loaded as a starting
pattern - '#' marks a live cell, anything else is empty.
"""

# =============================================================================
# CONFIGURATION - Edit these values
# =============================================================================

DEFAULT_SIZE = 5             # Edge length when no size is given
DEFAULT_FREQUENCY = 0.5      # Chance that a cell is filled (0.0 - 1.0)

FILLED = "#"
BLANK = " "

HELP_FLAG = "--help"
USAGE = "usage: [bin] <size> <frequency>"

# =============================================================================

import math
import random
import re
import sys


# Leading numeric part only - trailing junk is ignored ("12abc" -> 12)
INT_PREFIX_PATTERN = re.compile(r'\s*([+-]?\d+)')
FLOAT_PREFIX_PATTERN = re.compile(
    r'\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))'
)


def parse_int_or_default(text, default):
    """
    Read an integer from the start of text.
    Returns default if there is nothing numeric to read.
    """
    if text is None:
        return default

    match = INT_PREFIX_PATTERN.match(text)
    if not match:
        return default

    try:
        return int(match.group(1))
    except (ValueError, TypeError):
        return default


def parse_float_or_default(text, default):
    """
    Read a float from the start of text.
    Returns default if there is nothing numeric to read.
    """
    if text is None:
        return default

    match = FLOAT_PREFIX_PATTERN.match(text)
    if not match:
        return default

    try:
        value = float(match.group(1).replace("Infinity", "inf"))
    except (ValueError, TypeError):
        return default

    if math.isnan(value):
        return default
    return value


def resolve_arguments(args):
    """
    Turn positional arguments into (size, frequency, show_help).
    Missing or unreadable values fall back to the defaults.
    """
    first = args[0] if len(args) > 0 else None
    second = args[1] if len(args) > 1 else None

    show_help = first == HELP_FLAG
    size = parse_int_or_default(first, DEFAULT_SIZE)
    frequency = parse_float_or_default(second, DEFAULT_FREQUENCY)

    return size, frequency, show_help


def generate_rows(size, frequency, rng=None):
    """
    Yield each row of the grid as a string ending in a newline.

    One draw per cell, row by row. A draw below frequency is filled.
    A size of zero or less yields no rows.
    """
    if rng is None:
        rng = random

    for _ in range(size):
        cells = []
        for _ in range(size):
            cells.append(FILLED if rng.random() < frequency else BLANK)
        yield "".join(cells) + "\n"


def render_grid(size, frequency, rng=None):
    """Build the whole grid as one string"""
    return "".join(generate_rows(size, frequency, rng))


def main(argv=None, rng=None):
    if argv is None:
        argv = sys.argv[1:]

    size, frequency, show_help = resolve_arguments(argv)

    # Help does not stop generation - a default grid still follows
    if show_help:
        print(USAGE)

    print(render_grid(size, frequency, rng))


if __name__ == '__main__':
    main()

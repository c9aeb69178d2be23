"""Named palette and the name/number color codec.

The palette maps the color names accepted in configuration ("red",
"lightblue", "default", ...) onto curses color codes. Bright variants are
expressed as the base code plus bold, which is how 8-color terminals show
them.

Configuration values are integers: a palette index, or a raw pair number
tagged with RAW_PAIR_FLAG (see termpalette.types.encode_color).
"""

from __future__ import annotations

import curses
import re
from dataclasses import dataclass
from functools import reduce

from termpalette.constants import COLOR_DEFAULT, RAW_PAIR_FLAG, RAW_PAIR_MASK
from termpalette.types import is_raw_pair

_PAIR_NUMBER_RE = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class PaletteEntry:
    """One named base color."""

    foreground: int  # primary curses color code (-1 = terminal default)
    bright: int  # bright/alternate code
    attributes: int  # curses attribute bitmask applied with this color
    name: str


PALETTE: tuple[PaletteEntry, ...] = (
    PaletteEntry(COLOR_DEFAULT, 0, 0, "default"),
    PaletteEntry(curses.COLOR_BLACK, curses.COLOR_BLACK, 0, "black"),
    PaletteEntry(curses.COLOR_BLACK, curses.COLOR_BLACK + 8, curses.A_BOLD, "darkgray"),
    PaletteEntry(curses.COLOR_RED, curses.COLOR_RED, 0, "red"),
    PaletteEntry(curses.COLOR_RED, curses.COLOR_RED + 8, curses.A_BOLD, "lightred"),
    PaletteEntry(curses.COLOR_GREEN, curses.COLOR_GREEN, 0, "green"),
    PaletteEntry(curses.COLOR_GREEN, curses.COLOR_GREEN + 8, curses.A_BOLD, "lightgreen"),
    PaletteEntry(curses.COLOR_YELLOW, curses.COLOR_YELLOW, 0, "brown"),
    PaletteEntry(curses.COLOR_YELLOW, curses.COLOR_YELLOW + 8, curses.A_BOLD, "yellow"),
    PaletteEntry(curses.COLOR_BLUE, curses.COLOR_BLUE, 0, "blue"),
    PaletteEntry(curses.COLOR_BLUE, curses.COLOR_BLUE + 8, curses.A_BOLD, "lightblue"),
    PaletteEntry(curses.COLOR_MAGENTA, curses.COLOR_MAGENTA, 0, "magenta"),
    PaletteEntry(curses.COLOR_MAGENTA, curses.COLOR_MAGENTA + 8, curses.A_BOLD, "lightmagenta"),
    PaletteEntry(curses.COLOR_CYAN, curses.COLOR_CYAN, 0, "cyan"),
    PaletteEntry(curses.COLOR_CYAN, curses.COLOR_CYAN + 8, curses.A_BOLD, "lightcyan"),
    PaletteEntry(curses.COLOR_WHITE, curses.COLOR_WHITE, curses.A_BOLD, "white"),
)

DEFAULT_INDEX = 0


def color_count() -> int:
    """Return the number of named palette colors."""
    return len(PALETTE)


def find_by_name(name: str) -> int:
    """Find a palette color by name (case-insensitive).

    Returns:
        Palette index of the first match, or -1 if not found
    """
    wanted = name.lower()
    for index, entry in enumerate(PALETTE):
        if entry.name.lower() == wanted:
            return index
    return -1


def parse_color_spec(text: str) -> int | None:
    """Parse a configured color string into its encoded integer value.

    A string made only of decimal digits is an explicit terminal pair and is
    tagged with RAW_PAIR_FLAG. Anything else is looked up by name.

    Returns:
        Encoded color value, or None if the name is unknown
    """
    if _PAIR_NUMBER_RE.fullmatch(text):
        # reduced digit by digit: int() refuses very long digit strings
        return RAW_PAIR_FLAG | reduce(lambda acc, digit: (acc * 10 + int(digit)) & RAW_PAIR_MASK, text, 0)
    index = find_by_name(text)
    if index < 0:
        return None
    return index


def display_name(value: int) -> str | None:
    """Return the configuration string for an encoded color value.

    Raw pairs render as their decimal pair number. Palette indices return the
    entry name, or None when out of range.
    """
    if is_raw_pair(value):
        return str(value & RAW_PAIR_MASK)
    if 0 <= value < len(PALETTE):
        return PALETTE[value].name
    return None

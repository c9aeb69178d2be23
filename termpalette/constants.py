"""Constants used across termpalette.

Encoding values here cross the configuration boundary and must stay exact.
"""

import curses

# Raw pair encoding: value & RAW_PAIR_FLAG means "pair number = value & RAW_PAIR_MASK"
RAW_PAIR_FLAG = 0x10000
RAW_PAIR_MASK = 0xFFFF

# Terminal default color (transparent) and the palette's reserved "unset" code
COLOR_DEFAULT = -1
COLOR_UNSET = 99

# Pair allocation limits
MAX_ALLOCATED_PAIRS = 256
WIDE_BG_BANDS = 16
NARROW_BG_BANDS = 8

# Layout used before any probe (and when the terminal has no colors)
FALLBACK_BG_BANDS = NARROW_BG_BANDS
FALLBACK_LAST_PAIR = 63

# Plain white pair returned for unknown identifiers
WHITE_PAIR = curses.COLOR_WHITE

# Inline color switch marker used by the text-markup layer
COLOR_TOKEN_PREFIX = "\x19"

# Number of "nickN" coloring slots
NICK_COLOR_COUNT = 16

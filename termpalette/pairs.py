"""Color pair allocation.

Pair indices are laid out in background bands so that any (fg, bg)
combination maps to its pair with plain arithmetic:

    pair = bg * num_bg_bands + fg + 1

Depending on terminal and $TERM value, we can have for example:

    terminal | $TERM           | colors | pairs
    ---------+-----------------+--------+------
    urxvt    | rxvt-unicode    |     88 |   256
    urxvt    | xterm-256color  |    256 | 32767
    screen   | screen          |      8 |    64
    screen   | screen-256color |    256 | 32767

Terminals with at least 256 pairs get 16 bands over 256 pairs; others get
8 bands over all their pairs.
"""

from __future__ import annotations

import curses
import logging

from termpalette.constants import COLOR_DEFAULT
from termpalette.terminal import ColorTerminal
from termpalette.types import PairLayout, ResolvedColor, TerminalCapability, is_default_code

logger = logging.getLogger(__name__)


def init_pairs(
    terminal: ColorTerminal,
    capability: TerminalCapability,
    real_white: bool = True,
    highlight_white_bg: int | None = None,
) -> PairLayout:
    """Register all color pairs for the terminal's capability.

    Args:
        terminal: Terminal to register pairs with
        capability: Probed terminal capability
        real_white: When False, white on default background renders with the
            terminal default foreground (for terminals with light backgrounds)
        highlight_white_bg: Background for that replacement pair instead of
            the terminal default

    Returns:
        Layout used for every later pair lookup
    """
    layout = PairLayout.from_capability(capability)
    if not layout.enabled:
        logger.info("Terminal has no color support, rendering monochrome")
        return layout

    bands = layout.num_bg_bands
    rejected = 0
    for pair in range(1, layout.last_pair + 1):
        fg = (pair - 1) % bands
        bg = COLOR_DEFAULT if (pair - 1) < bands else (pair - 1) // bands
        if not terminal.init_pair(pair, fg, bg):
            rejected += 1

    # white on white is useless: last pair becomes default/default
    terminal.init_pair(layout.last_pair, COLOR_DEFAULT, COLOR_DEFAULT)

    if not real_white:
        bg = COLOR_DEFAULT if highlight_white_bg is None else highlight_white_bg
        terminal.init_pair(curses.COLOR_WHITE + 1, COLOR_DEFAULT, bg)

    logger.debug(
        "Allocated pairs 1..%d (%d bands, %d rejected, colors=%d, pairs=%d)",
        layout.last_pair,
        bands,
        rejected,
        capability.colors,
        capability.pairs,
    )
    return layout


def pair_for_colors(layout: PairLayout, fg: int, bg: int) -> int:
    """Return the pair index allocated for a (fg, bg) color combination."""
    fg_default = is_default_code(fg)
    bg_default = is_default_code(bg)
    if fg_default and bg_default:
        return layout.last_pair
    if fg_default:
        fg = curses.COLOR_WHITE
    if bg_default:
        bg = 0
    return bg * layout.num_bg_bands + fg + 1


def pair_for(layout: PairLayout, color: ResolvedColor | None) -> int:
    """Return the pair index to draw a resolved color with.

    Unresolved colors use the neutral default/default pair.
    """
    if color is None:
        return layout.last_pair
    raw_pair = color.raw_pair
    if raw_pair is not None:
        return raw_pair
    return pair_for_colors(layout, color.foreground, color.background)

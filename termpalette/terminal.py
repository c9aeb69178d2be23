"""curses backend for color setup.

The rest of termpalette talks to the terminal through this thin wrapper so
tests can substitute a recording fake. Everything here assumes the caller
owns the screen (curses.initscr() already done), except probe(), which enters
and leaves curses on its own for the capability report.
"""

from __future__ import annotations

import curses
import logging
import os
from typing import Protocol

from termpalette.types import TerminalCapability

logger = logging.getLogger(__name__)


class ColorTerminal(Protocol):
    """Terminal operations consumed by the color layer."""

    def has_colors(self) -> bool: ...

    def start_color(self) -> None: ...

    def use_default_colors(self) -> None: ...

    def capability(self) -> TerminalCapability: ...

    def init_pair(self, pair: int, fg: int, bg: int) -> bool: ...

    def color_pair(self, pair: int) -> int: ...

    def probe(self) -> TerminalCapability: ...


class DetachedTerminal:
    """ColorTerminal with a fixed capability that never touches the screen.

    Registered pairs are kept in `pairs` so previews can show what a real
    terminal would have been given.
    """

    def __init__(self, capability: TerminalCapability) -> None:
        self._capability = capability
        self.pairs: dict[int, tuple[int, int]] = {}
        self.color_started = False

    def has_colors(self) -> bool:
        return self._capability.has_colors

    def start_color(self) -> None:
        self.color_started = True

    def use_default_colors(self) -> None:
        return None

    def capability(self) -> TerminalCapability:
        return self._capability

    def init_pair(self, pair: int, fg: int, bg: int) -> bool:
        if not 0 < pair < max(self._capability.pairs, 1):
            return False
        self.pairs[pair] = (fg, bg)
        return True

    def color_pair(self, pair: int) -> int:
        # Same bit layout as curses.color_pair()
        return (pair & 0xFF) << 8

    def probe(self) -> TerminalCapability:
        return self._capability


class CursesTerminal:
    """ColorTerminal backed by the stdlib curses module."""

    def has_colors(self) -> bool:
        return curses.has_colors()

    def start_color(self) -> None:
        curses.start_color()

    def use_default_colors(self) -> None:
        """Allow -1 as "terminal default" color; not every terminal supports it."""
        try:
            curses.use_default_colors()
        except curses.error as e:
            logger.debug("use_default_colors not supported: %s", e)

    def capability(self) -> TerminalCapability:
        """Read color capability. Must run after start_color()."""
        if not curses.has_colors():
            return TerminalCapability(term=os.environ.get("TERM"))
        return TerminalCapability(
            term=os.environ.get("TERM"),
            has_colors=True,
            colors=curses.COLORS,
            pairs=curses.COLOR_PAIRS,
            can_change_color=curses.can_change_color(),
        )

    def init_pair(self, pair: int, fg: int, bg: int) -> bool:
        """Register a color pair, returning False if the terminal rejects it."""
        try:
            curses.init_pair(pair, fg, bg)
        except (curses.error, ValueError) as e:
            logger.debug("init_pair(%d, %d, %d) rejected: %s", pair, fg, bg, e)
            return False
        return True

    def color_pair(self, pair: int) -> int:
        return curses.color_pair(pair)

    def probe(self) -> TerminalCapability:
        """Enter curses just long enough to read the color capability."""
        stdscr = curses.initscr()
        try:
            if not curses.has_colors():
                return TerminalCapability(term=os.environ.get("TERM"))
            self.start_color()
            self.use_default_colors()
            capability = self.capability()
            stdscr.refresh()
            return capability
        finally:
            curses.endwin()

"""Terminal color capability report (`termpalette --colors`)."""

from __future__ import annotations

import sys
from typing import TextIO

from termpalette.terminal import ColorTerminal
from termpalette.types import TerminalCapability

GRID_COLUMNS = 16
_RULE = "-" * 80
_RESET = "\033[0m"


def _color_cell(color: int) -> str:
    return f"\033[0;38;5;{color}m {color:03d} "


def format_color_report(capability: TerminalCapability) -> str:
    """Format terminal infos and a grid of the first 256 terminal colors.

    Each grid line holds up to 16 colors; column `col` of line `line` shows
    color `col * 16 + line`.
    """
    colors = capability.colors if capability.has_colors else 0
    lines = [
        "",
        f"Terminal infos: $TERM={capability.term}   COLORS: {colors}, "
        f"COLOR_PAIRS: {capability.pairs if capability.has_colors else 0}, "
        f"can_change_color: {'yes' if capability.can_change_color else 'no'}",
    ]
    if colors == 0:
        lines.append("No color support in terminal.")
    else:
        lines.append("")
        lines.append("Default colors:")
        lines.append(_RULE)
        for line in range(min(colors, GRID_COLUMNS)):
            cells = [
                _color_cell(col * GRID_COLUMNS + line)
                for col in range(GRID_COLUMNS)
                if col * GRID_COLUMNS + line < colors
            ]
            lines.append("".join(cells))
        lines.append(_RESET + _RULE)
    lines.append("")
    return "\n".join(lines) + "\n"


def display_terminal_colors(terminal: ColorTerminal, out: TextIO | None = None) -> TerminalCapability:
    """Probe the terminal and print its color report.

    Enters curses only for the probe; the color registry is not involved.
    """
    capability = terminal.probe()
    (out or sys.stdout).write(format_color_report(capability))
    return capability

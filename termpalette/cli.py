"""termpalette: inspect terminal colors and the configured semantic colors.

Examples:
  termpalette --colors                  terminal capability report
  termpalette --names                   palette color names
  termpalette --show --assume-pairs 64  resolved colors for an 8-band terminal
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TextIO

from dotenv import load_dotenv
from pydantic import ValidationError

from termpalette.config import load_config
from termpalette.config.schema import TermPaletteConfig
from termpalette.lifecycle import ColorContext
from termpalette.logging_config import setup_logging
from termpalette.palette import PALETTE, color_count, display_name
from termpalette.report import display_terminal_colors
from termpalette.terminal import CursesTerminal, DetachedTerminal
from termpalette.types import ResolvedColor, SemanticColor, TerminalCapability


def _describe(color: ResolvedColor | None) -> str:
    if color is None:
        return "unresolved"
    if color.raw_pair is not None:
        return f"raw pair {color.raw_pair}"
    return f"fg={color.foreground} bg={color.background} attr={color.attributes:#x}"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termpalette",
        description="Terminal color pairs for semantic chat colors.",
        epilog=__doc__.split("Examples:", 1)[1] if __doc__ else None,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    action = parser.add_mutually_exclusive_group()
    action.add_argument("-c", "--colors", action="store_true", help="Display terminal colors and exit.")
    action.add_argument("-n", "--names", action="store_true", help="List palette color names and exit.")
    action.add_argument("-s", "--show", action="store_true", help="Show resolved semantic colors and exit.")
    parser.add_argument("--config", type=Path, default=None, help="Path to termpalette.yml.")
    parser.add_argument("--assume-colors", type=int, default=256, help="COLORS for --show (default: 256).")
    parser.add_argument("--assume-pairs", type=int, default=32767, help="COLOR_PAIRS for --show (default: 32767).")
    parser.add_argument("--log-level", default=None, help="Override TERMPALETTE_LOG_LEVEL.")
    return parser


def _print_names(out: TextIO) -> None:
    out.write(f"{color_count()} palette colors:\n")
    for index, entry in enumerate(PALETTE):
        out.write(f"  {index:>2}  {entry.name:<14} fg={entry.foreground:>2} bright={entry.bright:>2}\n")


def _print_resolved(config: TermPaletteConfig, capability: TerminalCapability, out: TextIO) -> None:
    context = ColorContext(DetachedTerminal(capability))
    context.pre_init()
    context.init(config)
    specs = config.colors.color_specs()
    out.write(
        f"term={context.capability.term} bands={context.layout.num_bg_bands} last_pair={context.layout.last_pair}\n"
    )
    for identifier in SemanticColor:
        fg, bg = specs[identifier]
        out.write(
            f"  {identifier.name.lower():<22} {display_name(fg)!s:>12} on {display_name(bg)!s:<12} "
            f"{_describe(context.get(identifier)):<28} pair={context.resolve_pair(identifier)}\n"
        )
    context.end()


def main(argv: list[str] | None = None, out: TextIO | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    out = out or sys.stdout

    load_dotenv()
    setup_logging(args.log_level)

    if args.colors:
        display_terminal_colors(CursesTerminal(), out)
        return 0

    if args.names:
        _print_names(out)
        return 0

    if args.show:
        try:
            config = load_config(args.config)
        except ValidationError as e:
            print(f"Error: invalid color configuration: {e}", file=sys.stderr)
            return 1
        capability = TerminalCapability(
            term="assumed",
            has_colors=args.assume_colors > 0,
            colors=args.assume_colors,
            pairs=args.assume_pairs,
        )
        _print_resolved(config, capability, out)
        return 0

    parser.print_help(out)
    return 1


if __name__ == "__main__":
    sys.exit(main())

"""Shared color types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import TypeAlias

from termpalette.constants import (
    COLOR_DEFAULT,
    COLOR_UNSET,
    FALLBACK_BG_BANDS,
    FALLBACK_LAST_PAIR,
    MAX_ALLOCATED_PAIRS,
    NARROW_BG_BANDS,
    RAW_PAIR_FLAG,
    RAW_PAIR_MASK,
    WIDE_BG_BANDS,
)


class SemanticColor(IntEnum):
    """Rendering roles, one registry slot each."""

    SEPARATOR = 0
    CHAT = 1
    CHAT_TIME = 2
    CHAT_TIME_DELIMITERS = 3
    CHAT_PREFIX_ERROR = 4
    CHAT_PREFIX_NETWORK = 5
    CHAT_PREFIX_ACTION = 6
    CHAT_PREFIX_JOIN = 7
    CHAT_PREFIX_QUIT = 8
    CHAT_PREFIX_MORE = 9
    CHAT_PREFIX_SUFFIX = 10
    CHAT_BUFFER = 11
    CHAT_SERVER = 12
    CHAT_CHANNEL = 13
    CHAT_NICK = 14
    CHAT_NICK_SELF = 15
    CHAT_NICK_OTHER = 16
    CHAT_NICK1 = 17
    CHAT_NICK2 = 18
    CHAT_NICK3 = 19
    CHAT_NICK4 = 20
    CHAT_NICK5 = 21
    CHAT_NICK6 = 22
    CHAT_NICK7 = 23
    CHAT_NICK8 = 24
    CHAT_NICK9 = 25
    CHAT_NICK10 = 26
    CHAT_NICK11 = 27
    CHAT_NICK12 = 28
    CHAT_NICK13 = 29
    CHAT_NICK14 = 30
    CHAT_NICK15 = 31
    CHAT_NICK16 = 32
    CHAT_HOST = 33
    CHAT_DELIMITERS = 34
    CHAT_HIGHLIGHT = 35
    CHAT_READ_MARKER = 36
    CHAT_TEXT_FOUND = 37
    CHAT_VALUE = 38
    CHAT_PREFIX_BUFFER = 39


SEMANTIC_COLOR_COUNT = len(SemanticColor)


class LifecycleState(str, Enum):
    """Color context lifecycle states, strictly forward."""

    UNSTARTED = "unstarted"
    PRE_INITIALIZED = "pre_initialized"
    INITIALIZED = "initialized"
    ENDED = "ended"


@dataclass(frozen=True)
class PaletteColor:
    """Reference to a Named Palette entry by index."""

    index: int


@dataclass(frozen=True)
class RawPair:
    """Explicit terminal pair number, bypassing the palette."""

    number: int


ColorValue: TypeAlias = PaletteColor | RawPair


def is_raw_pair(value: int) -> bool:
    """Return True when an encoded value carries the raw pair flag.

    Negative values are color codes (-1 = default), never raw pairs.
    """
    return value >= 0 and bool(value & RAW_PAIR_FLAG)


def encode_color(value: ColorValue) -> int:
    """Encode a tagged color value into its integer configuration form."""
    if isinstance(value, RawPair):
        return RAW_PAIR_FLAG | value.number
    return value.index


def decode_color(value: int) -> ColorValue:
    """Decode an integer configuration value into a tagged color value."""
    if is_raw_pair(value):
        return RawPair(value & RAW_PAIR_MASK)
    return PaletteColor(value)


def is_default_code(code: int) -> bool:
    """Return True for codes meaning "terminal default" (-1) or "unset" (99)."""
    return code in (COLOR_DEFAULT, COLOR_UNSET)


@dataclass
class ResolvedColor:
    """Resolved colors for one semantic identifier.

    Either foreground/background hold palette color codes, or foreground holds
    an encoded raw pair and background/attributes are zero.
    """

    foreground: int = COLOR_DEFAULT
    background: int = COLOR_DEFAULT
    attributes: int = 0
    token: str = ""

    @property
    def is_raw_pair(self) -> bool:
        return is_raw_pair(self.foreground)

    @property
    def raw_pair(self) -> int | None:
        """Pair number when this entry is a raw pair, else None."""
        if not self.is_raw_pair:
            return None
        return self.foreground & RAW_PAIR_MASK


@dataclass(frozen=True)
class TerminalCapability:
    """Snapshot of what the terminal reports about colors."""

    term: str | None = None
    has_colors: bool = False
    colors: int = 0
    pairs: int = 0
    can_change_color: bool = False


@dataclass(frozen=True)
class PairLayout:
    """Capability-derived pair addressing shared by allocation and lookup.

    Attributes:
        enabled: False when the terminal has no color support
        num_bg_bands: Background bands pair indices are partitioned into (8 or 16)
        last_pair: Highest allocated pair, reserved for default/default
    """

    enabled: bool = False
    num_bg_bands: int = FALLBACK_BG_BANDS
    last_pair: int = FALLBACK_LAST_PAIR

    @classmethod
    def from_capability(cls, capability: TerminalCapability) -> "PairLayout":
        # pair 0 is fixed by curses, so at least one more is needed
        if not capability.has_colors or capability.pairs < 2:
            return cls()
        wide = capability.pairs >= MAX_ALLOCATED_PAIRS
        num_colors = MAX_ALLOCATED_PAIRS if wide else capability.pairs
        return cls(
            enabled=True,
            num_bg_bands=WIDE_BG_BANDS if wide else NARROW_BG_BANDS,
            last_pair=num_colors - 1,
        )

"""Resolved color registry: one entry per semantic color."""

from __future__ import annotations

import logging

from termpalette.constants import COLOR_TOKEN_PREFIX
from termpalette.palette import DEFAULT_INDEX, PALETTE
from termpalette.types import SEMANTIC_COLOR_COUNT, RawPair, ResolvedColor, decode_color, encode_color

logger = logging.getLogger(__name__)


def color_token(identifier: int) -> str:
    """Return the inline markup token that switches to a semantic color."""
    return f"{COLOR_TOKEN_PREFIX}{identifier:02d}"


class ColorRegistry:
    """Indexed collection of resolved colors.

    Slots start unresolved (None); build() fills them from encoded color
    values. Entries are created on first build and only released by end().
    """

    def __init__(self, size: int = SEMANTIC_COLOR_COUNT) -> None:
        self._entries: list[ResolvedColor | None] = [None] * size

    def __len__(self) -> int:
        return len(self._entries)

    def pre_init(self) -> None:
        """Mark every slot unresolved."""
        self._entries = [None] * len(self._entries)

    def build(self, identifier: int, foreground: int, background: int) -> None:
        """Resolve a semantic color from encoded foreground/background values.

        A raw pair foreground is used as-is and the background is ignored.
        Otherwise both values are palette indices; a raw pair background is
        not allowed with a palette foreground and falls back to "default".
        Attributes (bold) come from the foreground entry only.
        """
        if not 0 <= identifier < len(self._entries):
            logger.warning("Ignoring color build for unknown identifier %d", identifier)
            return

        entry = self._entries[identifier]
        if entry is None:
            try:
                entry = ResolvedColor()
            except MemoryError:
                logger.error("Cannot allocate color %d, leaving it unresolved", identifier)
                return
            self._entries[identifier] = entry

        fg_value = decode_color(foreground)
        if isinstance(fg_value, RawPair):
            entry.foreground = encode_color(fg_value)
            entry.background = 0
            entry.attributes = 0
        else:
            bg_value = decode_color(background)
            bg_index = DEFAULT_INDEX if isinstance(bg_value, RawPair) else bg_value.index
            fg_entry = PALETTE[_palette_index(fg_value.index, identifier)]
            bg_entry = PALETTE[_palette_index(bg_index, identifier)]
            entry.foreground = fg_entry.foreground
            entry.background = bg_entry.foreground
            entry.attributes = fg_entry.attributes
        entry.token = color_token(identifier)

    def get(self, identifier: int) -> ResolvedColor | None:
        """Return the resolved color, or None if unknown or unresolved."""
        if not 0 <= identifier < len(self._entries):
            return None
        return self._entries[identifier]

    def token(self, identifier: int) -> str | None:
        entry = self.get(identifier)
        return entry.token if entry else None

    def is_resolved(self, identifier: int) -> bool:
        return self.get(identifier) is not None

    def end(self) -> None:
        """Release every entry. Safe to call repeatedly."""
        for identifier in range(len(self._entries)):
            self._entries[identifier] = None


def _palette_index(value: int, identifier: int) -> int:
    if 0 <= value < len(PALETTE):
        return value
    logger.warning("Color %d: palette index %d out of range, using default", identifier, value)
    return DEFAULT_INDEX

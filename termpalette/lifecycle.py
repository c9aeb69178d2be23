"""Color context: owns the registry and the pair layout for one screen.

Usage from the rendering layer:

    context = ColorContext(CursesTerminal())
    context.pre_init()
    ...  # curses.initscr()
    context.init(config)
    window.addstr(text, context.attr(SemanticColor.CHAT_NICK_SELF))
    ...
    context.end()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from termpalette.constants import WHITE_PAIR
from termpalette.pairs import init_pairs, pair_for
from termpalette.registry import ColorRegistry
from termpalette.terminal import ColorTerminal
from termpalette.types import LifecycleState, PairLayout, ResolvedColor, TerminalCapability

if TYPE_CHECKING:
    from termpalette.config.schema import TermPaletteConfig

logger = logging.getLogger(__name__)


class ColorLifecycleError(RuntimeError):
    """Raised when the color context is driven out of order."""


class ColorContext:
    """Semantic colors for one terminal, from pre-init to teardown."""

    def __init__(self, terminal: ColorTerminal, registry: ColorRegistry | None = None) -> None:
        self._terminal = terminal
        self._registry = registry if registry is not None else ColorRegistry()
        self._layout = PairLayout()
        self._capability = TerminalCapability()
        self._state = LifecycleState.UNSTARTED

    @property
    def state(self) -> LifecycleState:
        return self._state

    @property
    def layout(self) -> PairLayout:
        return self._layout

    @property
    def capability(self) -> TerminalCapability:
        return self._capability

    @property
    def registry(self) -> ColorRegistry:
        return self._registry

    def _transition(self, expected: LifecycleState, target: LifecycleState) -> None:
        if self._state is not expected:
            raise ColorLifecycleError(
                f"Cannot move color context to {target.value}: state is {self._state.value}, expected {expected.value}"
            )
        self._state = target

    def pre_init(self) -> None:
        """Clear the registry before any color is built."""
        self._transition(LifecycleState.UNSTARTED, LifecycleState.PRE_INITIALIZED)
        self._registry.pre_init()

    def init(self, config: "TermPaletteConfig") -> None:
        """Probe the terminal, allocate pairs and build every semantic color.

        Requires the screen to be initialized (curses.initscr()).
        """
        self._transition(LifecycleState.PRE_INITIALIZED, LifecycleState.INITIALIZED)
        if self._terminal.has_colors():
            self._terminal.start_color()
            self._terminal.use_default_colors()
        self._capability = self._terminal.capability()
        self._layout = init_pairs(
            self._terminal,
            self._capability,
            real_white=config.look.color_real_white,
            highlight_white_bg=config.look.highlight_white_bg,
        )
        self._build_all(config)
        logger.info(
            "Colors initialized: term=%s colors=%d pairs=%d bands=%d last_pair=%d",
            self._capability.term,
            self._capability.colors,
            self._capability.pairs,
            self._layout.num_bg_bands,
            self._layout.last_pair,
        )

    def rebuild(self, config: "TermPaletteConfig") -> None:
        """Re-resolve every semantic color after a configuration reload.

        Pairs are not reallocated; real_white changes need a restart.
        """
        if self._state is not LifecycleState.INITIALIZED:
            raise ColorLifecycleError(f"Cannot rebuild colors in state {self._state.value}")
        self._build_all(config)

    def _build_all(self, config: "TermPaletteConfig") -> None:
        for identifier, (fg, bg) in config.colors.color_specs().items():
            self._registry.build(identifier, fg, bg)

    def get(self, identifier: int) -> ResolvedColor | None:
        return self._registry.get(identifier)

    def resolve_pair(self, identifier: int) -> int:
        """Return the pair index for a semantic color.

        Unknown identifiers get the plain white pair; unresolved ones the
        neutral default/default pair.
        """
        if not 0 <= identifier < len(self._registry):
            return WHITE_PAIR
        return pair_for(self._layout, self._registry.get(identifier))

    def attr(self, identifier: int) -> int:
        """Return the curses attribute to draw a semantic color with."""
        color = self._registry.get(identifier)
        attributes = color.attributes if color else 0
        if not self._layout.enabled:
            return attributes
        return self._terminal.color_pair(self.resolve_pair(identifier)) | attributes

    def end(self) -> None:
        """Release all resolved colors. Ending twice is a no-op."""
        if self._state is LifecycleState.ENDED:
            return
        if self._state is LifecycleState.UNSTARTED:
            raise ColorLifecycleError(f"Cannot end color context in state {self._state.value}")
        self._state = LifecycleState.ENDED
        self._registry.end()

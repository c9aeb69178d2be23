"""Pytest configuration for termpalette tests."""

import logging

import pytest

from termpalette.terminal import DetachedTerminal
from termpalette.types import TerminalCapability

logging.getLogger("termpalette").handlers.clear()


def pytest_collection_modifyitems(config, items):
    """Set per-marker timeouts: unit=1s, integration=5s."""
    for item in items:
        if "unit" in item.keywords:
            item.add_marker(pytest.mark.timeout(1))
        elif "integration" in item.keywords:
            item.add_marker(pytest.mark.timeout(5))


@pytest.fixture
def screen_8() -> DetachedTerminal:
    """Terminal like `screen`: 8 colors, 64 pairs."""
    return DetachedTerminal(TerminalCapability(term="screen", has_colors=True, colors=8, pairs=64))


@pytest.fixture
def screen_256() -> DetachedTerminal:
    """Terminal like `xterm-256color`: 256 colors, 32767 pairs."""
    return DetachedTerminal(
        TerminalCapability(term="xterm-256color", has_colors=True, colors=256, pairs=32767, can_change_color=True)
    )


@pytest.fixture
def mono() -> DetachedTerminal:
    """Terminal without color support."""
    return DetachedTerminal(TerminalCapability(term="vt100"))

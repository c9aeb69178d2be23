"""Unit tests for color value encoding and pair layouts."""

import pytest

from termpalette.types import (
    PairLayout,
    PaletteColor,
    RawPair,
    ResolvedColor,
    TerminalCapability,
    decode_color,
    encode_color,
    is_default_code,
    is_raw_pair,
)


@pytest.mark.unit
def test_encode_raw_pair_sets_flag() -> None:
    assert encode_color(RawPair(5)) == 0x10005
    assert encode_color(PaletteColor(3)) == 3


@pytest.mark.unit
def test_decode_masks_payload_to_16_bits() -> None:
    assert decode_color(0x10005) == RawPair(5)
    assert decode_color(0x10000 | 0x2FFFF) == RawPair(0xFFFF)
    assert decode_color(7) == PaletteColor(7)


@pytest.mark.unit
def test_negative_codes_are_not_raw_pairs() -> None:
    assert is_raw_pair(-1) is False
    assert ResolvedColor(foreground=-1, background=-1).raw_pair is None


@pytest.mark.unit
def test_default_codes() -> None:
    assert is_default_code(-1)
    assert is_default_code(99)
    assert not is_default_code(0)


@pytest.mark.unit
def test_layout_for_64_pairs_uses_8_bands() -> None:
    layout = PairLayout.from_capability(TerminalCapability(has_colors=True, colors=8, pairs=64))
    assert layout.enabled is True
    assert layout.num_bg_bands == 8
    assert layout.last_pair == 63


@pytest.mark.unit
def test_layout_for_256_color_terminal_uses_16_bands() -> None:
    layout = PairLayout.from_capability(TerminalCapability(has_colors=True, colors=256, pairs=32767))
    assert layout.num_bg_bands == 16
    assert layout.last_pair == 255


@pytest.mark.unit
def test_layout_for_88_color_urxvt() -> None:
    layout = PairLayout.from_capability(TerminalCapability(has_colors=True, colors=88, pairs=256))
    assert layout.num_bg_bands == 16
    assert layout.last_pair == 255


@pytest.mark.unit
def test_layout_without_colors_is_disabled() -> None:
    layout = PairLayout.from_capability(TerminalCapability(has_colors=False, colors=8, pairs=64))
    assert layout == PairLayout()
    assert layout.enabled is False
    assert layout.last_pair == 63


@pytest.mark.unit
@pytest.mark.parametrize("pairs", [0, 1])
def test_layout_without_usable_pairs_is_disabled(pairs: int) -> None:
    layout = PairLayout.from_capability(TerminalCapability(has_colors=True, colors=8, pairs=pairs))
    assert layout.enabled is False
    assert layout.last_pair == 63

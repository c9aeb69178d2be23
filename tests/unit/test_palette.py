"""Unit tests for the named palette and color codec."""

import curses

import pytest

from termpalette.palette import PALETTE, color_count, display_name, find_by_name, parse_color_spec


@pytest.mark.unit
def test_palette_names_are_unique_case_insensitively() -> None:
    names = [entry.name.lower() for entry in PALETTE]
    assert len(names) == len(set(names))


@pytest.mark.unit
def test_color_count_matches_palette() -> None:
    assert color_count() == 16
    assert PALETTE[0].name == "default"
    assert PALETTE[0].foreground == -1


@pytest.mark.unit
def test_find_by_name_round_trips_every_palette_name() -> None:
    for entry in PALETTE:
        for spelling in (entry.name, entry.name.upper(), entry.name.title()):
            assert display_name(find_by_name(spelling)) == entry.name


@pytest.mark.unit
def test_find_by_name_unknown_returns_minus_one() -> None:
    assert find_by_name("chartreuse") == -1
    assert find_by_name("") == -1


@pytest.mark.unit
def test_bright_colors_carry_bold() -> None:
    lightred = PALETTE[find_by_name("lightred")]
    assert lightred.foreground == curses.COLOR_RED
    assert lightred.bright == curses.COLOR_RED + 8
    assert lightred.attributes == curses.A_BOLD
    assert PALETTE[find_by_name("red")].attributes == 0


@pytest.mark.unit
@pytest.mark.parametrize("pair", [0, 5, 63, 255, 65535, 65536, 70000])
def test_numeric_spec_is_raw_pair(pair: int) -> None:
    value = parse_color_spec(str(pair))
    assert value is not None
    assert value & 0x10000
    assert value & 0xFFFF == pair % 65536
    assert display_name(value) == str(pair % 65536)


@pytest.mark.unit
def test_very_long_numeric_spec_is_reduced_to_16_bits() -> None:
    assert parse_color_spec("0" * 5000 + "7") == 0x10000 | 7

    # 111...1 (5000 ones) is (10**5000 - 1) / 9
    expected = (pow(10, 5000, 9 * 65536) - 1) // 9 % 65536
    value = parse_color_spec("1" * 5000)
    assert value == 0x10000 | expected
    assert display_name(value) == str(expected)


@pytest.mark.unit
def test_name_spec_is_palette_index() -> None:
    assert parse_color_spec("red") == 3
    assert parse_color_spec("LightBlue") == 10
    assert parse_color_spec("default") == 0


@pytest.mark.unit
@pytest.mark.parametrize("text", ["-1", "12abc", "1.5", " 7", "nope", ""])
def test_invalid_specs_are_not_found(text: str) -> None:
    assert parse_color_spec(text) is None


@pytest.mark.unit
def test_display_name_out_of_range_is_none() -> None:
    assert display_name(len(PALETTE)) is None
    assert display_name(-5) is None


@pytest.mark.unit
def test_display_name_returns_fresh_strings() -> None:
    first = display_name(0x10000 | 12)
    names = [display_name(0x10000 | n) for n in range(64)]
    assert first == "12"
    assert names[12] == "12"

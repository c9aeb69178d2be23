"""Unit tests for the termpalette command line."""

from __future__ import annotations

import io

import pytest

from termpalette import cli
from termpalette.types import TerminalCapability


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch) -> None:
    monkeypatch.setattr(cli, "setup_logging", lambda _level=None: None)
    monkeypatch.setattr(cli, "load_dotenv", lambda *args, **kwargs: False)


@pytest.mark.unit
def test_names_lists_palette() -> None:
    out = io.StringIO()

    assert cli.main(["--names"], out) == 0

    text = out.getvalue()
    assert text.startswith("16 palette colors:")
    assert "lightmagenta" in text


@pytest.mark.unit
def test_colors_prints_capability_report(monkeypatch) -> None:
    capability = TerminalCapability(term="screen", has_colors=True, colors=8, pairs=64)
    monkeypatch.setattr(cli.CursesTerminal, "probe", lambda self: capability)
    out = io.StringIO()

    assert cli.main(["--colors"], out) == 0
    assert "COLORS: 8, COLOR_PAIRS: 64" in out.getvalue()


@pytest.mark.unit
def test_show_resolves_configured_colors(tmp_path) -> None:
    config_path = tmp_path / "termpalette.yml"
    config_path.write_text("colors:\n  chat_nick: red\n  chat_highlight: '5'\n", encoding="utf-8")
    out = io.StringIO()

    assert cli.main(["--show", "--config", str(config_path), "--assume-colors", "8", "--assume-pairs", "64"], out) == 0

    lines = out.getvalue().splitlines()
    assert lines[0] == "term=assumed bands=8 last_pair=63"
    nick = next(line for line in lines if line.strip().startswith("chat_nick "))
    assert nick.endswith("pair=2")
    highlight = next(line for line in lines if line.strip().startswith("chat_highlight "))
    assert "raw pair 5" in highlight
    assert highlight.endswith("pair=5")


@pytest.mark.unit
def test_show_rejects_invalid_config(tmp_path, capsys) -> None:
    config_path = tmp_path / "termpalette.yml"
    config_path.write_text("colors:\n  chat: nope\n", encoding="utf-8")

    assert cli.main(["--show", "--config", str(config_path)], io.StringIO()) == 1
    assert "invalid color configuration" in capsys.readouterr().err


@pytest.mark.unit
def test_no_action_prints_help() -> None:
    out = io.StringIO()

    assert cli.main([], out) == 1
    assert "usage: termpalette" in out.getvalue()

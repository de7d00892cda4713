import re

import pytest

from rustlings import ui

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


@pytest.fixture
def plain(monkeypatch):
    monkeypatch.delenv("CLICOLOR_FORCE", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("CLICOLOR", raising=False)


@pytest.fixture
def forced(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.setenv("CLICOLOR_FORCE", "1")


def test_no_emoji_follows_environment(monkeypatch):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    assert ui.no_emoji() is False
    monkeypatch.setenv("NO_EMOJI", "1")
    assert ui.no_emoji() is True


@pytest.mark.parametrize("style", [ui.bold, ui.blue, ui.red, ui.green])
def test_styles_are_plain_without_terminal(plain, capsys, style):
    assert style("hello") == "hello"


@pytest.mark.parametrize("style", [ui.bold, ui.blue, ui.red, ui.green])
def test_forced_styles_wrap_text(forced, style):
    styled = style("hello")
    assert styled != "hello"
    assert "hello" in styled
    assert _ANSI.sub("", styled) == "hello"


def test_forced_colours_differ(forced):
    assert len({ui.red("x"), ui.green("x"), ui.blue("x"), ui.bold("x")}) == 4


def test_no_color_wins_over_force(monkeypatch):
    monkeypatch.setenv("CLICOLOR_FORCE", "1")
    monkeypatch.setenv("NO_COLOR", "1")
    assert ui.red("warning") == "warning"


def test_styles_accept_numbers(plain):
    assert ui.blue(12) == "12"


def test_warn_without_emoji(plain, monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.warn("Ran thing with errors")
    assert capsys.readouterr().out == "! Ran thing with errors\n"


def test_warn_with_emoji(plain, monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    ui.warn("Compiling failed")
    assert capsys.readouterr().out == "⚠️  Compiling failed\n"


def test_success_without_emoji(plain, monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.success("Successfully ran it")
    assert capsys.readouterr().out == "✓ Successfully ran it\n"


def test_success_with_emoji(plain, monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    ui.success("Successfully ran it")
    assert capsys.readouterr().out == "✅ Successfully ran it\n"


def test_forced_warn_is_coloured(forced, monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.warn("oops")
    out = capsys.readouterr().out
    assert _ANSI.sub("", out) == "! oops\n"
    assert out.count(ui.red("oops")) == 1
# topmark:header:start
#
#   project      : TermString
#   file         : test_color_mode.py
#   file_relpath : tests/test_color_mode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `termstring.color`: color-mode precedence and TTY probing."""

from __future__ import annotations

import io

import pytest

from tests.conftest import parametrize
from termstring.color import ColorMode, resolve_color_mode, stream_isatty


class _Tty(io.StringIO):
    def isatty(self) -> bool:
        return True


class _RaisingTty(io.StringIO):
    def isatty(self) -> bool:
        raise ValueError("I/O operation on closed file")


@parametrize(
    "mode, isatty, expected",
    [
        (ColorMode.ALWAYS, False, True),
        (ColorMode.NEVER, True, False),
        (ColorMode.AUTO, True, True),
        (ColorMode.AUTO, False, False),
        (None, True, True),
    ],
)
def test_explicit_mode_and_tty(mode: ColorMode | None, isatty: bool, expected: bool) -> None:
    assert (
        resolve_color_mode(color_mode_override=mode, stream_isatty_override=isatty) is expected
    )


def test_force_color_beats_no_color(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert resolve_color_mode(color_mode_override=ColorMode.AUTO, stream_isatty_override=False)


def test_force_color_zero_is_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORCE_COLOR", "0")
    assert not resolve_color_mode(color_mode_override=ColorMode.AUTO, stream_isatty_override=False)


def test_no_color_disables_auto_on_a_tty(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "")
    assert not resolve_color_mode(color_mode_override=ColorMode.AUTO, stream=_Tty())


def test_env_does_not_override_explicit_modes(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    assert resolve_color_mode(color_mode_override=ColorMode.ALWAYS)
    monkeypatch.delenv("NO_COLOR")
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert not resolve_color_mode(color_mode_override=ColorMode.NEVER)


def test_stream_isatty_probing() -> None:
    assert stream_isatty(_Tty())
    assert not stream_isatty(io.StringIO())
    assert not stream_isatty(None)
    assert not stream_isatty(_RaisingTty())
    assert not stream_isatty(object())  # type: ignore[arg-type]


def test_color_mode_values() -> None:
    assert ColorMode("always") is ColorMode.ALWAYS
    assert [mode.value for mode in ColorMode] == ["auto", "always", "never"]

# topmark:header:start
#
#   project      : TermString
#   file         : ansi.py
#   file_relpath : src/termstring/writers/ansi.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ANSI SGR writer built on `click.style`.

Unlike [`TerminfoWriter`][termstring.writers.terminfo.TerminfoWriter], this
writer does not consult the terminal: it always emits ECMA-48 SGR sequences,
which makes it suitable for rendering into strings and for targets known to be
ANSI-capable.

Colors 0-15 map to click's named colors; 16-255 use the 256-color form.
`SECURE` and `STANDOUT` have no SGR rendition in click and are reported as
unsupported.
"""

from __future__ import annotations

from typing import Any, Final, cast

import click

from termstring.errors import TermCapabilityError
from termstring.style.attrs import Attr, AttrKind
from termstring.style.color import COLOR_NAMES
from termstring.writers.base import StreamWriter

SGR_RESET: Final[str] = "\x1b[0m"

UNSUPPORTED_KINDS: Final[frozenset[AttrKind]] = frozenset({AttrKind.SECURE, AttrKind.STANDOUT})


def _click_color(color: int) -> str | int:
    if color < len(COLOR_NAMES):
        return COLOR_NAMES[color]
    return color


class AnsiWriter(StreamWriter):
    """Writer emitting SGR escape sequences."""

    def reset_sequence(self) -> str:
        return SGR_RESET

    def attr_sequence(self, attr: Attr) -> str:
        if attr.kind in UNSUPPORTED_KINDS:
            raise TermCapabilityError(f"{attr.kind.value} has no SGR rendition")

        style_kwargs: dict[str, Any]
        if attr.kind is AttrKind.FOREGROUND_COLOR:
            style_kwargs = {"fg": _click_color(cast("int", attr.value))}
        elif attr.kind is AttrKind.BACKGROUND_COLOR:
            style_kwargs = {"bg": _click_color(cast("int", attr.value))}
        elif attr.kind.is_flag:
            # bold, dim, blink, reverse
            style_kwargs = {attr.kind.value: True}
        else:
            # italic, underline
            style_kwargs = {attr.kind.value: attr.value}
        return click.style("", reset=False, **style_kwargs)

# topmark:header:start
#
#   project      : TermString
#   file         : terminfo.py
#   file_relpath : src/termstring/writers/terminfo.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Terminfo-backed writer built on `blessed`.

Attribute sequences come from the terminal's capability database through
`blessed.Terminal`, so the output matches what the terminal advertises. A
capability the terminal does not define resolves to an empty string in
blessed; this writer treats that as an unsupported attribute.

Setting up the terminal is the capability negotiation step: if blessed cannot
style the stream (no terminfo entry, ``NO_COLOR`` set, ...), construction
raises [`TermCapabilityError`][termstring.errors.TermCapabilityError] and the
caller falls back to plain output for the whole call.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final, cast

from blessed import Terminal

from termstring.config.logging import get_logger
from termstring.errors import TermCapabilityError
from termstring.style.attrs import Attr, AttrKind, AttrValue
from termstring.writers.base import StreamWriter

if TYPE_CHECKING:
    from typing import TextIO

    from termstring.config.logging import TermStringLogger

logger: TermStringLogger = get_logger(__name__)

# (kind, payload) -> blessed capability attribute, for non-color attributes.
CAPABILITY_NAMES: Final[dict[tuple[AttrKind, AttrValue], str]] = {
    (AttrKind.BOLD, None): "bold",
    (AttrKind.DIM, None): "dim",
    (AttrKind.BLINK, None): "blink",
    (AttrKind.REVERSE, None): "reverse",
    (AttrKind.SECURE, None): "invis",
    (AttrKind.ITALIC, True): "italic",
    (AttrKind.ITALIC, False): "no_italic",
    (AttrKind.UNDERLINE, True): "underline",
    (AttrKind.UNDERLINE, False): "no_underline",
    (AttrKind.STANDOUT, True): "standout",
    (AttrKind.STANDOUT, False): "no_standout",
}


class TerminfoWriter(StreamWriter):
    """Writer applying attributes through terminfo capabilities.

    Args:
        stream (TextIO): Target stream.
        terminal (Terminal | None): A ready `blessed.Terminal` (or compatible
            object) to draw capabilities from. When `None`, one is created for
            ``stream`` with styling forced on.

    Raises:
        TermCapabilityError: If the terminal cannot be set up for styling.
    """

    def __init__(self, stream: TextIO, *, terminal: Terminal | None = None) -> None:
        super().__init__(stream)
        if terminal is None:
            try:
                terminal = Terminal(stream=stream, force_styling=True)
            except Exception as exc:
                raise TermCapabilityError(f"terminal setup failed: {exc}") from exc
        if not terminal.does_styling:
            raise TermCapabilityError("terminal does not support styling")
        self.terminal: Terminal = terminal
        self._reset: str = str(terminal.normal)
        if not self._reset:
            raise TermCapabilityError("terminal has no way to reset attributes")
        logger.debug(
            "terminfo writer ready: kind=%s colors=%s",
            getattr(terminal, "kind", None),
            getattr(terminal, "number_of_colors", None),
        )

    def reset_sequence(self) -> str:
        return self._reset

    def attr_sequence(self, attr: Attr) -> str:
        """Resolve the capability string for ``attr``.

        Args:
            attr (Attr): The attribute to apply.

        Returns:
            str: The terminal sequence.

        Raises:
            TermCapabilityError: If the terminal lacks the capability, or the
                color is beyond the terminal's palette.
        """
        if attr.kind.is_color:
            color: int = cast("int", attr.value)
            number_of_colors: int = self.terminal.number_of_colors
            if color >= number_of_colors:
                raise TermCapabilityError(
                    f"color {color} not supported by a {number_of_colors}-color terminal"
                )
            if attr.kind is AttrKind.FOREGROUND_COLOR:
                capability: str = "color"
                sequence = str(self.terminal.color(color))
            else:
                capability = "on_color"
                sequence = str(self.terminal.on_color(color))
        else:
            capability = CAPABILITY_NAMES[(attr.kind, attr.value)]
            sequence = str(getattr(self.terminal, capability))

        if not sequence:
            raise TermCapabilityError(f"terminal has no {capability!r} capability")
        return sequence

# topmark:header:start
#
#   project      : TermString
#   file         : model.py
#   file_relpath : src/termstring/text/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Styled terminal text.

A [`TermString`][termstring.text.model.TermString] stores text as an ordered
list of [`StyledRun`][termstring.text.run.StyledRun] values. Appending keeps the
list minimal: **no two adjacent runs have equal styles** after
[`append`][termstring.text.model.TermString.append], so the number of runs is
bounded by the number of genuine style transitions, not by the number of
append calls.

Concatenation:
    - ``ts + "text"`` / ``ts.append_text("text")``: extend the last run; the new
      text inherits its style.
    - ``ts + other`` / ``ts.append(other)``: merge another `TermString`,
      coalescing its leading runs into the last run while their styles match.

Empty runs with the default style are purged on append, which makes
``TermString()`` an identity element of concatenation.

Bulk style changes (``set_style``, ``add_style``, ``or_style``,
``reset_style``) rewrite every run's style but do **not** re-coalesce: two
adjacent runs may end up with equal styles until the next append touches them.

Output:
    The print family writes to ``sys.stdout`` (``print*``) or ``sys.stderr``
    (``eprint*``), styled (``*_styled``), plain (``*_plain``) or depending on
    whether the stream is a terminal (no suffix), with an optional trailing
    newline (``*ln*``). Styling failures never reach the caller; use
    [`try_write_styled`][termstring.text.model.TermString.try_write_styled]
    to observe them.

Example:
    ```python
    from termstring import TermString, TermStyle
    from termstring.style.color import GREEN

    text = TermString("Hello ", TermStyle.bold()) + "world"
    text += TermString("!", TermStyle.fg(GREEN))
    text.println()
    str(text)  # 'Hello world!'
    ```
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, Union

from termstring.color import ColorMode
from termstring.style.model import TermStyle
from termstring.text import output
from termstring.text.run import StyledRun
from termstring.writers.ansi import AnsiWriter

if TYPE_CHECKING:
    from collections.abc import Iterable
    from typing import TextIO

    from termstring.style.model import StyleLike
    from termstring.writers.base import WriterFactory

# Anything accepted where text is appended.
TextLike = Union["TermString", str]


class TermString:
    """Text made of style-tagged runs.

    Args:
        text (str): Initial text.
        style (StyleLike | None): Style of the initial text; `None` means unstyled.
    """

    __slots__ = ("_runs",)

    def __init__(self, text: str = "", style: StyleLike | None = None) -> None:
        if not isinstance(text, str):
            raise TypeError(f"TermString text must be str, got {type(text).__name__}")
        run_style: TermStyle = TermStyle() if style is None else TermStyle.coerce(style).copy()
        self._runs: list[StyledRun] = [StyledRun(run_style, text)]

    @classmethod
    def from_str(cls, text: str) -> TermString:
        """Return unstyled text."""
        return cls(text)

    @classmethod
    def coerce(cls, other: TextLike) -> TermString:
        """Return ``other`` as a `TermString`; a `str` becomes an unstyled one."""
        if isinstance(other, TermString):
            return other
        if isinstance(other, str):
            return cls(other)
        raise TypeError(f"cannot use {type(other).__name__} as TermString")

    @property
    def runs(self) -> tuple[StyledRun, ...]:
        """Copies of the runs, in order."""
        return tuple(run.copy() for run in self._runs)

    def copy(self) -> TermString:
        clone: TermString = TermString()
        clone._runs = [run.copy() for run in self._runs]
        return clone

    __copy__ = copy

    # ------------------------------------------------------------------
    # Essentials
    # ------------------------------------------------------------------

    def length(self) -> int:
        """Return the total length of the text, styling ignored."""
        return sum(len(run.text) for run in self._runs)

    def is_empty(self) -> bool:
        return self.length() == 0

    def to_plain_string(self) -> str:
        """Return the concatenated text of all runs, styling discarded."""
        return "".join(run.text for run in self._runs)

    def append_text(self, text: str) -> None:
        """Append raw text to the last run, inheriting its style.

        With no runs at all, the text becomes a new unstyled run.
        """
        if not self._runs:
            self.append(text)
        elif text:
            self._runs[-1].text += text

    def with_appended_text(self, text: str) -> TermString:
        clone: TermString = self.copy()
        clone.append_text(text)
        return clone

    def append(self, other: TextLike) -> None:
        """Concatenate ``other``, coalescing runs at the junction.

        Empty default-styled runs are purged from both sides first. Leading runs
        of ``other`` whose style equals the receiver's last run are merged into
        it; the first run with a different style and everything after it are
        appended unchanged. ``other`` itself is never modified.

        Args:
            other (TextLike): A `TermString`, or a `str` taken as unstyled text.
        """
        incoming: list[StyledRun] = [
            run.copy() for run in TermString.coerce(other)._runs if not run.is_default_empty()
        ]
        self._runs[:] = [run for run in self._runs if not run.is_default_empty()]

        pending = iter(incoming)
        if self._runs:
            last: StyledRun = self._runs[-1]
            for run in pending:
                if run.style == last.style:
                    last.text += run.text
                else:
                    self._runs.append(run)
                    break
        self._runs.extend(pending)

    def with_appended(self, other: TextLike) -> TermString:
        clone: TermString = self.copy()
        clone.append(other)
        return clone

    # ------------------------------------------------------------------
    # Style
    # ------------------------------------------------------------------

    def set_style(self, style: StyleLike) -> None:
        """Give every run the style ``style``."""
        new_style: TermStyle = TermStyle.coerce(style)
        for run in self._runs:
            run.style = new_style.copy()

    def reset_style(self) -> None:
        """Remove all attributes from every run."""
        for run in self._runs:
            run.style.reset()

    def or_style(self, style: StyleLike) -> None:
        """OR-merge ``style`` into every run's style (existing attributes win)."""
        merged: TermStyle = TermStyle.coerce(style).copy()
        for run in self._runs:
            run.style.or_style(merged)

    def add_style(self, style: StyleLike) -> None:
        """ADD-merge ``style`` into every run's style (``style`` wins)."""
        merged: TermStyle = TermStyle.coerce(style).copy()
        for run in self._runs:
            run.style.add_style(merged)

    def with_set_style(self, style: StyleLike) -> TermString:
        clone: TermString = self.copy()
        clone.set_style(style)
        return clone

    def with_reset_style(self) -> TermString:
        clone: TermString = self.copy()
        clone.reset_style()
        return clone

    def with_ored_style(self, style: StyleLike) -> TermString:
        clone: TermString = self.copy()
        clone.or_style(style)
        return clone

    def with_style(self, style: StyleLike) -> TermString:
        clone: TermString = self.copy()
        clone.add_style(style)
        return clone

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def write_plain(self, stream: TextIO) -> None:
        """Write the text to ``stream`` without styling."""
        output.write_plain(self._runs, stream)

    def write_styled(
        self, stream: TextIO, *, writer_factories: Iterable[WriterFactory] | None = None
    ) -> None:
        """Write the text to ``stream`` with styling, falling back to plain text.

        ``stream`` does not have to be a terminal. Styling failures are never
        raised.

        Args:
            stream (TextIO): Target stream.
            writer_factories (Iterable[WriterFactory] | None): Writer factories
                tried in order; `None` uses the terminfo writer.
        """
        output.write_styled(self._runs, stream, writer_factories)

    def try_write_styled(
        self, stream: TextIO, *, writer_factories: Iterable[WriterFactory] | None = None
    ) -> None:
        """Write the text to ``stream`` with styling and report failure.

        Args:
            stream (TextIO): Target stream.
            writer_factories (Iterable[WriterFactory] | None): Writer factories
                tried in order; `None` uses the terminfo writer.

        Raises:
            TermIOError: If a stream write failed.
            TermCapabilityError: If styling could not be set up or an attribute
                was rejected.
            TermOtherError: If a writer backend failed in another way.
        """
        output.try_write_styled(self._runs, stream, writer_factories)

    def to_ansi_string(self) -> str:
        """Render the text with ANSI SGR sequences.

        Runs with attributes that have no SGR rendition are rendered plain.
        """
        buffer = io.StringIO()
        output.write_styled(self._runs, buffer, (AnsiWriter,))
        return buffer.getvalue()

    def echo(
        self,
        file: TextIO | None = None,
        *,
        mode: ColorMode = ColorMode.AUTO,
        nl: bool = False,
        err: bool = False,
    ) -> None:
        """Print the text according to ``mode``.

        Args:
            file (TextIO | None): Target stream; defaults to standard output, or
                standard error when ``err`` is True.
            mode (ColorMode): `ALWAYS` styled, `NEVER` plain, `AUTO` styled
                only if the stream is a terminal.
            nl (bool): If True, append a newline.
            err (bool): Default to standard error instead of standard output.
        """
        output.echo(self._runs, file, mode=mode, nl=nl, err=err)

    def print_plain(self) -> None:
        """Write the text to standard output without styling."""
        self.echo(mode=ColorMode.NEVER)

    def print_styled(self) -> None:
        """Write the text to standard output with styling, terminal or not."""
        self.echo(mode=ColorMode.ALWAYS)

    def print(self) -> None:
        """Write the text to standard output, styled only if it is a terminal."""
        self.echo(mode=ColorMode.AUTO)

    def println_plain(self) -> None:
        self.echo(mode=ColorMode.NEVER, nl=True)

    def println_styled(self) -> None:
        self.echo(mode=ColorMode.ALWAYS, nl=True)

    def println(self) -> None:
        self.echo(mode=ColorMode.AUTO, nl=True)

    def eprint_plain(self) -> None:
        """Write the text to standard error without styling."""
        self.echo(mode=ColorMode.NEVER, err=True)

    def eprint_styled(self) -> None:
        """Write the text to standard error with styling, terminal or not."""
        self.echo(mode=ColorMode.ALWAYS, err=True)

    def eprint(self) -> None:
        """Write the text to standard error, styled only if it is a terminal."""
        self.echo(mode=ColorMode.AUTO, err=True)

    def eprintln_plain(self) -> None:
        self.echo(mode=ColorMode.NEVER, nl=True, err=True)

    def eprintln_styled(self) -> None:
        self.echo(mode=ColorMode.ALWAYS, nl=True, err=True)

    def eprintln(self) -> None:
        self.echo(mode=ColorMode.AUTO, nl=True, err=True)

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self.length()

    def __str__(self) -> str:
        return self.to_plain_string()

    def __repr__(self) -> str:
        runs: str = ", ".join(f"({run.style!r}, {run.text!r})" for run in self._runs)
        return f"{type(self).__name__}([{runs}])"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TermString):
            return NotImplemented
        return self._runs == other._runs

    # Mutable value type
    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: TextLike) -> TermString:
        if isinstance(other, str):
            return self.with_appended_text(other)
        if isinstance(other, TermString):
            return self.with_appended(other)
        return NotImplemented

    def __radd__(self, other: str) -> TermString:
        if isinstance(other, str):
            return TermString(other).with_appended(self)
        return NotImplemented

    def __iadd__(self, other: TextLike) -> TermString:
        if isinstance(other, str):
            self.append_text(other)
        elif isinstance(other, TermString):
            self.append(other)
        else:
            return NotImplemented
        return self

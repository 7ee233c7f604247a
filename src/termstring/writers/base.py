# topmark:header:start
#
#   project      : TermString
#   file         : base.py
#   file_relpath : src/termstring/writers/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Writer contract and the shared stream-writer implementation.

A writer consumes [`StyledRun`][termstring.text.run.StyledRun] values at output
time through two primitives:

- `write_plain(run)`: emit the run's raw text with no attribute encoding.
- `write_styled(run)`: reset any residual attribute state, apply each occupied
  attribute of the run's style in slot order, emit the text, reset again.

`write_styled` reports failure by raising a
[`TermStringError`][termstring.errors.TermStringError] subclass. Every attribute
sequence is resolved *before* anything is written, so an unsupported attribute
never leaves partially-styled output on the stream.

Writers are built from the target stream by a `WriterFactory` (any callable
taking the stream, typically the writer class itself). A factory that cannot
set up styling for the stream raises
[`TermCapabilityError`][termstring.errors.TermCapabilityError].
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Protocol

from termstring.config.logging import get_logger
from termstring.errors import TermIOError, TermOtherError, TermStringError

if TYPE_CHECKING:
    from typing import TextIO

    from termstring.config.logging import TermStringLogger
    from termstring.style.attrs import Attr
    from termstring.text.run import StyledRun

logger: TermStringLogger = get_logger(__name__)


class TermWriter(Protocol):
    """Minimal interface of an output target for styled runs."""

    def write_plain(self, run: StyledRun) -> None:
        """Write the run's text without styling."""
        ...

    def write_styled(self, run: StyledRun) -> None:
        """Write the run's text with its style applied.

        Raises:
            TermStringError: If the style could not be applied or the write failed.
        """
        ...


WriterFactory = Callable[["TextIO"], TermWriter]


class StreamWriter:
    """Writer emitting to a text stream, with pluggable attribute encoding.

    Subclasses provide `reset_sequence()` and `attr_sequence()`; this class
    implements the write protocol around them.

    Attributes:
        stream (TextIO): The target stream.
    """

    def __init__(self, stream: TextIO) -> None:
        self.stream: TextIO = stream

    def reset_sequence(self) -> str:
        """Return the sequence clearing every display attribute."""
        raise NotImplementedError

    def attr_sequence(self, attr: Attr) -> str:
        """Return the sequence applying ``attr``.

        Raises:
            TermCapabilityError: If the target cannot render ``attr``.
        """
        raise NotImplementedError

    def write_plain(self, run: StyledRun) -> None:
        """Write the run's text.

        Stream errors propagate unchanged: there is nothing left to fall back to.
        """
        self.stream.write(run.text)

    def write_styled(self, run: StyledRun) -> None:
        """Reset, apply the run's attributes, write the text and reset again.

        Args:
            run (StyledRun): The run to write.

        Raises:
            TermCapabilityError: If an attribute cannot be rendered. Nothing is written.
            TermIOError: If the stream write failed.
            TermOtherError: If the backend failed in any other way. Nothing is written.
        """
        try:
            reset: str = self.reset_sequence()
            sequences: list[str] = [self.attr_sequence(attr) for attr in run.style]
        except TermStringError:
            raise
        except Exception as exc:
            raise TermOtherError(f"{type(self).__name__}: {exc}") from exc

        try:
            self.stream.write(reset + "".join(sequences) + run.text)
        except OSError as exc:
            raise TermIOError(str(exc)) from exc

        try:
            self.stream.write(reset)
        except OSError as exc:
            # The text is already out; reporting failure here would write it twice.
            logger.debug("reset after styled write failed: %s", exc)


class PlainWriter(StreamWriter):
    """Writer that never styles; `write_styled` writes plain text."""

    def write_styled(self, run: StyledRun) -> None:
        self.write_plain(run)

# topmark:header:start
#
#   project      : TermString
#   file         : output.py
#   file_relpath : src/termstring/text/output.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output routines for sequences of styled runs.

Two entry points exist:

- [`write_styled`][termstring.text.output.write_styled] never reports a styling
  failure: if no writer can be set up for the stream the whole call is written
  plain, and a run whose styled write fails is written plain on its own.
- [`try_write_styled`][termstring.text.output.try_write_styled] is the fallible
  form: the first failure is raised as a
  [`TermStringError`][termstring.errors.TermStringError].

[`echo`][termstring.text.output.echo] adds color-mode resolution and the
optional trailing newline on top of them; the capability probe runs once per
call.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Final

from termstring.color import ColorMode, resolve_color_mode
from termstring.config.logging import get_logger
from termstring.errors import TermCapabilityError, TermStringError
from termstring.text.run import StyledRun
from termstring.writers.base import PlainWriter
from termstring.writers.terminfo import TerminfoWriter

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from typing import TextIO

    from termstring.config.logging import TermStringLogger
    from termstring.writers.base import TermWriter, WriterFactory

logger: TermStringLogger = get_logger(__name__)

# Consulted at call time.
DEFAULT_WRITER_FACTORIES: tuple[WriterFactory, ...] = (TerminfoWriter,)

NEWLINE: Final[str] = "\n"


def open_writer(stream: TextIO, factories: Iterable[WriterFactory] | None = None) -> TermWriter:
    """Return the first writer a factory manages to set up for ``stream``.

    Args:
        stream (TextIO): Target stream.
        factories (Iterable[WriterFactory] | None): Candidate factories, tried in
            order; `None` selects `DEFAULT_WRITER_FACTORIES`.

    Returns:
        TermWriter: The first writer successfully constructed.

    Raises:
        TermCapabilityError: If every factory failed (or none was given). The
            last factory error is chained as ``__cause__``.
    """
    if factories is None:
        factories = DEFAULT_WRITER_FACTORIES
    last_error: TermStringError | None = None
    for factory in factories:
        try:
            writer: TermWriter = factory(stream)
        except TermStringError as exc:
            logger.debug("writer factory %r unavailable: %s", factory, exc)
            last_error = exc
            continue
        logger.trace("using writer %r", writer)
        return writer
    raise TermCapabilityError("no styling writer available for stream") from last_error


def write_plain(runs: Sequence[StyledRun], stream: TextIO) -> None:
    """Write the text of every run to ``stream``, styling discarded."""
    writer = PlainWriter(stream)
    for run in runs:
        writer.write_plain(run)


def write_styled(
    runs: Sequence[StyledRun],
    stream: TextIO,
    factories: Iterable[WriterFactory] | None = None,
) -> None:
    """Write ``runs`` styled if possible, plain otherwise.

    Styling failures never propagate: a negotiation failure degrades the whole
    call to plain output, a failed styled write degrades that one run.

    Args:
        runs (Sequence[StyledRun]): Runs to write, in order.
        stream (TextIO): Target stream.
        factories (Iterable[WriterFactory] | None): Writer factories tried in order.
    """
    try:
        writer: TermWriter = open_writer(stream, factories)
    except TermCapabilityError as exc:
        logger.debug("falling back to plain output: %s", exc)
        write_plain(runs, stream)
        return

    for run in runs:
        try:
            writer.write_styled(run)
        except TermStringError as exc:
            logger.debug("styled write failed, writing run plain: %s", exc)
            writer.write_plain(run)


def try_write_styled(
    runs: Sequence[StyledRun],
    stream: TextIO,
    factories: Iterable[WriterFactory] | None = None,
) -> None:
    """Write ``runs`` styled and report the first failure.

    Runs before the failing one have already been written when the error is
    raised.

    Args:
        runs (Sequence[StyledRun]): Runs to write, in order.
        stream (TextIO): Target stream.
        factories (Iterable[WriterFactory] | None): Writer factories tried in order.

    Raises:
        TermIOError: If a stream write failed.
        TermCapabilityError: If no writer could be set up, or an attribute was rejected.
        TermOtherError: If a backend failed in another way.
    """
    writer: TermWriter = open_writer(stream, factories)
    for run in runs:
        writer.write_styled(run)


def resolve_stream(file: TextIO | None, *, err: bool) -> TextIO:
    """Return ``file``, or the current ``sys.stderr`` / ``sys.stdout``."""
    if file is not None:
        return file
    return sys.stderr if err else sys.stdout


def echo(
    runs: Sequence[StyledRun],
    file: TextIO | None = None,
    *,
    mode: ColorMode = ColorMode.AUTO,
    nl: bool = False,
    err: bool = False,
    factories: Iterable[WriterFactory] | None = None,
) -> None:
    """Print ``runs`` to a stream according to a color mode.

    Args:
        runs (Sequence[StyledRun]): Runs to write, in order.
        file (TextIO | None): Target stream; defaults to standard output, or
            standard error when ``err`` is True. Resolved at call time.
        mode (ColorMode): `ALWAYS` for styled output, `NEVER` for plain
            output, `AUTO` to probe the stream once for this call.
        nl (bool): If True, write a plain newline after the text.
        err (bool): Default to standard error instead of standard output.
        factories (Iterable[WriterFactory] | None): Writer factories for styled output.
    """
    stream: TextIO = resolve_stream(file, err=err)
    styled: bool = resolve_color_mode(color_mode_override=mode, stream=stream)
    if styled:
        write_styled(runs, stream, factories)
    else:
        write_plain(runs, stream)
    if nl:
        write_plain((StyledRun(text=NEWLINE),), stream)

# topmark:header:start
#
#   project      : TermString
#   file         : __init__.py
#   file_relpath : src/termstring/writers/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Writer backends for styled runs.

- [`TermWriter`][termstring.writers.base.TermWriter]: the write protocol.
- [`PlainWriter`][termstring.writers.base.PlainWriter]: text only.
- [`TerminfoWriter`][termstring.writers.terminfo.TerminfoWriter]: terminfo
  capabilities via blessed.
- [`AnsiWriter`][termstring.writers.ansi.AnsiWriter]: SGR sequences via click.
"""

from __future__ import annotations

from termstring.writers.ansi import AnsiWriter
from termstring.writers.base import PlainWriter, StreamWriter, TermWriter, WriterFactory
from termstring.writers.terminfo import TerminfoWriter

__all__ = [
    "AnsiWriter",
    "PlainWriter",
    "StreamWriter",
    "TermWriter",
    "TerminfoWriter",
    "WriterFactory",
]

# topmark:header:start
#
#   project      : TermString
#   file         : __init__.py
#   file_relpath : src/termstring/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TermString package.

TermString builds text annotated with terminal display attributes (bold,
colors, underline, ...), concatenates it while keeping the run list minimal,
and prints it styled when the target supports it and plain otherwise.

Public API:
    - [`Attr`][termstring.style.attrs.Attr] / [`AttrKind`][termstring.style.attrs.AttrKind]:
      single display attributes.
    - [`TermStyle`][termstring.style.model.TermStyle]: a set of attributes.
    - [`TermString`][termstring.text.model.TermString]: styled text.
    - [`ColorMode`][termstring.color.ColorMode]: styled / plain / auto output.
    - Exceptions from [`termstring.errors`][termstring.errors].
"""

from __future__ import annotations

from termstring.color import ColorMode
from termstring.errors import TermCapabilityError, TermIOError, TermOtherError, TermStringError
from termstring.style import color
from termstring.style.attrs import Attr, AttrKind
from termstring.style.model import TermStyle
from termstring.text.model import TermString
from termstring.text.run import StyledRun

__all__ = [
    "Attr",
    "AttrKind",
    "ColorMode",
    "StyledRun",
    "TermCapabilityError",
    "TermIOError",
    "TermOtherError",
    "TermString",
    "TermStringError",
    "TermStyle",
    "color",
]

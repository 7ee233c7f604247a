# topmark:header:start
#
#   project      : TermString
#   file         : __init__.py
#   file_relpath : src/termstring/style/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Display attributes and attribute sets."""

from __future__ import annotations

from termstring.style import color
from termstring.style.attrs import Attr, AttrKind
from termstring.style.model import StyleLike, TermStyle

__all__ = [
    "Attr",
    "AttrKind",
    "StyleLike",
    "TermStyle",
    "color",
]

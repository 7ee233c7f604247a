# topmark:header:start
#
#   project      : TermString
#   file         : __init__.py
#   file_relpath : src/termstring/text/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Styled text built from style-tagged runs."""

from __future__ import annotations

from termstring.text.model import TermString, TextLike
from termstring.text.run import StyledRun

__all__ = [
    "StyledRun",
    "TermString",
    "TextLike",
]

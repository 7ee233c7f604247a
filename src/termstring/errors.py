# topmark:header:start
#
#   project      : TermString
#   file         : errors.py
#   file_relpath : src/termstring/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for TermString output.

Usage:
    Writer backends raise these exceptions to report a styled write that could
    not be completed. The high-level print family catches them and falls back to
    plain output, so callers only observe them through
    [`TermString.try_write_styled`][termstring.text.model.TermString.try_write_styled].

Programming errors (an invalid attribute payload, a broken internal invariant)
are not part of this hierarchy; they surface as `TypeError`, `ValueError` or
`AssertionError`.
"""

from __future__ import annotations


class TermStringError(Exception):
    """Base class for all styled-output failures."""


class TermIOError(TermStringError):
    """The underlying stream write failed.

    The original `OSError` is chained as ``__cause__``.
    """


class TermCapabilityError(TermStringError):
    """The target rejected an attribute, or could not be set up for styling."""


class TermOtherError(TermStringError):
    """Any other failure reported by a writer backend."""

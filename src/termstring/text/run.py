# topmark:header:start
#
#   project      : TermString
#   file         : run.py
#   file_relpath : src/termstring/text/run.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Style-tagged text runs."""

from __future__ import annotations

from dataclasses import dataclass, field

from termstring.style.model import TermStyle


@dataclass
class StyledRun:
    """A text fragment and the style it is displayed with.

    Attributes:
        style (TermStyle): Display attributes of the fragment.
        text (str): The fragment itself.
    """

    style: TermStyle = field(default_factory=TermStyle)
    text: str = ""

    def is_default_empty(self) -> bool:
        """Return True for an empty fragment with the default (unstyled) style."""
        return not self.text and not self.style

    def copy(self) -> StyledRun:
        return StyledRun(self.style.copy(), self.text)

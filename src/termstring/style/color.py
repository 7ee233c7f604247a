# topmark:header:start
#
#   project      : TermString
#   file         : color.py
#   file_relpath : src/termstring/style/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Terminal color numbers.

Colors are plain `int` values as understood by the terminfo `setaf`/`setab`
capabilities: 0-7 are the standard colors, 8-15 their bright variants and
16-255 the extended 256-color palette.
"""

from __future__ import annotations

from typing import Final

Color = int

BLACK: Final[Color] = 0
RED: Final[Color] = 1
GREEN: Final[Color] = 2
YELLOW: Final[Color] = 3
BLUE: Final[Color] = 4
MAGENTA: Final[Color] = 5
CYAN: Final[Color] = 6
WHITE: Final[Color] = 7
BRIGHT_BLACK: Final[Color] = 8
BRIGHT_RED: Final[Color] = 9
BRIGHT_GREEN: Final[Color] = 10
BRIGHT_YELLOW: Final[Color] = 11
BRIGHT_BLUE: Final[Color] = 12
BRIGHT_MAGENTA: Final[Color] = 13
BRIGHT_CYAN: Final[Color] = 14
BRIGHT_WHITE: Final[Color] = 15

MAX_COLOR: Final[Color] = 255

# Names used by click for the 16 basic colors, indexed by color number.
COLOR_NAMES: Final[tuple[str, ...]] = (
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
    "bright_black",
    "bright_red",
    "bright_green",
    "bright_yellow",
    "bright_blue",
    "bright_magenta",
    "bright_cyan",
    "bright_white",
)


def is_valid_color(value: object) -> bool:
    """Return True if ``value`` is a color number in ``0..255``."""
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= MAX_COLOR

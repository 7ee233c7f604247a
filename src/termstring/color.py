# topmark:header:start
#
#   project      : TermString
#   file         : color.py
#   file_relpath : src/termstring/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-mode resolution for TermString output.

This module decides whether a print call emits styled or plain output:

- `ColorMode` enum (the caller's request).
- `resolve_color_mode()`: turn a request, the environment and the target
  stream into a final `bool`.

The capability probe is evaluated once per top-level print call, never per run.
"""

from __future__ import annotations

import os
from enum import Enum
from typing import TYPE_CHECKING

from termstring.config.logging import get_logger

if TYPE_CHECKING:
    from typing import TextIO

    from termstring.config.logging import TermStringLogger


logger: TermStringLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for styled terminal output.

    Attributes:
        AUTO: Style only when appropriate (the target stream is a TTY).
        ALWAYS: Request styled output regardless of TTY status.
        NEVER: Plain output only.

    Example:
        >>> resolve_color_mode(color_mode_override=ColorMode.NEVER, stream=sys.stdout)
        False
        >>> resolve_color_mode(color_mode_override=ColorMode.AUTO, stream_isatty_override=True)
        True  # unless NO_COLOR is set
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def stream_isatty(stream: TextIO | None) -> bool:
    """Return True if ``stream`` reports itself as an interactive terminal.

    Streams without an ``isatty`` method, closed streams and streams whose
    ``isatty`` raises are treated as non-interactive.
    """
    if stream is None:
        return False
    isatty = getattr(stream, "isatty", None)
    if not callable(isatty):
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        return False


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    stream: TextIO | None = None,
    stream_isatty_override: bool | None = None,
) -> bool:
    """Determine whether styled output should be attempted.

    Decision precedence:
        1. **Explicit request**: `ALWAYS` → True; `NEVER` → False.
        2. **Environment**:
            - `FORCE_COLOR` (set and not equal to `"0"`) → True
            - `NO_COLOR` (set to any value) → False
        3. **Auto**: `stream.isatty()`.

    Args:
        color_mode_override (ColorMode | None): The caller's request; `None`
            behaves like `AUTO`.
        stream (TextIO | None): The stream that will receive the output.
        stream_isatty_override (bool | None): Optional override for TTY detection.
            When `None`, [`stream_isatty`][termstring.color.stream_isatty] probes
            ``stream``.

    Returns:
        bool: True if styled output should be attempted; False otherwise.
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        logger.trace("FORCE_COLOR=%r enables styling", force_color)
        return True
    if os.getenv("NO_COLOR") is not None:
        logger.trace("NO_COLOR disables styling")
        return False

    if stream_isatty_override is None:
        stream_isatty_override = stream_isatty(stream)
    logger.trace("auto color mode: isatty=%s", stream_isatty_override)
    return bool(stream_isatty_override)

# topmark:header:start
#
#   project      : TermString
#   file         : attrs.py
#   file_relpath : src/termstring/style/attrs.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Terminal display attributes.

An attribute is a tagged value identifying one display capability. Two shapes
exist:

- *flag* kinds carry no data: `BOLD`, `DIM`, `BLINK`, `REVERSE`, `SECURE`;
- *valued* kinds carry one payload: `ITALIC`, `UNDERLINE` and `STANDOUT` take a
  `bool`, `FOREGROUND_COLOR` and `BACKGROUND_COLOR` take a
  [`Color`][termstring.style.color.Color].

Two attributes *match by variant* when their kinds are equal, regardless of
payload; they *match exactly* when kind and payload are both equal. Exact
matching is plain `==` on [`Attr`][termstring.style.attrs.Attr].

Example:
    ```python
    from termstring.style.attrs import Attr
    from termstring.style.color import RED

    Attr.underline(True) == Attr.underline(False)  # False
    Attr.underline(True).matches_variant(Attr.underline(False))  # True
    Attr.fg(RED).kind  # AttrKind.FOREGROUND_COLOR
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from termstring.style.color import Color, is_valid_color


class AttrKind(str, Enum):
    """Discriminant of a display attribute, independent of its payload."""

    BOLD = "bold"
    DIM = "dim"
    BLINK = "blink"
    REVERSE = "reverse"
    SECURE = "secure"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STANDOUT = "standout"
    FOREGROUND_COLOR = "foreground_color"
    BACKGROUND_COLOR = "background_color"

    @property
    def is_flag(self) -> bool:
        """True for kinds that carry no payload."""
        return self in _FLAG_KINDS

    @property
    def is_color(self) -> bool:
        """True for kinds whose payload is a color number."""
        return self in _COLOR_KINDS


_FLAG_KINDS: frozenset[AttrKind] = frozenset(
    {AttrKind.BOLD, AttrKind.DIM, AttrKind.BLINK, AttrKind.REVERSE, AttrKind.SECURE}
)
_COLOR_KINDS: frozenset[AttrKind] = frozenset(
    {AttrKind.FOREGROUND_COLOR, AttrKind.BACKGROUND_COLOR}
)

AttrValue = bool | Color | None


@dataclass(frozen=True)
class Attr:
    """A single display attribute: a kind and its payload.

    Attributes:
        kind (AttrKind): The attribute kind.
        value (AttrValue): `None` for flag kinds, a `bool` for
            italic/underline/standout, a color number for fg/bg.

    Raises:
        TypeError: If the payload type does not fit the kind.
        ValueError: If a color payload is outside ``0..255``.
    """

    kind: AttrKind
    value: AttrValue = None

    def __post_init__(self) -> None:
        """Validate the payload against the kind."""
        kind: AttrKind = AttrKind(self.kind)
        if kind is not self.kind:
            object.__setattr__(self, "kind", kind)

        if kind.is_flag:
            if self.value is not None:
                raise TypeError(f"{kind.name} takes no value, got {self.value!r}")
        elif kind.is_color:
            if isinstance(self.value, bool) or not isinstance(self.value, int):
                raise TypeError(f"{kind.name} takes a color number, got {self.value!r}")
            if not is_valid_color(self.value):
                raise ValueError(f"{kind.name} color out of range: {self.value}")
        elif not isinstance(self.value, bool):
            raise TypeError(f"{kind.name} takes a bool, got {self.value!r}")

    def matches_variant(self, other: Attr) -> bool:
        """Return True if ``other`` has the same kind, whatever its payload."""
        return self.kind is other.kind

    @classmethod
    def bold(cls) -> Attr:
        return cls(AttrKind.BOLD)

    @classmethod
    def dim(cls) -> Attr:
        return cls(AttrKind.DIM)

    @classmethod
    def blink(cls) -> Attr:
        return cls(AttrKind.BLINK)

    @classmethod
    def reverse(cls) -> Attr:
        return cls(AttrKind.REVERSE)

    @classmethod
    def secure(cls) -> Attr:
        return cls(AttrKind.SECURE)

    @classmethod
    def italic(cls, on: bool) -> Attr:
        return cls(AttrKind.ITALIC, on)

    @classmethod
    def underline(cls, on: bool) -> Attr:
        return cls(AttrKind.UNDERLINE, on)

    @classmethod
    def standout(cls, on: bool) -> Attr:
        return cls(AttrKind.STANDOUT, on)

    @classmethod
    def fg(cls, color: Color) -> Attr:
        return cls(AttrKind.FOREGROUND_COLOR, color)

    @classmethod
    def bg(cls, color: Color) -> Attr:
        return cls(AttrKind.BACKGROUND_COLOR, color)

# topmark:header:start
#
#   project      : TermString
#   file         : model.py
#   file_relpath : src/termstring/style/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Attribute sets for styled terminal text.

A [`TermStyle`][termstring.style.model.TermStyle] is an unordered collection of
display attributes holding **at most one value per attribute kind**. Storage is
one slot per [`AttrKind`][termstring.style.attrs.AttrKind], so the invariant is
structural rather than checked by scanning.

Merge semantics:
    - ``add``: overwrite the payload of an existing attribute of the same kind
      (last write wins). Operator: ``+`` / ``+=``.
    - ``or``: keep an existing attribute of the same kind (first write wins).
      Operator: ``|`` / ``|=``.
    - ``unset_exact``: remove only an attribute equal in kind *and* payload.
      Operator: ``-`` / ``-=``.
    - ``unset_variant``: remove the attribute of the same kind, any payload.

Equality:
    Two styles are equal (``==``, [`eq_style`][termstring.style.model.TermStyle.eq_style])
    when every attribute of one has an exact match in the other and vice versa,
    so insertion order never matters.
    [`eq_variant_style`][termstring.style.model.TermStyle.eq_variant_style] is
    the same check with payloads ignored.

Naming:
    - ``*_attr`` methods take one [`Attr`][termstring.style.attrs.Attr].
    - ``*_attrs`` methods take an iterable of `Attr` and apply the single
      form once per item, in order.
    - ``*_style`` methods take another style (or anything
      [`TermStyle.coerce`][termstring.style.model.TermStyle.coerce] accepts).
    - ``with_*`` / ``without_*`` are the chaining forms: they return a modified
      copy and leave the receiver untouched.

Example:
    ```python
    from termstring.style.attrs import AttrKind
    from termstring.style.color import BLUE, MAGENTA
    from termstring.style.model import TermStyle

    style = TermStyle.underline(True) | TermStyle.bg(BLUE)
    (style | TermStyle.bg(MAGENTA)).get(AttrKind.BACKGROUND_COLOR)  # Attr.bg(BLUE)
    (style + TermStyle.bg(MAGENTA)).get(AttrKind.BACKGROUND_COLOR)  # Attr.bg(MAGENTA)
    ```
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Union

from termstring.style.attrs import Attr, AttrKind

if TYPE_CHECKING:
    from termstring.style.color import Color

# Anything accepted where a style operand is expected.
StyleLike = Union["TermStyle", Attr, Iterable[Attr]]


class TermStyle:
    """A set of display attributes with at most one attribute per kind.

    Args:
        attrs (Iterable[Attr]): Attributes applied in order via
            [`add_attr`][termstring.style.model.TermStyle.add_attr]; later
            entries of the same kind override earlier ones.
    """

    __slots__ = ("_slots",)

    def __init__(self, attrs: Iterable[Attr] = ()) -> None:
        self._slots: dict[AttrKind, Attr] = {}
        self.add_attrs(attrs)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_attrs(cls, attrs: Iterable[Attr]) -> TermStyle:
        """Build a style from ``attrs``, applied in order."""
        return cls(attrs)

    @classmethod
    def coerce(cls, other: StyleLike) -> TermStyle:
        """Return ``other`` as a style.

        A `TermStyle` is returned as-is (not copied), a single `Attr` becomes a
        one-attribute style, and any other iterable is passed to the constructor.

        Args:
            other (StyleLike): The value to convert.

        Returns:
            TermStyle: The converted style.
        """
        if isinstance(other, TermStyle):
            return other
        if isinstance(other, Attr):
            return cls((other,))
        return cls(other)

    @classmethod
    def bold(cls) -> TermStyle:
        return cls((Attr.bold(),))

    @classmethod
    def dim(cls) -> TermStyle:
        return cls((Attr.dim(),))

    @classmethod
    def blink(cls) -> TermStyle:
        return cls((Attr.blink(),))

    @classmethod
    def reverse(cls) -> TermStyle:
        return cls((Attr.reverse(),))

    @classmethod
    def secure(cls) -> TermStyle:
        return cls((Attr.secure(),))

    @classmethod
    def italic(cls, on: bool) -> TermStyle:
        return cls((Attr.italic(on),))

    @classmethod
    def underline(cls, on: bool) -> TermStyle:
        return cls((Attr.underline(on),))

    @classmethod
    def standout(cls, on: bool) -> TermStyle:
        return cls((Attr.standout(on),))

    @classmethod
    def fg(cls, color: Color) -> TermStyle:
        return cls((Attr.fg(color),))

    @classmethod
    def bg(cls, color: Color) -> TermStyle:
        return cls((Attr.bg(color),))

    def copy(self) -> TermStyle:
        """Return an independent copy of this style."""
        clone: TermStyle = TermStyle()
        clone._slots = dict(self._slots)
        return clone

    __copy__ = copy

    # ------------------------------------------------------------------
    # Slot primitives
    # ------------------------------------------------------------------

    def _match(self, attr: Attr, exact: bool) -> Attr | None:
        # Variant match when exact is False
        current: Attr | None = self._slots.get(attr.kind)
        if current is None:
            return None
        if exact and current != attr:
            return None
        return current

    def _occupy(self, attr: Attr) -> None:
        if attr.kind in self._slots:
            raise AssertionError(f"TermStyle already holds a {attr.kind.name} slot")
        self._slots[attr.kind] = attr

    def _set(self, attr: Attr, replace: bool) -> None:
        if attr.kind not in self._slots:
            self._occupy(attr)
        elif replace:
            # Overwrite in place so the slot keeps its position.
            self._slots[attr.kind] = attr

    def _remove(self, attr: Attr, exact: bool) -> None:
        if self._match(attr, exact) is not None:
            del self._slots[attr.kind]

    # ------------------------------------------------------------------
    # Single attribute
    # ------------------------------------------------------------------

    def has_exact_attr(self, attr: Attr) -> bool:
        """Return True if a slot holds exactly ``attr`` (kind and payload)."""
        return self._match(attr, exact=True) is not None

    def has_variant_attr(self, attr: Attr) -> bool:
        """Return True if a slot holds an attribute of ``attr``'s kind."""
        return self._match(attr, exact=False) is not None

    def add_attr(self, attr: Attr) -> None:
        """Set ``attr``, overwriting the payload of an attribute of the same kind."""
        self._set(attr, replace=True)

    def or_attr(self, attr: Attr) -> None:
        """Set ``attr`` unless an attribute of the same kind is already present."""
        self._set(attr, replace=False)

    def unset_exact_attr(self, attr: Attr) -> None:
        """Clear the slot holding exactly ``attr``; no-op if there is none."""
        self._remove(attr, exact=True)

    def unset_variant_attr(self, attr: Attr) -> None:
        """Clear the slot holding an attribute of ``attr``'s kind; no-op if there is none."""
        self._remove(attr, exact=False)

    def with_attr(self, attr: Attr) -> TermStyle:
        clone: TermStyle = self.copy()
        clone.add_attr(attr)
        return clone

    def with_ored_attr(self, attr: Attr) -> TermStyle:
        clone: TermStyle = self.copy()
        clone.or_attr(attr)
        return clone

    def without_exact_attr(self, attr: Attr) -> TermStyle:
        clone: TermStyle = self.copy()
        clone.unset_exact_attr(attr)
        return clone

    def without_variant_attr(self, attr: Attr) -> TermStyle:
        clone: TermStyle = self.copy()
        clone.unset_variant_attr(attr)
        return clone

    # ------------------------------------------------------------------
    # Lists of attributes
    # ------------------------------------------------------------------

    def has_exact_attrs(self, attrs: Iterable[Attr]) -> bool:
        """Return True if every attribute of ``attrs`` has an exact match."""
        return all(self.has_exact_attr(attr) for attr in attrs)

    def has_variant_attrs(self, attrs: Iterable[Attr]) -> bool:
        """Return True if every attribute of ``attrs`` has a variant match."""
        return all(self.has_variant_attr(attr) for attr in attrs)

    def add_attrs(self, attrs: Iterable[Attr]) -> None:
        for attr in attrs:
            self.add_attr(attr)

    def or_attrs(self, attrs: Iterable[Attr]) -> None:
        for attr in attrs:
            self.or_attr(attr)

    def unset_exact_attrs(self, attrs: Iterable[Attr]) -> None:
        for attr in attrs:
            self.unset_exact_attr(attr)

    def unset_variant_attrs(self, attrs: Iterable[Attr]) -> None:
        for attr in attrs:
            self.unset_variant_attr(attr)

    def with_attrs(self, attrs: Iterable[Attr]) -> TermStyle:
        clone: TermStyle = self.copy()
        clone.add_attrs(attrs)
        return clone

    def with_ored_attrs(self, attrs: Iterable[Attr]) -> TermStyle:
        clone: TermStyle = self.copy()
        clone.or_attrs(attrs)
        return clone

    def without_exact_attrs(self, attrs: Iterable[Attr]) -> TermStyle:
        clone: TermStyle = self.copy()
        clone.unset_exact_attrs(attrs)
        return clone

    def without_variant_attrs(self, attrs: Iterable[Attr]) -> TermStyle:
        clone: TermStyle = self.copy()
        clone.unset_variant_attrs(attrs)
        return clone

    # ------------------------------------------------------------------
    # Other styles
    # ------------------------------------------------------------------

    def has_exact_style(self, other: StyleLike) -> bool:
        """Return True if every attribute of ``other`` has an exact match in this style."""
        return self.has_exact_attrs(TermStyle.coerce(other))

    def has_variant_style(self, other: StyleLike) -> bool:
        """Return True if every attribute kind of ``other`` is present in this style."""
        return self.has_variant_attrs(TermStyle.coerce(other))

    def add_style(self, other: StyleLike) -> None:
        """ADD-merge ``other`` into this style (overwrite on conflict)."""
        self.add_attrs(tuple(TermStyle.coerce(other)))

    def or_style(self, other: StyleLike) -> None:
        """OR-merge ``other`` into this style (keep existing on conflict)."""
        self.or_attrs(tuple(TermStyle.coerce(other)))

    def unset_exact_style(self, other: StyleLike) -> None:
        """Remove every attribute that exactly matches one of ``other``.

        An attribute of the same kind but a different payload is left untouched.
        """
        self.unset_exact_attrs(tuple(TermStyle.coerce(other)))

    def unset_variant_style(self, other: StyleLike) -> None:
        """Remove every attribute whose kind appears in ``other``."""
        self.unset_variant_attrs(tuple(TermStyle.coerce(other)))

    def with_style(self, other: StyleLike) -> TermStyle:
        clone: TermStyle = self.copy()
        clone.add_style(other)
        return clone

    def with_ored_style(self, other: StyleLike) -> TermStyle:
        clone: TermStyle = self.copy()
        clone.or_style(other)
        return clone

    def without_exact_style(self, other: StyleLike) -> TermStyle:
        clone: TermStyle = self.copy()
        clone.unset_exact_style(other)
        return clone

    def without_variant_style(self, other: StyleLike) -> TermStyle:
        clone: TermStyle = self.copy()
        clone.unset_variant_style(other)
        return clone

    def reset(self) -> None:
        """Clear every slot; the style becomes equal to ``TermStyle()``."""
        self._slots.clear()

    def eq_style(self, other: StyleLike) -> bool:
        """Return True if both styles hold exactly the same attributes.

        Args:
            other (StyleLike): The style to compare with.

        Returns:
            bool: True if each attribute of either style has an exact match in the other.
        """
        other_style: TermStyle = TermStyle.coerce(other)
        return self.has_exact_style(other_style) and other_style.has_exact_style(self)

    def eq_variant_style(self, other: StyleLike) -> bool:
        """Return True if both styles hold the same attribute kinds, payloads ignored."""
        other_style: TermStyle = TermStyle.coerce(other)
        return self.has_variant_style(other_style) and other_style.has_variant_style(self)

    # ------------------------------------------------------------------
    # Per-kind access
    # ------------------------------------------------------------------

    def get(self, kind: AttrKind) -> Attr | None:
        """Return the attribute occupying ``kind``'s slot, or None."""
        return self._slots.get(AttrKind(kind))

    def has_kind(self, kind: AttrKind) -> bool:
        return AttrKind(kind) in self._slots

    def unset_kind(self, kind: AttrKind) -> None:
        self._slots.pop(AttrKind(kind), None)

    def without_kind(self, kind: AttrKind) -> TermStyle:
        clone: TermStyle = self.copy()
        clone.unset_kind(kind)
        return clone

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[Attr]:
        """Iterate over the occupied slots in slot order."""
        return iter(tuple(self._slots.values()))

    def __len__(self) -> int:
        return len(self._slots)

    def __contains__(self, attr: object) -> bool:
        return isinstance(attr, Attr) and self.has_exact_attr(attr)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TermStyle):
            return NotImplemented
        return self.eq_style(other)

    # Mutable value type
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._slots.values())!r})"

    def __or__(self, other: StyleLike) -> TermStyle:
        return self.with_ored_style(other)

    def __ior__(self, other: StyleLike) -> TermStyle:
        self.or_style(other)
        return self

    def __add__(self, other: StyleLike) -> TermStyle:
        return self.with_style(other)

    def __iadd__(self, other: StyleLike) -> TermStyle:
        self.add_style(other)
        return self

    def __sub__(self, other: StyleLike) -> TermStyle:
        return self.without_exact_style(other)

    def __isub__(self, other: StyleLike) -> TermStyle:
        self.unset_exact_style(other)
        return self

# topmark:header:start
#
#   project      : TermString
#   file         : test_text_model.py
#   file_relpath : tests/text/test_text_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for `termstring.text.model.TermString`: runs, appending and styling."""

from __future__ import annotations

import pytest

from tests.conftest import parametrize
from termstring.style.attrs import Attr
from termstring.style.color import GREEN, RED
from termstring.style.model import TermStyle
from termstring.text.model import TermString
from termstring.text.run import StyledRun


def _shape(text: TermString) -> list[tuple[str, TermStyle]]:
    return [(run.text, run.style) for run in text.runs]


# ---------------------------------------------------------------------------
# Construction and essentials
# ---------------------------------------------------------------------------


def test_default_is_one_default_empty_run() -> None:
    text: TermString = TermString()
    assert len(text.runs) == 1
    assert text.runs[0].is_default_empty()
    assert text.length() == 0
    assert text.is_empty()
    assert str(text) == ""


def test_constructor_copies_style() -> None:
    style: TermStyle = TermStyle.bold()
    text: TermString = TermString("abc", style)
    style.add_attr(Attr.fg(RED))
    assert _shape(text) == [("abc", TermStyle.bold())]


def test_constructor_accepts_a_single_attr() -> None:
    assert TermString("x", Attr.bold()) == TermString("x", TermStyle.bold())


def test_from_str_is_unstyled() -> None:
    assert TermString.from_str("abc") == TermString("abc", TermStyle())


def test_constructor_rejects_non_text() -> None:
    with pytest.raises(TypeError):
        TermString(42)  # type: ignore[arg-type]


def test_length_counts_characters_not_runs() -> None:
    text: TermString = TermString("héllo", TermStyle.bold()) + TermString(" wörld")
    assert text.length() == 11
    assert len(text) == 11
    assert not text.is_empty()
    assert text.to_plain_string() == "héllo wörld"


def test_styled_empty_text_is_empty() -> None:
    text: TermString = TermString("", TermStyle.bold())
    assert text.is_empty()
    assert not text.runs[0].is_default_empty()


def test_runs_are_copies() -> None:
    text: TermString = TermString("abc", TermStyle.bold())
    run: StyledRun = text.runs[0]
    run.text = "zzz"
    run.style.add_attr(Attr.dim())
    assert _shape(text) == [("abc", TermStyle.bold())]


def test_copy_is_independent() -> None:
    text: TermString = TermString("abc", TermStyle.bold())
    clone: TermString = text.copy()
    clone.append_text("def")
    clone.add_style(TermStyle.dim())
    assert text == TermString("abc", TermStyle.bold())


# ---------------------------------------------------------------------------
# append_text
# ---------------------------------------------------------------------------


def test_append_text_inherits_last_style() -> None:
    text: TermString = TermString("a", TermStyle.bold())
    text.append_text("bc")
    assert _shape(text) == [("abc", TermStyle.bold())]


def test_append_empty_text_is_noop() -> None:
    text: TermString = TermString("a", TermStyle.bold())
    text.append_text("")
    assert _shape(text) == [("a", TermStyle.bold())]


def test_append_text_after_runs_were_purged_creates_unstyled_run() -> None:
    text: TermString = TermString()
    text.append(TermString())
    assert text.runs == ()
    text.append_text("x")
    assert _shape(text) == [("x", TermStyle())]


def test_with_appended_text_leaves_receiver_untouched() -> None:
    text: TermString = TermString("a")
    assert text.with_appended_text("b") == TermString("ab")
    assert text == TermString("a")


# ---------------------------------------------------------------------------
# append
# ---------------------------------------------------------------------------


def test_append_coalesces_equal_styles() -> None:
    text: TermString = TermString("a", TermStyle.bold())
    text.append(TermString("b", TermStyle.bold()))
    assert _shape(text) == [("ab", TermStyle.bold())]


def test_append_keeps_distinct_styles_apart() -> None:
    text: TermString = TermString("a", TermStyle.bold())
    text.append(TermString("b", TermStyle.fg(RED)))
    assert _shape(text) == [("a", TermStyle.bold()), ("b", TermStyle.fg(RED))]


def test_append_coalesces_only_the_leading_runs() -> None:
    other: TermString = TermString("b", TermStyle.bold())
    other.append(TermString("c", TermStyle.fg(RED)))
    other.append(TermString("d", TermStyle.bold()))

    text: TermString = TermString("a", TermStyle.bold())
    text.append(other)
    assert _shape(text) == [
        ("ab", TermStyle.bold()),
        ("c", TermStyle.fg(RED)),
        ("d", TermStyle.bold()),
    ]


def test_append_does_not_modify_other() -> None:
    other: TermString = TermString("b", TermStyle.bold())
    text: TermString = TermString("a", TermStyle.bold())
    text.append(other)
    text.append_text("!")
    assert other == TermString("b", TermStyle.bold())


def test_append_style_equality_ignores_attr_order() -> None:
    text: TermString = TermString("a", [Attr.bold(), Attr.fg(GREEN)])
    text.append(TermString("b", [Attr.fg(GREEN), Attr.bold()]))
    assert len(text.runs) == 1


def test_append_str_is_unstyled() -> None:
    text: TermString = TermString("a", TermStyle.bold())
    text.append("b")
    assert _shape(text) == [("a", TermStyle.bold()), ("b", TermStyle())]


@parametrize(
    "value",
    [
        TermString("x"),
        TermString("x", TermStyle.bold()),
        TermString("x", TermStyle.bold()) + TermString("y", TermStyle.fg(RED)),
    ],
)
def test_default_empty_is_identity(value: TermString) -> None:
    assert value.with_appended(TermString()) == value
    assert TermString().with_appended(value) == value
    assert TermString() + value + TermString() == value


def test_default_empty_does_not_block_coalescing() -> None:
    text: TermString = TermString("a", TermStyle.bold())
    text.append(TermString())
    text.append(TermString("b", TermStyle.bold()))
    assert _shape(text) == [("ab", TermStyle.bold())]


def test_styled_empty_run_is_not_purged() -> None:
    text: TermString = TermString("a")
    text.append(TermString("", TermStyle.bold()))
    assert _shape(text) == [("a", TermStyle()), ("", TermStyle.bold())]
    # The empty styled run absorbs equal-styled text that follows.
    text.append(TermString("b", TermStyle.bold()))
    assert _shape(text) == [("a", TermStyle()), ("b", TermStyle.bold())]


def test_append_self() -> None:
    text: TermString = TermString("ab", TermStyle.bold())
    text.append(text)
    assert _shape(text) == [("abab", TermStyle.bold())]


def test_append_rejects_other_types() -> None:
    with pytest.raises(TypeError):
        TermString("a").append(3)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Bulk style changes
# ---------------------------------------------------------------------------


def _two_runs() -> TermString:
    return TermString("a", TermStyle.bold()) + TermString("b", TermStyle.fg(RED))


def test_set_style_does_not_recoalesce() -> None:
    text: TermString = _two_runs()
    text.set_style(TermStyle.dim())
    # Both runs now share a style but stay separate.
    assert _shape(text) == [("a", TermStyle.dim()), ("b", TermStyle.dim())]
    # The next append only looks at the last run.
    text.append(TermString("c", TermStyle.dim()))
    assert _shape(text) == [("a", TermStyle.dim()), ("bc", TermStyle.dim())]


def test_set_style_gives_each_run_its_own_copy() -> None:
    style: TermStyle = TermStyle.dim()
    text: TermString = _two_runs()
    text.set_style(style)
    style.add_attr(Attr.bold())
    text.add_style(TermStyle.fg(GREEN))
    assert all(run.style == TermStyle([Attr.dim(), Attr.fg(GREEN)]) for run in text.runs)


def test_reset_style_does_not_recoalesce() -> None:
    text: TermString = _two_runs()
    text.reset_style()
    assert _shape(text) == [("a", TermStyle()), ("b", TermStyle())]
    assert str(text) == "ab"


def test_add_style_overrides_and_or_style_keeps() -> None:
    added: TermString = _two_runs().with_style(TermStyle.fg(GREEN))
    ored: TermString = _two_runs().with_ored_style(TermStyle.fg(GREEN))
    assert _shape(added) == [
        ("a", TermStyle([Attr.bold(), Attr.fg(GREEN)])),
        ("b", TermStyle.fg(GREEN)),
    ]
    assert _shape(ored) == [
        ("a", TermStyle([Attr.bold(), Attr.fg(GREEN)])),
        ("b", TermStyle.fg(RED)),
    ]


def test_with_style_forms_leave_receiver_untouched() -> None:
    text: TermString = _two_runs()
    text.with_set_style(TermStyle.dim())
    text.with_reset_style()
    text.with_style(TermStyle.dim())
    text.with_ored_style(TermStyle.dim())
    assert text == _two_runs()


# ---------------------------------------------------------------------------
# Operators and protocols
# ---------------------------------------------------------------------------


def test_add_operators() -> None:
    text: TermString = TermString("a", TermStyle.bold())
    assert _shape(text + "b") == [("ab", TermStyle.bold())]
    assert _shape(text + TermString("b")) == [("a", TermStyle.bold()), ("b", TermStyle())]
    assert _shape("b" + text) == [("b", TermStyle()), ("a", TermStyle.bold())]
    assert text == TermString("a", TermStyle.bold())


def test_in_place_add() -> None:
    text: TermString = TermString("a", TermStyle.bold())
    alias: TermString = text
    text += "b"
    text += TermString("c", TermStyle.bold())
    assert text is alias
    assert _shape(text) == [("abc", TermStyle.bold())]


def test_add_rejects_other_types() -> None:
    with pytest.raises(TypeError):
        _ = TermString("a") + 1  # type: ignore[operator]
    with pytest.raises(TypeError):
        _ = 1 + TermString("a")  # type: ignore[operator]


def test_equality_compares_runs() -> None:
    assert TermString("ab", TermStyle.bold()) == TermString("a", TermStyle.bold()) + "b"
    assert TermString("ab") != TermString("ab", TermStyle.bold())
    assert TermString("ab") != "ab"


def test_unhashable() -> None:
    with pytest.raises(TypeError):
        hash(TermString())


def test_repr_shows_runs() -> None:
    text: str = repr(TermString("hi", TermStyle.bold()))
    assert text.startswith("TermString([(TermStyle(")
    assert "'hi'" in text

from __future__ import annotations

import pytest

from pegcomb import (
    Element, LookaheadKind, Wildcard, char, render, render_kind, string,
)


def test_leaf_renders_plain() -> None:
    assert str(string("if")) == "if"
    assert render(string("if")) == "if"


def test_string_is_not_escaped() -> None:
    assert str(string("a | b")) == "a | b"


def test_lookahead_prefix() -> None:
    assert str(string("a").pos()) == "&a"
    assert str(string("a").neg()) == "!a"
    assert str(LookaheadKind.NONE) == ""


@pytest.mark.parametrize(
    "e, expected",
    [
        (string("a").times(1), "a"),
        (string("a").times(3), "a{3}"),
        (string("a").min(2), "a{2-}"),
        (string("a").min_to_max(2, 5), "a{2-5}"),
        (string("a").min_to_max(3, 3), "a{3}"),
    ],
)
def test_loop_suffix(e: Element, expected: str) -> None:
    assert str(e) == expected


def test_prefix_kind_suffix_order() -> None:
    assert str(string("a").min(0).neg()) == "!a{0-}"


def test_wildcard() -> None:
    assert str(Element(Wildcard())) == "_"
    assert render_kind(Wildcard()) == "_"


def test_character_class_renders_source() -> None:
    assert str(char("a-z")) == "[a-z]"
    assert str(char("]a[")) == r"[\]a\[]"
    assert str(char("0-9").min(1)) == "[0-9]{1-}"


def test_flat_sequence_and_choice() -> None:
    a, b, c = string("a"), string("b"), string("c")
    assert str((a + b) + c) == "(a + b + c)"
    assert str(a + (b + c)) == "(a + b + c)"
    assert str(a + b + c) == "(a + b + c)"
    assert str((a | b) | c) == "(a | b | c)"
    assert str(a | (b | c)) == "(a | b | c)"


def test_choice_order() -> None:
    assert str(string("a") | string("b")) == "(a | b)"
    assert str(string("b") | string("a")) == "(b | a)"


def test_mixed_operators_follow_python_precedence() -> None:
    assert str(string("a") + string("b") | string("c")) == "((a + b) | c)"
    assert str(string("a") | string("b") + string("c")) == "(a | (b + c))"


def test_children_render_with_their_annotations() -> None:
    e = string("if") + char("a-z").neg() + (string("x") | string("y")).min(1)
    assert str(e) == "(if + ![a-z] + (x | y){1-})"


def test_rendering_is_repeatable() -> None:
    e = (string("a") | string("b")).times(2).pos()
    first = str(e)
    assert str(e) == first == "&(a | b){2}"

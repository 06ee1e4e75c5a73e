# pegcomb/render.py
from __future__ import annotations
from .element import (
    Element, ElementKind, String, CharacterClass, Wildcard, Choice, Sequence,
)

# Canonical text form:  <lookahead prefix><kind text><loop suffix>
#   prefix : "" | "&" | "!"
#   kind   : literal text as-is, class source, "_" for wildcard,
#            "(a | b)" for choice, "(a + b)" for sequence
#   suffix : "" for exactly once, "{n}", "{n-}", "{n-m}"
# Golden outputs depend on this form; keep it byte-stable.

_SEPARATORS = {
    Choice: " | ",
    Sequence: " + ",
}


def render_kind(kind: ElementKind) -> str:
    if isinstance(kind, String):
        return kind.text

    if isinstance(kind, CharacterClass):
        return kind.pattern

    if isinstance(kind, Wildcard):
        return "_"

    if isinstance(kind, (Choice, Sequence)):
        sep = _SEPARATORS[type(kind)]
        return "(" + sep.join(render(c) for c in kind.children) + ")"

    raise AssertionError(f"unknown element kind: {kind!r}")


def render(e: Element) -> str:
    return f"{e.lookahead_kind}{render_kind(e.kind)}{e.loop_count}"

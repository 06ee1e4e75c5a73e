# pegcomb/element.py
"""Expression tree nodes and the combinators that build them.

A tree is built from two leaf builders, ``string`` and ``char``, joined with
``+`` (sequence) and ``|`` (choice) and annotated with the lookahead and
repetition modifiers. Nodes are frozen: every modifier and operator returns
a new node.

Repeated use of the same operator produces one flat node::

    a + b + c        -> Sequence([a, b, c])
    (a + b) + c      -> Sequence([a, b, c])
    a + (b + c)      -> Sequence([a, b, c])

Only a plain node (no lookahead, exactly-once loop) is expanded. Annotating a
composite before combining it again keeps it as a single grouped child.
Python gives ``+`` a higher precedence than ``|``, so ``a + b | c`` is
``Choice([Sequence([a, b]), c])``.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum
from functools import reduce
from typing import Any, Iterator, List, Tuple, Type, Union
import operator

import regex

from .errors import InvalidCharacterClass, LookaheadAlreadySet
from .loop import LoopRange, Max, Specified

# ---- Node kinds ----

@dataclass(frozen=True)
class String:
    text: str  # matched verbatim, never interpreted as syntax

@dataclass(frozen=True)
class CharacterClass:
    pattern: str  # bracket-expression source, e.g. "[a-z]"
    matcher: Any = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        # built directly rather than through char()
        if self.matcher is None:
            try:
                object.__setattr__(self, "matcher", regex.compile(self.pattern))
            except regex.error as e:
                raise InvalidCharacterClass(self.pattern, f"{e}") from e

@dataclass(frozen=True)
class Wildcard:
    pass

@dataclass(frozen=True)
class Choice:
    children: Tuple["Element", ...]

@dataclass(frozen=True)
class Sequence:
    children: Tuple["Element", ...]

ElementKind = Union[String, CharacterClass, Wildcard, Choice, Sequence]


class LookaheadKind(Enum):
    NONE = ""
    POSITIVE = "&"
    NEGATIVE = "!"

    def __str__(self) -> str:
        return self.value


# ---- Element ----

@dataclass(frozen=True)
class Element:
    kind: ElementKind
    lookahead_kind: LookaheadKind = LookaheadKind.NONE
    loop_count: LoopRange = field(default_factory=LoopRange.once)

    # -- lookahead --

    def _with_lookahead(self, kind: LookaheadKind) -> "Element":
        if self.lookahead_kind is not LookaheadKind.NONE:
            raise LookaheadAlreadySet(self.lookahead_kind, kind)
        return replace(self, lookahead_kind=kind)

    def pos(self) -> "Element":
        """Positive lookahead: must match, consumes nothing."""
        return self._with_lookahead(LookaheadKind.POSITIVE)

    def neg(self) -> "Element":
        """Negative lookahead: must not match, consumes nothing."""
        return self._with_lookahead(LookaheadKind.NEGATIVE)

    # -- repetition (last write wins) --

    def times(self, n: int) -> "Element":
        return self.min_to_max(n, n)

    def min(self, n: int) -> "Element":
        return replace(self, loop_count=LoopRange(n, Max()))

    def min_to_max(self, lo: int, hi: int) -> "Element":
        return replace(self, loop_count=LoopRange(lo, Specified(hi)))

    # -- composition --

    @property
    def is_plain(self) -> bool:
        return self.lookahead_kind is LookaheadKind.NONE and self.loop_count.is_once

    def _expand(self, kind_type: Type[Union[Choice, Sequence]]) -> List["Element"]:
        """Children of a plain node of `kind_type`; an annotated node stays one group."""
        if isinstance(self.kind, kind_type) and self.is_plain:
            return list(self.kind.children)
        return [self]

    def __add__(self, other: Any) -> "Element":
        if not isinstance(other, Element):
            return NotImplemented
        children = self._expand(Sequence) + other._expand(Sequence)
        return Element(Sequence(tuple(children)))

    def __or__(self, other: Any) -> "Element":
        if not isinstance(other, Element):
            return NotImplemented
        children = self._expand(Choice) + other._expand(Choice)
        return Element(Choice(tuple(children)))

    def __str__(self) -> str:
        from .render import render
        return render(self)


# ---- Builders ----

def string(text: str) -> Element:
    return Element(String(text))


def char(pattern: str) -> Element:
    """Character class from the *inside* of a bracket expression.

    Literal ``[`` and ``]`` in ``pattern`` are escaped, so ``char("]a[")``
    is the set {``]``, ``a``, ``[``}.
    """
    escaped = pattern.replace("[", "\\[").replace("]", "\\]")
    source = f"[{escaped}]"
    try:
        matcher = regex.compile(source)
    except regex.error as e:
        raise InvalidCharacterClass(pattern, f"{e}") from e
    return Element(CharacterClass(source, matcher))


def sequence(*elements: Element) -> Element:
    if not elements:
        raise TypeError("sequence() requires at least one element")
    return reduce(operator.add, elements)


def choice(*elements: Element) -> Element:
    if not elements:
        raise TypeError("choice() requires at least one element")
    return reduce(operator.or_, elements)


def iter_elements(root: Element) -> Iterator[Element]:
    """Pre-order walk over ``root`` and all of its descendants."""
    stack = [root]
    while stack:
        e = stack.pop()
        yield e
        if isinstance(e.kind, (Choice, Sequence)):
            stack.extend(reversed(e.kind.children))


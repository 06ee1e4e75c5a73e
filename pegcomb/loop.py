# pegcomb/loop.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from .errors import InvalidLoopRange

T = TypeVar("T")


@dataclass(frozen=True)
class Max:
    """Unbounded upper limit."""


@dataclass(frozen=True)
class Specified(Generic[T]):
    value: T


Maxable = Union[Max, Specified[T]]


@dataclass(frozen=True)
class LoopRange:
    """Inclusive repetition bound ``[min, max]``; ``max`` may be ``Max()``.

    The constructor is the only place a range is validated, so every
    instance in circulation satisfies ``0 <= min <= max``.
    """
    min: int
    max: Maxable[int]

    def __post_init__(self) -> None:
        if self.min < 0:
            raise InvalidLoopRange(self.min, self.max)
        if isinstance(self.max, Specified):
            if self.max.value < 0 or self.min > self.max.value:
                raise InvalidLoopRange(self.min, self.max)
        elif not isinstance(self.max, Max):
            raise TypeError(f"max must be Max() or Specified(n), got {self.max!r}")

    @classmethod
    def once(cls) -> "LoopRange":
        return cls(1, Specified(1))

    @classmethod
    def exactly(cls, n: int) -> "LoopRange":
        return cls(n, Specified(n))

    @classmethod
    def at_least(cls, n: int) -> "LoopRange":
        return cls(n, Max())

    @classmethod
    def between(cls, lo: int, hi: int) -> "LoopRange":
        return cls(lo, Specified(hi))

    @property
    def is_once(self) -> bool:
        return self.max == Specified(1) and self.min == 1

    def __str__(self) -> str:
        # exactly-once is the implicit default and renders as nothing
        if isinstance(self.max, Max):
            return f"{{{self.min}-}}"
        if self.min == self.max.value:
            return "" if self.min == 1 else f"{{{self.min}}}"
        return f"{{{self.min}-{self.max.value}}}"

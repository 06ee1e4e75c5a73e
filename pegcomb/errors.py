# pegcomb/errors.py
"""Contract violations raised while building expression trees.

All of these mean the grammar-authoring code is wrong. They are raised at
the call that broke the contract and never caught inside the package.
"""

from __future__ import annotations
from typing import Any


class PegBuildError(Exception):
    """Base class for builder-time misuse."""


class InvalidCharacterClass(PegBuildError, ValueError):
    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"invalid character class {pattern!r}: {reason}")


class InvalidLoopRange(PegBuildError, ValueError):
    def __init__(self, lo: int, hi: Any):
        self.min = lo
        self.max = hi
        super().__init__(f"invalid loop range: min={lo!r} max={hi!r}")


class LookaheadAlreadySet(PegBuildError):
    def __init__(self, current: Any, requested: Any):
        self.current = current
        self.requested = requested
        super().__init__(
            f"lookahead kind is already set to {current.name}; "
            f"cannot set it to {requested.name}"
        )

# pegcomb/__init__.py
"""Combinator algebra for PEG expression trees.

This package provides:
- Leaf builders: `string` (also exported as `str`) and `char`
- Sequence (`+`) and choice (`|`) combinators that flatten as they chain
- Lookahead (`pos`, `neg`) and repetition (`times`, `min`, `min_to_max`) modifiers
- A canonical text rendering of any tree (`render`, or `str()` on an Element)
- A compact text notation reader (`parse_expression`)

It does not execute expressions against input.
"""

from .errors import (
    PegBuildError, InvalidCharacterClass, InvalidLoopRange, LookaheadAlreadySet,
)
from .loop import LoopRange, Max, Maxable, Specified
from .element import (
    Element, ElementKind, LookaheadKind,
    String, CharacterClass, Wildcard, Choice, Sequence,
    string, char, sequence, choice, iter_elements,
)
from .element import string as str
from .render import render, render_kind
from .notation import parse_expression
from .module import Module, ModuleId, Rule, RuleId, InternalRuleIdSet

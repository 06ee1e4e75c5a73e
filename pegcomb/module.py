# pegcomb/module.py
"""Containers for a future rule-resolution layer.

These hold data only. Resolving rules across modules, and attaching
``Element`` trees to a ``RuleId``, is left to whatever consumes this package.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List

@dataclass(frozen=True)
class ModuleId:
    name: str

@dataclass(frozen=True)
class RuleId:
    name: str

@dataclass
class Rule:
    pass

@dataclass
class InternalRuleIdSet:
    rule_ids: List[str] = field(default_factory=list)

@dataclass
class Module:
    submodules: Dict[ModuleId, "Module"] = field(default_factory=dict)
    rules: Dict[RuleId, Rule] = field(default_factory=dict)

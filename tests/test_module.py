from __future__ import annotations

from pegcomb import InternalRuleIdSet, Module, ModuleId, Rule, RuleId


def test_placeholders_hold_data_only() -> None:
    root = Module()
    assert root.submodules == {}
    assert root.rules == {}

    child = Module(rules={RuleId("ident"): Rule()})
    root.submodules[ModuleId("lexer")] = child

    assert root.submodules[ModuleId("lexer")].rules[RuleId("ident")] == Rule()
    assert InternalRuleIdSet().rule_ids == []
    assert InternalRuleIdSet(["a", "b"]).rule_ids == ["a", "b"]


def test_ids_compare_by_name() -> None:
    assert ModuleId("m") == ModuleId("m")
    assert RuleId("r") != RuleId("s")
    assert len({RuleId("r"), RuleId("r")}) == 1

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Rule types, built-in rule sets and the rule set registry."""

from md2dokuwiki.rules.base import RULE_FLAG_NAMES, LiteralFixup, Rule, RuleSet, parse_rule_flags
from md2dokuwiki.rules.builtin import BUILTIN_RULESETS, CLASSIC_RULESET, RFC_RULESET
from md2dokuwiki.rules.registry import RuleSetRegistry, ruleset_registry

__all__ = [
    "RULE_FLAG_NAMES",
    "BUILTIN_RULESETS",
    "CLASSIC_RULESET",
    "RFC_RULESET",
    "LiteralFixup",
    "Rule",
    "RuleSet",
    "RuleSetRegistry",
    "parse_rule_flags",
    "ruleset_registry",
]

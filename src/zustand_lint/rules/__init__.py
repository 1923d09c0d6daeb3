"""Rule registry and the recommended configuration.

New rules = new RULES entries.
"""

from __future__ import annotations

from zustand_lint.rules import prefer_use_shallow, require_selector
from zustand_lint.rules.base import Rule, RuleContext, RuleMeta

RULES: dict[str, Rule] = {
    require_selector.RULE_ID: require_selector.RULE,
    prefer_use_shallow.RULE_ID: prefer_use_shallow.RULE,
}

RECOMMENDED: dict[str, str] = {
    require_selector.RULE_ID: "error",
    prefer_use_shallow.RULE_ID: "warn",
}


__all__ = ["RULES", "RECOMMENDED", "Rule", "RuleContext", "RuleMeta"]

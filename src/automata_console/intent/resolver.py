from __future__ import annotations

from typing import Sequence

from .rules import DEFAULT_RULE, RULE_TABLE
from .types import IntentRule, ResolvedIntent


def match_rule(
    task: str, rules: Sequence[IntentRule] = RULE_TABLE
) -> IntentRule | None:
    """Return the first rule whose keyword occurs in ``task``, case-insensitively.

    Rules are scanned in declaration order, so an earlier rule wins over a
    later one even when the later keyword is longer or appears first in the
    text.
    """
    lowered = task.lower()
    for rule in rules:
        if rule.keyword and rule.keyword in lowered:
            return rule
    return None


def resolve_intent(
    task: str,
    rules: Sequence[IntentRule] = RULE_TABLE,
    default: IntentRule = DEFAULT_RULE,
) -> ResolvedIntent:
    rule = match_rule(task, rules)
    return ResolvedIntent.from_rule(rule if rule is not None else default)

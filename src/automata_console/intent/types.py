from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class IntentRule:
    keyword: str  # lowercase token, matched as a substring
    intent: str
    actions: tuple[str, ...]
    summary: str


@dataclass(frozen=True)
class ResolvedIntent:
    intent: str
    actions: tuple[str, ...]
    summary: str

    @classmethod
    def from_rule(cls, rule: IntentRule) -> ResolvedIntent:
        return cls(intent=rule.intent, actions=rule.actions, summary=rule.summary)

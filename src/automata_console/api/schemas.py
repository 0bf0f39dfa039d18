"""Request and response models for the automata endpoint."""

from typing import Literal

from pydantic import BaseModel, StrictStr, field_validator

from automata_console.intent.types import IntentRule, ResolvedIntent


class AutomataRequest(BaseModel):
    """Inbound payload: a free-text task description."""

    task: StrictStr

    @field_validator("task")
    @classmethod
    def _task_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("task must not be blank")
        return value


class AutomataResponse(BaseModel):
    """Successful classification result."""

    status: Literal["completed"] = "completed"
    summary: str
    detected_intent: str
    suggested_actions: list[str]
    confidence: float

    @classmethod
    def from_resolved(
        cls, resolved: ResolvedIntent, confidence: float
    ) -> "AutomataResponse":
        return cls(
            summary=resolved.summary,
            detected_intent=resolved.intent,
            suggested_actions=list(resolved.actions),
            confidence=confidence,
        )


class ErrorResponse(BaseModel):
    error: str


class IntentRuleView(BaseModel):
    keyword: str
    intent: str
    actions: list[str]
    summary: str

    @classmethod
    def from_rule(cls, rule: IntentRule) -> "IntentRuleView":
        return cls(
            keyword=rule.keyword,
            intent=rule.intent,
            actions=list(rule.actions),
            summary=rule.summary,
        )


class HealthResponse(BaseModel):
    status: str
    version: str
    components: dict[str, str]

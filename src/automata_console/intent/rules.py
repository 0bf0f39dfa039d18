from __future__ import annotations

from typing import Iterator

from .types import IntentRule

# Declaration order is match precedence.
RULE_TABLE: tuple[IntentRule, ...] = (
    IntentRule(
        keyword="data",
        intent="data_analysis",
        actions=(
            "validate input sources",
            "generate semantic model",
            "prepare downstream pipeline",
        ),
        summary="Data analysis pipeline initialized. "
        "Sources validated and schema mapped.",
    ),
    IntentRule(
        keyword="deploy",
        intent="deployment_orchestration",
        actions=(
            "run pre-deploy checks",
            "build production artifacts",
            "execute staged rollout",
        ),
        summary="Deployment sequence prepared. All pre-flight checks passed.",
    ),
    IntentRule(
        keyword="test",
        intent="quality_assurance",
        actions=(
            "generate test matrix",
            "execute regression suite",
            "compile coverage report",
        ),
        summary="QA pipeline configured. "
        "Test matrix generated across target environments.",
    ),
    IntentRule(
        keyword="monitor",
        intent="observability_setup",
        actions=(
            "instrument service endpoints",
            "configure alert thresholds",
            "initialize dashboard views",
        ),
        summary="Observability layer activated. "
        "Metrics and alerting channels established.",
    ),
    IntentRule(
        keyword="security",
        intent="security_audit",
        actions=(
            "scan dependency graph",
            "evaluate access policies",
            "generate compliance report",
        ),
        summary="Security audit initiated. "
        "Dependency and policy analysis in progress.",
    ),
)

DEFAULT_RULE = IntentRule(
    keyword="",
    intent="general_automation",
    actions=(
        "parse task description",
        "classify automation intent",
        "generate execution plan",
    ),
    summary="Automation pipeline executed successfully. "
    "Task classified and routed.",
)


def iter_rules(include_default: bool = False) -> Iterator[IntentRule]:
    yield from RULE_TABLE
    if include_default:
        yield DEFAULT_RULE


import pytest
from automata_console.intent.resolver import match_rule, resolve_intent
from automata_console.intent.rules import DEFAULT_RULE, RULE_TABLE, iter_rules
from automata_console.intent.types import IntentRule


def test_rule_table_order_and_keywords() -> None:
    assert [r.keyword for r in RULE_TABLE] == [
        "data",
        "deploy",
        "test",
        "monitor",
        "security",
    ]
    for rule in RULE_TABLE:
        assert rule.keyword == rule.keyword.lower()
        assert len(rule.actions) == 3


def test_security_scenario() -> None:
    resolved = resolve_intent("run security audit on staging")

    assert resolved.intent == "security_audit"
    assert list(resolved.actions) == [
        "scan dependency graph",
        "evaluate access policies",
        "generate compliance report",
    ]


def test_unmatched_task_falls_back_to_default() -> None:
    resolved = resolve_intent("write a poem")

    assert resolved.intent == "general_automation"
    assert resolved.summary == (
        "Automation pipeline executed successfully. Task classified and routed."
    )
    assert resolved.actions == DEFAULT_RULE.actions


@pytest.mark.parametrize(
    "task",
    ["deploy the api", "Redeploy now", "DEPLOYMENT to prod", "please deploy"],
)
def test_deploy_keyword(task: str) -> None:
    assert resolve_intent(task).intent == "deployment_orchestration"


def test_match_is_case_insensitive() -> None:
    assert resolve_intent("DATA pipeline").intent == "data_analysis"


def test_table_order_beats_text_order() -> None:
    # "deploy" appears first in the text but "data" is declared first.
    assert resolve_intent("deploy the data warehouse").intent == "data_analysis"


def test_substring_containment_inside_words() -> None:
    assert resolve_intent("update the database").intent == "data_analysis"
    assert resolve_intent("attestation flow").intent == "quality_assurance"


def test_custom_rule_table() -> None:
    rules = (
        IntentRule("alpha", "first", ("a",), "A"),
        IntentRule("alp", "second", ("b",), "B"),
    )
    assert match_rule("ALPHA", rules).intent == "first"
    assert match_rule("nothing", rules) is None
    assert resolve_intent("nothing", rules).intent == "general_automation"


def test_iter_rules_appends_default_last() -> None:
    assert list(iter_rules()) == list(RULE_TABLE)
    rules = list(iter_rules(include_default=True))
    assert rules[-1] is DEFAULT_RULE
    assert len(rules) == len(RULE_TABLE) + 1

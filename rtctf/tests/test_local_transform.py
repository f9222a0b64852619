"""Tests for the deterministic local RTCTF transform."""

import pytest

from rtctf.models.enums import Domain, Intent, Language
from rtctf.pipeline.local_transform_pipeline import get_registry, transform

EN = get_registry().get(Language.EN)
PT = get_registry().get(Language.PT)


@pytest.mark.parametrize("text", [
    "Create a marketing plan",
    "Help me learn React",
    "x",
    "a" * 10000,
])
def test_english_output_has_every_section_marker(text):
    result = transform(text, Language.EN)
    for marker in ("RESULT:", "TASK:", "CONTEXT:", "CRITERIA:", "FORMAT:"):
        assert marker in result


def test_portuguese_output_has_every_section_marker():
    result = transform("Criar um plano de marketing", Language.PT)
    for marker in ("RESULTADO:", "TAREFA:", "CONTEXTO:", "CRITÉRIOS:", "FORMATO:"):
        assert marker in result
    assert "Tarefa" in result


def test_section_markers_match_template_layout():
    assert EN.section_markers() == ["RESULT:", "TASK:", "CONTEXT:", "CRITERIA:", "FORMAT:"]


def test_transform_is_deterministic():
    text = "Analyze our sales funnel and write Python code to automate it"
    assert transform(text, Language.EN) == transform(text, Language.EN)


def test_business_text_uses_business_context():
    result = transform("Create a marketing plan", Language.EN)
    assert "Task" in result
    assert EN.contexts[Domain.BUSINESS] in result
    assert "business context" in result
    assert EN.default_context not in result


def test_portuguese_business_text_uses_portuguese_business_context():
    result = transform("Criar um plano de marketing", Language.PT)
    assert PT.contexts[Domain.BUSINESS] in result
    assert "contexto de negócios" in result


def test_tech_text_uses_technical_context():
    result = transform("Write a Python function for data processing", Language.EN)
    assert "technical context" in result


def test_intent_selects_result_and_format():
    result = transform("Analyze customer feedback data", Language.EN)
    assert EN.results[Intent.ANALYSIS] in result
    assert EN.formats[Intent.ANALYSIS] in result


def test_unclassified_text_uses_default_fragments():
    result = transform("Tell me something nice", Language.EN)
    assert EN.results[Intent.DEFAULT] in result
    assert EN.default_context in result
    assert EN.formats[Intent.DEFAULT] in result
    for item in EN.base_criteria:
        assert f"- {item}" in result


def test_criteria_union_of_all_matched_domains():
    result = transform("Teach our sales team to write Python code", Language.EN)
    for domain in (Domain.BUSINESS, Domain.TECH, Domain.EDUCATION):
        for item in EN.domain_criteria[domain]:
            assert f"- {item}" in result
    # context comes from the primary domain only
    assert EN.contexts[Domain.BUSINESS] in result
    assert EN.contexts[Domain.TECH] not in result


def test_task_text_appears_at_every_task_slot():
    text = "Summarize quarterly numbers"
    result = transform(text, Language.EN)
    assert result.count(text) == 2
    assert f"**TASK:**\n{text}" in result


def test_original_casing_is_preserved():
    result = transform("CREATE A Marketing PLAN", Language.EN)
    assert "CREATE A Marketing PLAN" in result


def test_placeholder_like_user_text_is_emitted_verbatim():
    text = "Use {task} and {context} literally, plus **RESULT:** markers"
    result = transform(text, Language.EN)
    assert result.count(text) == 2


@pytest.mark.parametrize("text", ["", "   ", "\x00\u200b", "{}{{}}%s"])
def test_never_raises(text):
    result = transform(text, Language.PT)
    assert "TAREFA:" in result

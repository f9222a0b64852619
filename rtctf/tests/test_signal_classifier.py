"""Tests for keyword intent/domain classification."""

from rtctf.models.enums import Domain, Intent
from rtctf.pipeline.classification.signal_classifier import classify

# --- Intent ---


def test_creation_intent_english():
    assert classify("Create a landing page").intent == Intent.CREATION


def test_creation_intent_portuguese():
    assert classify("Criar um plano de marketing").intent == Intent.CREATION


def test_analysis_intent():
    assert classify("Analyze customer feedback data").intent == Intent.ANALYSIS


def test_analysis_intent_portuguese_accented():
    assert classify("Faça uma análise dos resultados").intent == Intent.ANALYSIS


def test_explanation_intent():
    assert classify("Explain machine learning to beginners").intent == Intent.EXPLANATION


def test_planning_intent():
    assert classify("Plan a team productivity workshop").intent == Intent.PLANNING


def test_explanation_noun_is_not_planning():
    assert classify("Give me an explanation of recursion").intent == Intent.EXPLANATION
    assert classify("Uma explicação sobre recursão").intent == Intent.EXPLANATION


def test_keywords_do_not_match_inside_longer_words():
    signals = classify("I am a developer, explain closures")
    assert signals.intent == Intent.EXPLANATION
    assert Domain.TECH in signals.domains


def test_stems_cover_inflections():
    assert classify("Analysis of churn").intent == Intent.ANALYSIS
    assert classify("Creating onboarding emails").intent == Intent.CREATION
    assert classify("Explicar aprendizado de máquina para estudantes").intent == Intent.EXPLANATION


def test_default_intent_when_nothing_matches():
    assert classify("Help me with React").intent == Intent.DEFAULT


def test_creation_wins_over_analysis_and_planning():
    signals = classify("Create a plan and analyze the risks")
    assert signals.intent == Intent.CREATION


def test_analysis_wins_over_explanation():
    assert classify("Evaluate and explain the trade-offs").intent == Intent.ANALYSIS


def test_classification_is_case_insensitive():
    assert classify("CREATE A MARKETING PLAN") == classify("create a marketing plan")


# --- Domains ---


def test_business_domain():
    signals = classify("Create a marketing plan")
    assert signals.domains == frozenset({Domain.BUSINESS})
    assert signals.primary_domain == Domain.BUSINESS


def test_tech_domain():
    assert Domain.TECH in classify("Write a Python function for data processing").domains


def test_domains_may_co_occur():
    signals = classify("Teach our sales team to write Python code")
    assert signals.domains == frozenset({Domain.BUSINESS, Domain.TECH, Domain.EDUCATION})
    assert signals.primary_domain == Domain.BUSINESS
    assert signals.ordered_domains() == [Domain.BUSINESS, Domain.TECH, Domain.EDUCATION]


def test_tech_is_primary_over_education():
    signals = classify("A React course for beginners")
    assert signals.primary_domain == Domain.TECH


def test_no_domain():
    signals = classify("Write a poem about the sea")
    assert signals.domains == frozenset()
    assert signals.primary_domain is None


def test_keywords_match_across_line_breaks():
    assert Domain.TECH in classify("Modelar um banco\nde dados").domains


def test_empty_text_is_default():
    signals = classify("")
    assert signals.intent == Intent.DEFAULT
    assert signals.domains == frozenset()

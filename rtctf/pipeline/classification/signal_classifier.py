"""Keyword classifier: resolves one intent and any set of domains from input text."""

import logging
import re

from rtctf.models.domain import ClassificationSignals
from rtctf.models.enums import Domain, Intent
from rtctf.pipeline.preprocessing.text_normalizer import normalize_for_classification

logger = logging.getLogger(__name__)

# Keywords match whole words; a trailing "*" marks a stem that also covers
# inflections ("analy*" -> analyze, analysis). English and Portuguese.
_INTENT_KEYWORDS: tuple[tuple[Intent, tuple[str, ...]], ...] = (
    (Intent.CREATION, (
        "creat*", "generat*", "develop", "develops", "developing", "write", "writes", "writing",
        "build", "builds", "building", "design", "designs", "designing", "produce", "draft*",
        "compose", "composing",
        "criar", "crie", "gerar", "gere", "desenvolver", "desenvolva", "escrever", "escreva",
        "construir", "construa", "elaborar", "elabore", "produzir", "produza", "redigir", "redija",
    )),
    (Intent.ANALYSIS, (
        "analy*", "evaluat*", "assess*", "review*", "compar*", "investigat*", "audit*",
        "analis*", "anális*", "avali*", "revis*", "investig*", "estudar", "estude",
    )),
    (Intent.EXPLANATION, (
        "explain*", "explanation*", "describ*", "description", "what is", "what are", "how does",
        "how do", "clarify", "teach me",
        "explic*", "descrev*", "descrição", "o que é", "o que são", "como funciona",
        "esclarec*", "me ensine",
    )),
    (Intent.PLANNING, (
        "plan", "plans", "planning", "planned", "strateg*", "roadmap*", "schedul*", "timeline*",
        "organize", "organise", "organizing",
        "plano*", "planej*", "estratég*", "estrateg*", "cronograma*", "organizar",
    )),
)

_DOMAIN_KEYWORDS: dict[Domain, tuple[str, ...]] = {
    Domain.BUSINESS: (
        "marketing", "business*", "sales", "compan*", "customer*", "client*", "revenue*", "market*",
        "brand*", "startup*", "profit*", "investor*",
        "negócio*", "negocio*", "vendas", "empresa*", "cliente*", "receita*", "mercado*", "marca*",
        "lucro*", "investidor*", "empreend*",
    ),
    Domain.TECH: (
        "code*", "coding", "python", "javascript", "typescript", "software", "programming",
        "database*", "function*", "algorithm*", "react", "developer*", "backend", "frontend",
        "machine learning",
        "código*", "codigo*", "programação", "programacao", "banco de dados", "função", "funcao",
        "funções", "funcoes", "algoritmo*", "desenvolvedor*",
    ),
    Domain.EDUCATION: (
        "learn*", "teach*", "student*", "course*", "lesson*", "class", "classes", "classroom*",
        "beginner*", "tutorial*", "school*", "training", "workshop*",
        "aprend*", "ensin*", "aluno*", "estudante*", "curso*", "aula*", "iniciante*", "escola*",
        "treinamento*",
    ),
}


def _compile(keywords: tuple[str, ...]) -> re.Pattern[str]:
    parts = [
        re.escape(keyword[:-1]) + r"\w*" if keyword.endswith("*") else re.escape(keyword) + r"(?!\w)"
        for keyword in keywords
    ]
    return re.compile(r"(?<!\w)(?:" + "|".join(parts) + ")")


_INTENT_PATTERNS: tuple[tuple[Intent, re.Pattern[str]], ...] = tuple(
    (intent, _compile(keywords)) for intent, keywords in _INTENT_KEYWORDS
)
_DOMAIN_PATTERNS: dict[Domain, re.Pattern[str]] = {
    domain: _compile(keywords) for domain, keywords in _DOMAIN_KEYWORDS.items()
}


def classify_intent(normalized_text: str) -> Intent:
    for intent, pattern in _INTENT_PATTERNS:
        if pattern.search(normalized_text):
            return intent
    return Intent.DEFAULT


def classify_domains(normalized_text: str) -> frozenset[Domain]:
    return frozenset(
        domain for domain, pattern in _DOMAIN_PATTERNS.items()
        if pattern.search(normalized_text)
    )


def classify(text: str) -> ClassificationSignals:
    normalized = normalize_for_classification(text)
    signals = ClassificationSignals(
        intent=classify_intent(normalized),
        domains=classify_domains(normalized),
    )
    logger.debug(
        "[SignalClassifier] intent=%s domains=%s",
        signals.intent.value, [d.value for d in signals.ordered_domains()],
    )
    return signals

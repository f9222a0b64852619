"""Local RTCTF transform: classification + template rendering, no network access."""

import logging

from rtctf.models.enums import Language
from rtctf.pipeline.classification.signal_classifier import classify
from rtctf.pipeline.prompt_builder import render_prompt
from rtctf.pipeline.template.template_registry import TemplateRegistry
from rtctf.pipeline.template.template_selector import select_fragments

logger = logging.getLogger(__name__)

_registry = TemplateRegistry()


def get_registry() -> TemplateRegistry:
    return _registry


def transform(text: str, language: Language = Language.EN) -> str:
    """Deterministic (text, language) -> structured prompt. Pure; identical input gives identical output."""
    signals = classify(text)
    template_set = _registry.get(language)
    fragments = select_fragments(template_set, signals)
    prompt = render_prompt(template_set, fragments, text)
    logger.info(
        "[LocalTransform] language=%s intent=%s domains=%s chars=%d",
        language.value, signals.intent.value,
        [d.value for d in signals.ordered_domains()], len(prompt),
    )
    return prompt

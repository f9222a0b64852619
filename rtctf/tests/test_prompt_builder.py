"""Tests for slot rendering and the remote enhancement prompt."""

from rtctf.models.enums import Language
from rtctf.pipeline.prompt_builder import build_enhancement_prompt, render_prompt
from rtctf.pipeline.template.template_registry import TemplateRegistry
from rtctf.pipeline.template.template_selector import ResolvedFragments

_FRAGMENTS = ResolvedFragments(
    result="R-fragment",
    context="C-fragment",
    criteria=("first", "second"),
    format="F-fragment",
)


def test_render_prompt_orders_sections_by_layout():
    template_set = TemplateRegistry().get(Language.EN)
    result = render_prompt(template_set, _FRAGMENTS, "the task")
    positions = [result.index(marker) for marker in template_set.section_markers()]
    assert positions == sorted(positions)


def test_render_prompt_maps_fields_to_slots():
    template_set = TemplateRegistry().get(Language.EN)
    result = render_prompt(template_set, _FRAGMENTS, "the task")
    assert "**RESULT:**\nR-fragment" in result
    assert "**CONTEXT:**\nC-fragment" in result
    assert "**CRITERIA:**\n- first\n- second" in result
    assert "**FORMAT:**\nF-fragment" in result
    assert '**FINAL PROMPT:**\n"the task\n\n' in result


def test_render_prompt_starts_with_title():
    template_set = TemplateRegistry().get(Language.PT)
    result = render_prompt(template_set, _FRAGMENTS, "tarefa")
    assert result.startswith("**PROMPT OTIMIZADO - METODOLOGIA RTCTF")


def test_enhancement_prompt_embeds_user_text_and_methodology():
    prompt = build_enhancement_prompt("Create a marketing plan", Language.EN)
    assert '"""Create a marketing plan"""' in prompt.user_message
    assert "R = Result" in prompt.user_message
    assert "English" in prompt.system_prompt


def test_enhancement_prompt_portuguese():
    prompt = build_enhancement_prompt("Criar um plano", Language.PT)
    assert "Texto do usuário" in prompt.user_message
    assert "português" in prompt.system_prompt


def test_enhancement_prompt_keeps_braces_in_user_text():
    prompt = build_enhancement_prompt("use {text} and {0}", Language.EN)
    assert "use {text} and {0}" in prompt.user_message

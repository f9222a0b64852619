"""Prompt builder: renders the local RTCTF prompt and the remote enhancement instructions.

The local prompt is rendered slot by slot from the template set's layout.
No placeholder substitution happens, so user text is emitted verbatim
even when it contains template-like markers.
"""

from dataclasses import dataclass

from rtctf.models.enums import Language
from rtctf.pipeline.template.methodology_template import PromptSlot, TemplateSet
from rtctf.pipeline.template.template_selector import ResolvedFragments


def _render_slot(slot: PromptSlot, label: str, values: dict[PromptSlot, str]) -> str:
    if slot == PromptSlot.TITLE:
        return f"**{label}**"
    if slot == PromptSlot.SEPARATOR:
        return label
    return f"**{label}**\n{values[slot]}"


def render_prompt(template_set: TemplateSet, fragments: ResolvedFragments, task_text: str) -> str:
    values: dict[PromptSlot, str] = {
        PromptSlot.RESULT: fragments.result,
        PromptSlot.TASK: task_text,
        PromptSlot.CONTEXT: fragments.context,
        PromptSlot.CRITERIA: "\n".join(f"- {item}" for item in fragments.criteria),
        PromptSlot.FORMAT: fragments.format,
        PromptSlot.FINAL_PROMPT: f'"{task_text}\n\n{template_set.closing}"',
    }
    blocks = [_render_slot(entry.slot, entry.label, values) for entry in template_set.layout]
    return "\n\n".join(blocks)


# ===== Remote enhancement instructions =====


@dataclass(frozen=True)
class EnhancementPrompt:
    system_prompt: str
    user_message: str


_SYSTEM_PROMPTS: dict[Language, str] = {
    Language.EN: (
        "You are a prompt engineering expert who helps transform texts using the RTCTF "
        "methodology. Answer in English."
    ),
    Language.PT: (
        "Você é um assistente especialista em prompt engineering que ajuda a transformar "
        "textos usando a metodologia RTCTF. Responda em português."
    ),
}

_USER_TEMPLATES: dict[Language, str] = {
    Language.EN: """Transform the text below into an optimized prompt using THIS specific RTCTF methodology:

R = Result (what is expected to be obtained)
T = Task (what must be done)
C = Context (background information)
C = Criteria (guidelines and constraints)
F = Format (how to structure the response)

IMPORTANT: Do NOT confuse it with other RTCTF methodologies. Use EXACTLY the definition above.
Label the sections RESULT:, TASK:, CONTEXT:, CRITERIA:, FORMAT:.

User text: \"\"\"{text}\"\"\"

Create a structured prompt following EXACTLY this RTCTF methodology (Result, Task, Context, Criteria, Format).""",
    Language.PT: """Transforme o texto abaixo em um prompt otimizado usando ESTA metodologia RTCTF específica:

R = Resultado desejado (o que se espera obter)
T = Tarefa específica (o que deve ser feito)
C = Contexto relevante (informações de fundo)
C = Critérios e restrições (diretrizes e limitações)
F = Formato de resposta (como estruturar a resposta)

IMPORTANTE: NÃO confunda com outras metodologias RTCTF. Use EXATAMENTE esta definição acima.
Rotule as seções RESULTADO:, TAREFA:, CONTEXTO:, CRITÉRIOS:, FORMATO:.

Texto do usuário: \"\"\"{text}\"\"\"

Crie um prompt estruturado seguindo EXATAMENTE esta metodologia RTCTF (Resultado, Tarefa, Contexto, Critérios, Formato).""",
}


def build_enhancement_prompt(text: str, language: Language) -> EnhancementPrompt:
    return EnhancementPrompt(
        system_prompt=_SYSTEM_PROMPTS[language],
        user_message=_USER_TEMPLATES[language].format(text=text),
    )

"""Methodology template: slot enum and per-language template set dataclass."""

from dataclasses import dataclass, field
from enum import Enum

from rtctf.models.enums import Domain, Intent, Language


class PromptSlot(str, Enum):
    TITLE = "TITLE"
    RESULT = "RESULT"
    TASK = "TASK"
    CONTEXT = "CONTEXT"
    CRITERIA = "CRITERIA"
    FORMAT = "FORMAT"
    SEPARATOR = "SEPARATOR"
    FINAL_PROMPT = "FINAL_PROMPT"

    @property
    def is_methodology_section(self) -> bool:
        return self in _METHODOLOGY_SECTIONS


_METHODOLOGY_SECTIONS = frozenset({
    PromptSlot.RESULT,
    PromptSlot.TASK,
    PromptSlot.CONTEXT,
    PromptSlot.CRITERIA,
    PromptSlot.FORMAT,
})


@dataclass(frozen=True)
class SlotLayout:
    slot: PromptSlot
    label: str


@dataclass(frozen=True)
class TemplateSet:
    """Static fragments for one language. Every mapping carries a DEFAULT entry or fallback."""

    language: Language
    layout: tuple[SlotLayout, ...]
    results: dict[Intent, str]
    formats: dict[Intent, str]
    contexts: dict[Domain, str]
    default_context: str
    base_criteria: tuple[str, ...]
    domain_criteria: dict[Domain, tuple[str, ...]] = field(default_factory=dict)
    closing: str = ""

    def section_markers(self) -> list[str]:
        return [entry.label for entry in self.layout if entry.slot.is_methodology_section]

"""Localized message catalogue: error messages and methodology metadata."""

from enum import Enum

from rtctf.models.enums import Language

MAX_TEXT_LENGTH = 10000


class MessageKey(str, Enum):
    TEXT_REQUIRED = "TEXT_REQUIRED"
    TEXT_TOO_LONG = "TEXT_TOO_LONG"
    INVALID_CONTENT_TYPE = "INVALID_CONTENT_TYPE"
    ORIGIN_NOT_ALLOWED = "ORIGIN_NOT_ALLOWED"
    INVALID_REQUEST = "INVALID_REQUEST"
    RATE_LIMITED = "RATE_LIMITED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


_MESSAGES: dict[Language, dict[MessageKey, str]] = {
    Language.EN: {
        MessageKey.TEXT_REQUIRED: "Text is required.",
        MessageKey.TEXT_TOO_LONG: f"Text must be at most {MAX_TEXT_LENGTH} characters.",
        MessageKey.INVALID_CONTENT_TYPE: "Invalid content type. Use application/json.",
        MessageKey.ORIGIN_NOT_ALLOWED: "Origin not allowed.",
        MessageKey.INVALID_REQUEST: "Invalid request.",
        MessageKey.RATE_LIMITED: "Too many requests. Please try again later.",
        MessageKey.INTERNAL_ERROR: "Error generating prompt. Please try again later.",
    },
    Language.PT: {
        MessageKey.TEXT_REQUIRED: "O texto é obrigatório.",
        MessageKey.TEXT_TOO_LONG: f"O texto deve ter no máximo {MAX_TEXT_LENGTH} caracteres.",
        MessageKey.INVALID_CONTENT_TYPE: "Tipo de conteúdo inválido. Use application/json.",
        MessageKey.ORIGIN_NOT_ALLOWED: "Origem não permitida.",
        MessageKey.INVALID_REQUEST: "Requisição inválida.",
        MessageKey.RATE_LIMITED: "Muitas requisições. Tente novamente mais tarde.",
        MessageKey.INTERNAL_ERROR: "Erro ao gerar prompt. Tente novamente mais tarde.",
    },
}


def get_message(key: MessageKey, language: Language = Language.EN) -> str:
    return _MESSAGES[language][key]


def resolve_language(value: object) -> Language:
    """Best-effort language resolution; anything unrecognized is English."""
    if isinstance(value, Language):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered.startswith(Language.PT.value):
            return Language.PT
    return Language.EN


# --- Methodology metadata ---

_METHODOLOGY: dict[Language, dict] = {
    Language.EN: {
        "title": "About RTCTF Methodology",
        "description": (
            "RTCTF is a proven framework for creating effective AI prompts that deliver "
            "better results from ChatGPT, Claude, Gemini, and other LLMs."
        ),
        "sections": [
            ("result", "Result", "Expected outcome"),
            ("task", "Task", "Specific action"),
            ("context", "Context", "Background info"),
            ("criteria", "Criteria", "Guidelines & limits"),
            ("format", "Format", "Response structure"),
        ],
    },
    Language.PT: {
        "title": "Sobre a Metodologia RTCTF",
        "description": (
            "RTCTF é um framework comprovado para criar prompts eficazes que entregam "
            "melhores resultados do ChatGPT, Claude, Gemini e outros LLMs."
        ),
        "sections": [
            ("result", "Resultado", "Resultado esperado"),
            ("task", "Tarefa", "Ação específica"),
            ("context", "Contexto", "Informações de contexto"),
            ("criteria", "Critérios", "Diretrizes e limites"),
            ("format", "Formato", "Estrutura da resposta"),
        ],
    },
}


def get_methodology(language: Language) -> dict:
    meta = _METHODOLOGY[language]
    return {
        "title": meta["title"],
        "description": meta["description"],
        "sections": [
            {"key": key, "label": label, "description": description}
            for key, label, description in meta["sections"]
        ],
    }

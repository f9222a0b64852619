from enum import Enum


class Language(str, Enum):
    EN = "en"
    PT = "pt"


class Intent(str, Enum):
    """Resolved request intent. Declaration order is match priority."""

    CREATION = "CREATION"
    ANALYSIS = "ANALYSIS"
    EXPLANATION = "EXPLANATION"
    PLANNING = "PLANNING"
    DEFAULT = "DEFAULT"


class Domain(str, Enum):
    """Subject domain. Declaration order is the primary-domain priority."""

    BUSINESS = "BUSINESS"
    TECH = "TECH"
    EDUCATION = "EDUCATION"


class ResultSource(str, Enum):
    LOCAL = "Local"
    AI_ENHANCED = "AI Enhanced"
    LOCAL_AI_UNAVAILABLE = "Local (AI unavailable)"


class OutputFormat(str, Enum):
    TXT = "txt"
    MD = "md"
    JSON = "json"

    @property
    def label(self) -> str:
        return _FORMAT_META[self]["label"]

    @property
    def extension(self) -> str:
        return _FORMAT_META[self]["extension"]

    @property
    def mime_type(self) -> str:
        return _FORMAT_META[self]["mime_type"]


_FORMAT_META: dict[OutputFormat, dict[str, str]] = {
    OutputFormat.TXT: {"label": "Text", "extension": "txt", "mime_type": "text/plain"},
    OutputFormat.MD: {"label": "Markdown", "extension": "md", "mime_type": "text/markdown"},
    OutputFormat.JSON: {"label": "JSON", "extension": "json", "mime_type": "application/json"},
}


class FallbackReason(str, Enum):
    PROVIDER_ERROR = "PROVIDER_ERROR"
    TIMEOUT = "TIMEOUT"
    EMPTY_CONTENT = "EMPTY_CONTENT"
    UNEXPECTED = "UNEXPECTED"

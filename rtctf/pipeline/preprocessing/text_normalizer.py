import re
import unicodedata

# Zero-width and invisible Unicode characters
_INVISIBLE_CHARS = re.compile(r"[\u200B\u200C\u200D\uFEFF\u00AD\u2060\u180E]")

# Control characters except common whitespace (\n, \r, \t)
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")

# Any whitespace run (spaces, tabs, newlines) -> single space
_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_for_classification(text: str) -> str:
    """Keyword-matching form of the input. Never used in rendered output.

    NFC keeps precomposed accents ("análise") comparable with the keyword
    tables, and whitespace collapsing lets multi-word keywords
    ("banco de dados", "what is") match across line breaks.
    """
    if not text:
        return ""

    result = unicodedata.normalize("NFC", text)
    result = _INVISIBLE_CHARS.sub("", result)
    result = _CONTROL_CHARS.sub(" ", result)
    result = _WHITESPACE_RUN.sub(" ", result)
    return result.strip().lower()

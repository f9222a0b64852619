"""Output formatting: plain text, Markdown and JSON renderings of a generated prompt."""

import json
import re

from rtctf.models.enums import OutputFormat

# Plain-text cleanup, applied in order
_TEXT_RULES: list[tuple[re.Pattern, str]] = [
    (re.compile(r"\*\*(.*?)\*\*"), r"\1"),            # bold
    (re.compile(r"\*(.*?)\*"), r"\1"),                # italic
    (re.compile(r"^#+\s+", re.M), ""),                # headers
    (re.compile(r"^-\s+", re.M), "• "),               # bullets
    (re.compile(r"`([^`]+)`"), r"\1"),                # inline code
    (re.compile(r"```[\s\S]*?```"), ""),              # code blocks
    (re.compile(r"\[([^\]]+)\]\([^)]+\)"), r"\1"),    # links, keep text
    (re.compile(r"^\s*>\s*", re.M), ""),              # blockquotes
    (re.compile(r"^\s*\|\s*.*\s*\|.*$", re.M), ""),   # tables
    (re.compile(r"---+"), ""),                        # horizontal rules
    (re.compile(r"\n{3,}"), "\n\n"),
    (re.compile(r"^\s+", re.M), ""),
    (re.compile(r"[ \t]+$", re.M), ""),
]

_MARKDOWN_RULES: list[tuple[re.Pattern, str]] = [
    (re.compile(r"^([A-Z][^:\n]*[^:\n])$", re.M), r"# \1"),              # standalone title lines
    (re.compile(r"^([^\W\d_][\w \t]*):[ \t]*(.+)$", re.M), r"**\1:** \2"),   # "Label: value"
    (re.compile(r"^([^\W\d_][\w \t]*):$", re.M), r"## \1"),                  # "Section:"
    (re.compile(r"^•\s+", re.M), "- "),
    (re.compile(r"^(#+ .+)$", re.M), "\\1\n"),
    (re.compile(r"^(\*\*[^:\n]+:\*\* .+)$", re.M), r"\1  "),
    (re.compile(r"\n{3,}"), "\n\n"),
]


def to_text(content: str) -> str:
    result = content
    for pattern, replacement in _TEXT_RULES:
        result = pattern.sub(replacement, result)
    return result.strip()


def to_markdown(content: str) -> str:
    result = to_text(content)
    for pattern, replacement in _MARKDOWN_RULES:
        result = pattern.sub(replacement, result)
    return result.strip()


def _to_key(label: str) -> str:
    return re.sub(r"\s+", "_", label.strip().lower())


def to_json(content: str) -> str:
    lines = [line.strip() for line in to_text(content).split("\n") if line.strip()]

    document: dict[str, object] = {}
    paragraphs: list[str] = []
    current_list_key = ""
    current_list: list[str] = []

    for index, line in enumerate(lines):
        if ":" in line and not line.startswith("•") and not line.endswith(":"):
            key, _, value = line.partition(":")
            key = _to_key(key)
            value = value.strip()
            if key and value:
                document[key] = value
        elif line.endswith(":"):
            if current_list_key and current_list:
                document[current_list_key] = current_list
            current_list_key = _to_key(line[:-1])
            current_list = []
        elif line.startswith("•") or line.startswith("-"):
            if current_list_key:
                current_list.append(line[1:].strip())
        elif index < 3 and "titulo" not in document:
            document["titulo"] = line
        else:
            paragraphs.append(line)

    if current_list_key and current_list:
        document[current_list_key] = current_list

    if paragraphs:
        document["paragrafos"] = paragraphs

    return json.dumps(document, ensure_ascii=False, indent=2)


_FORMATTERS = {
    OutputFormat.TXT: to_text,
    OutputFormat.MD: to_markdown,
    OutputFormat.JSON: to_json,
}


def format_content(content: str, output_format: OutputFormat) -> str:
    return _FORMATTERS[output_format](content)

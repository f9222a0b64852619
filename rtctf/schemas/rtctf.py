from pydantic import BaseModel, Field, field_validator

from rtctf.i18n.messages import MAX_TEXT_LENGTH
from rtctf.models.enums import Language, OutputFormat, ResultSource


class TransformRequest(BaseModel):
    text: str = Field(..., min_length=1, max_length=MAX_TEXT_LENGTH)
    use_ai: bool = Field(False, alias="useAI")
    language: Language = Language.EN

    model_config = {"populate_by_name": True}

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("text must not be blank")
        return v


class TransformResponse(BaseModel):
    prompt: str
    source: ResultSource
    fallback: str | None = None


class FormatRequest(BaseModel):
    content: str = Field(..., min_length=1, max_length=MAX_TEXT_LENGTH * 4)
    format: OutputFormat = OutputFormat.TXT


class FormatResponse(BaseModel):
    content: str
    format: OutputFormat
    extension: str
    mime_type: str = Field(..., alias="mimeType", serialization_alias="mimeType")

    model_config = {"populate_by_name": True}


class MethodologySection(BaseModel):
    key: str
    label: str
    description: str


class MethodologyResponse(BaseModel):
    language: Language
    title: str
    description: str
    sections: list[MethodologySection]

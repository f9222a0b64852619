from fastapi import APIRouter, Depends, Request

from rtctf.api.v1.deps import enforce_rate_limit, parse_body, validate_request
from rtctf.i18n.messages import get_methodology
from rtctf.models.enums import Language
from rtctf.pipeline.formatting.output_formatter import format_content
from rtctf.schemas.rtctf import (
    FormatRequest,
    FormatResponse,
    MethodologyResponse,
    TransformRequest,
    TransformResponse,
)
from rtctf.services import enhancement_service

router = APIRouter(prefix="/api/rtctf", tags=["rtctf"])

_gate = [Depends(validate_request), Depends(enforce_rate_limit)]


@router.post(
    "",
    response_model=TransformResponse,
    response_model_exclude_none=True,
    dependencies=_gate,
)
async def transform(request: Request):
    body = await parse_body(request, TransformRequest)
    result = await enhancement_service.transform(
        body.text,
        body.use_ai,
        body.language,
    )
    return TransformResponse(
        prompt=result.prompt,
        source=result.source,
        fallback=result.fallback,
    )


@router.post("/format", response_model=FormatResponse, dependencies=_gate)
async def format_prompt(request: Request):
    body = await parse_body(request, FormatRequest)
    return FormatResponse(
        content=format_content(body.content, body.format),
        format=body.format,
        extension=body.format.extension,
        mime_type=body.format.mime_type,
    )


@router.get("/methodology", response_model=MethodologyResponse)
async def methodology(language: Language = Language.EN):
    return MethodologyResponse(language=language, **get_methodology(language))

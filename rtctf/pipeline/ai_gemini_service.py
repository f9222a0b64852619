"""Gemini adapter for the enhancement path, selected by `gemini-` model names."""

import logging

from google import genai
from google.genai.types import GenerateContentConfig

from rtctf.core.config import settings
from rtctf.core.exceptions import AiTransformError
from rtctf.models.domain import LlmCallResult
from rtctf.pipeline.ai_transform_service import classify_api_error, require_content, track_usage

logger = logging.getLogger(__name__)

_client: genai.Client | None = None


def _get_client() -> genai.Client:
    global _client
    if _client is None:
        if not settings.gemini_api_key:
            raise AiTransformError("Gemini API key is not configured.")
        _client = genai.Client(api_key=settings.gemini_api_key)
    return _client


def reset_client() -> None:
    global _client
    _client = None


async def call_gemini(
    model: str,
    system_prompt: str,
    user_message: str,
    temp: float,
    max_tokens: int,
) -> LlmCallResult:
    config = GenerateContentConfig(
        system_instruction=system_prompt,
        temperature=temp,
        max_output_tokens=max_tokens,
    )
    try:
        response = await _get_client().aio.models.generate_content(
            model=model,
            contents=user_message,
            config=config,
        )
    except AiTransformError:
        raise
    except Exception as e:
        logger.error("[Gemini] %s call failed", model, exc_info=True)
        raise AiTransformError(classify_api_error(e)) from e

    meta = response.usage_metadata
    prompt_tokens = (meta.prompt_token_count or 0) if meta else 0
    completion_tokens = (meta.candidates_token_count or 0) if meta else 0
    if meta:
        track_usage("Gemini", model, prompt_tokens, completion_tokens)

    return require_content("Gemini", model, prompt_tokens, completion_tokens, response.text)

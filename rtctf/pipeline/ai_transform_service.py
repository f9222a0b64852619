"""OpenAI adapter for the enhancement path: one chat completion, no SDK retries."""

import logging

from openai import AsyncOpenAI

from rtctf.core.config import settings
from rtctf.core.exceptions import AiTransformError
from rtctf.models.domain import LlmCallResult
from rtctf.pipeline import enhancement_metrics_tracker

logger = logging.getLogger(__name__)

_client: AsyncOpenAI | None = None


def _get_client() -> AsyncOpenAI:
    global _client
    if _client is None:
        if not settings.openai_api_key:
            raise AiTransformError("OpenAI API key is not configured.")
        # Single attempt only; the orchestrator owns the fallback.
        _client = AsyncOpenAI(
            api_key=settings.openai_api_key,
            timeout=settings.enhancement_timeout_seconds,
            max_retries=0,
        )
    return _client


def reset_client() -> None:
    global _client
    _client = None


def track_usage(provider: str, model: str, prompt_tokens: int, completion_tokens: int) -> None:
    logger.info(
        "[%s] %s used %d prompt + %d completion tokens",
        provider, model, prompt_tokens, completion_tokens,
    )
    enhancement_metrics_tracker.record_usage(prompt_tokens, completion_tokens)


def require_content(
    provider: str,
    model: str,
    prompt_tokens: int,
    completion_tokens: int,
    content: str | None,
) -> LlmCallResult:
    """Wrap non-blank provider output, or raise so the caller falls back."""
    if content is None or not content.strip():
        raise AiTransformError(f"{provider} response had no content.")
    logger.debug("[%s] %s returned %d chars", provider, model, len(content))
    return LlmCallResult(
        content=content.strip(),
        prompt_tokens=prompt_tokens,
        completion_tokens=completion_tokens,
    )


async def call_openai_with_model(
    model: str,
    system_prompt: str,
    user_message: str,
    temp: float,
    max_tokens: int,
) -> LlmCallResult:
    try:
        completion = await _get_client().chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_message},
            ],
            temperature=temp,
            max_tokens=max_tokens,
        )
    except AiTransformError:
        raise
    except Exception as e:
        logger.error("[OpenAI] %s call failed", model, exc_info=True)
        raise AiTransformError(classify_api_error(e)) from e

    usage = completion.usage
    prompt_tokens = usage.prompt_tokens if usage else 0
    completion_tokens = usage.completion_tokens if usage else 0
    if usage:
        track_usage("OpenAI", model, prompt_tokens, completion_tokens)

    content = completion.choices[0].message.content if completion.choices else None
    return require_content("OpenAI", model, prompt_tokens, completion_tokens, content)


def classify_api_error(e: Exception) -> str:
    """Operator-facing summary of a provider SDK failure."""
    kind = type(e).__name__
    detail = str(e)
    lowered = detail.lower()

    if "Authentication" in kind or "Unauthorized" in kind or "401" in detail or "api key" in lowered:
        return "AI provider authentication error: the API key is invalid. Check the server configuration."
    if "RateLimit" in kind or "429" in detail or "rate limit" in lowered or "quota" in lowered:
        return "AI provider rate limit or quota exceeded."
    if "Timeout" in kind or "timeout" in lowered or "timed out" in lowered:
        return "AI provider request timed out."
    if "Connect" in kind or "connect" in lowered or "network" in lowered:
        return "AI provider connection failed."
    return "AI provider returned a temporary error."

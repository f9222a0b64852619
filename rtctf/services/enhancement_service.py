import asyncio
import logging
from collections.abc import Awaitable, Callable

from rtctf.core.config import settings
from rtctf.core.exceptions import AiTransformError
from rtctf.models.domain import LlmCallResult, TransformResult
from rtctf.models.enums import FallbackReason, Language, ResultSource
from rtctf.pipeline import enhancement_metrics_tracker
from rtctf.pipeline.ai_call_router import call_llm
from rtctf.pipeline.local_transform_pipeline import transform as local_transform
from rtctf.pipeline.prompt_builder import build_enhancement_prompt

logger = logging.getLogger(__name__)

AiCallFn = Callable[[str, str, str, float, int], Awaitable[LlmCallResult]]


async def transform(
    text: str,
    use_ai: bool,
    language: Language,
    *,
    ai_call_fn: AiCallFn = call_llm,
) -> TransformResult:
    """Local transform first, then at most one remote enhancement attempt.

    Remote failures of any kind degrade to the local result; they are logged
    and counted, never raised.
    """
    local_result = local_transform(text, language)

    if not use_ai:
        return TransformResult(prompt=local_result, source=ResultSource.LOCAL)

    if not settings.enhancement_configured:
        logger.info("[Enhancement] AI requested but no credential configured for %s", settings.enhancement_model)
        return TransformResult(prompt=local_result, source=ResultSource.LOCAL_AI_UNAVAILABLE)

    remote_result = await _try_enhance(text, language, ai_call_fn)
    if remote_result is None:
        return TransformResult(prompt=local_result, source=ResultSource.LOCAL_AI_UNAVAILABLE)

    return TransformResult(
        prompt=remote_result,
        source=ResultSource.AI_ENHANCED,
        fallback=local_result,
    )


async def _try_enhance(text: str, language: Language, ai_call_fn: AiCallFn) -> str | None:
    prompt = build_enhancement_prompt(text, language)
    enhancement_metrics_tracker.record_attempt()

    try:
        result = await asyncio.wait_for(
            ai_call_fn(
                settings.enhancement_model,
                prompt.system_prompt,
                prompt.user_message,
                settings.enhancement_temperature,
                settings.enhancement_max_tokens,
            ),
            timeout=settings.enhancement_timeout_seconds,
        )
    except asyncio.TimeoutError:
        logger.warning(
            "[Enhancement] %s timed out after %.1fs; using local result",
            settings.enhancement_model, settings.enhancement_timeout_seconds,
        )
        enhancement_metrics_tracker.record_fallback(FallbackReason.TIMEOUT)
        return None
    except AiTransformError as e:
        logger.warning("[Enhancement] %s failed: %s; using local result", settings.enhancement_model, e)
        enhancement_metrics_tracker.record_fallback(FallbackReason.PROVIDER_ERROR)
        return None
    except Exception:
        logger.exception("[Enhancement] Unexpected failure; using local result")
        enhancement_metrics_tracker.record_fallback(FallbackReason.UNEXPECTED)
        return None

    content = result.content.strip() if result and result.content else ""
    if not content:
        logger.warning("[Enhancement] %s returned empty content; using local result", settings.enhancement_model)
        enhancement_metrics_tracker.record_fallback(FallbackReason.EMPTY_CONTENT)
        return None

    enhancement_metrics_tracker.record_success()
    return content

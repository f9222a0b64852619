"""Model-name-based LLM call router.

Routes to Gemini or OpenAI based on model name prefix.
"""

from rtctf.models.domain import LlmCallResult


async def call_llm(
    model: str,
    system_prompt: str,
    user_message: str,
    temp: float,
    max_tokens: int,
) -> LlmCallResult:
    """Route LLM call to the appropriate provider based on model name prefix."""
    if model.startswith("gemini-"):
        from rtctf.pipeline.ai_gemini_service import call_gemini

        return await call_gemini(model, system_prompt, user_message, temp, max_tokens)
    else:
        from rtctf.pipeline.ai_transform_service import call_openai_with_model

        return await call_openai_with_model(model, system_prompt, user_message, temp, max_tokens)

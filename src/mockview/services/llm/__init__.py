"""
Scoring model access.

The feedback generator talks to one Gemini model. Its model name, sampling,
attempt count and API key all come from settings; callers only supply the
system prompt and the structured output schema.

Usage:
    >>> from src.mockview.services.llm import get_scoring_provider
    >>> llm = get_scoring_provider(system_prompt="You are an evaluator")
    >>> response = await llm.generate("Score this transcript")
"""

from typing import Any

from src.mockview.config import settings
from src.mockview.services.llm.base import BaseLLMProvider, LLMResponse
from src.mockview.services.llm.gemini import GeminiProvider, NonRetryableGeminiError


def get_scoring_provider(
    system_prompt: str,
    response_format: dict[str, Any] | None = None,
    **overrides: Any,
) -> GeminiProvider:
    """
    Build the Gemini provider used to score transcripts.

    Args:
        system_prompt: System instruction
        response_format: JSON schema for structured output (optional)
        **overrides: Replace a configured value (model, temperature, max_tokens, max_attempts)

    Returns:
        Configured GeminiProvider

    Raises:
        ValueError: If GOOGLE_API_KEY is not configured
    """
    api_key = settings.google_api_key.strip()
    if not api_key:
        raise ValueError("GOOGLE_API_KEY is not configured")

    config: dict[str, Any] = {
        "model": settings.llm_feedback_model,
        "temperature": settings.llm_temperature,
        "max_tokens": settings.llm_max_tokens,
        "max_attempts": settings.llm_max_attempts,
        **overrides,
    }
    return GeminiProvider(
        api_key=api_key,
        system_prompt=system_prompt,
        response_format=response_format,
        **config,
    )


__all__ = [
    "get_scoring_provider",
    "BaseLLMProvider",
    "LLMResponse",
    "GeminiProvider",
    "NonRetryableGeminiError",
]

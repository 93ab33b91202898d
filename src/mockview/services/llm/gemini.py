"""Gemini (Google) LLM provider using the Interactions API."""

import logging
from typing import Any

from google import genai
from tenacity import (
    AsyncRetrying,
    retry_if_not_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from src.mockview.services.llm.base import BaseLLMProvider, LLMResponse

logger = logging.getLogger(__name__)

_NON_RETRYABLE_MARKERS = ("429", "quota", "resource_exhausted", "permission_denied", "401", "403")


class NonRetryableGeminiError(RuntimeError):
    """Raised for Gemini failures that another attempt cannot fix (quota, auth)."""


class GeminiProvider(BaseLLMProvider):
    """
    Gemini LLM provider.

    Features:
    - Interactions API for stateless single-shot requests
    - Structured output via response_format
    - Server-side persistence opt-out (store=False)
    - Optional transport retry with exponential backoff (max_attempts)
    """

    def __init__(
        self,
        model: str,
        api_key: str,
        system_prompt: str,
        store: bool = False,
        max_attempts: int = 1,
        **kwargs,
    ):
        """
        Initialize Gemini provider.

        Args:
            model: Model identifier (e.g., 'gemini-2.0-flash-001')
            api_key: Gemini API key
            system_prompt: System instruction
            store: Whether to persist interaction server-side
            max_attempts: Total attempts per request (1 disables retry)
            **kwargs: Additional config (temperature, max_tokens, response_format)

        Raises:
            ValueError: If parameters are invalid
        """
        super().__init__(model, api_key, system_prompt, **kwargs)
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

        self.client = genai.Client(api_key=api_key)
        self.store = store
        self.max_attempts = max_attempts

        logger.info(
            f"Initialized GeminiProvider: model={model}, "
            f"structured={self.response_format is not None}, attempts={max_attempts}"
        )

    async def generate(self, user_message: str) -> LLMResponse:
        """
        Generate Gemini response.

        Args:
            user_message: User's input

        Returns:
            LLMResponse with content and metadata

        Raises:
            NonRetryableGeminiError: On quota or credential failures
            Exception: If generation fails after max_attempts
        """
        logger.debug(f"Generating response for message: {user_message[:100]}...")
        request_params = self._build_request_params(user_message)

        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=1, min=2, max=10),
            retry=retry_if_not_exception_type(NonRetryableGeminiError),
            reraise=True,
        ):
            with attempt:
                return await self._generate_complete(request_params)

    async def _generate_complete(self, request_params: dict[str, Any]) -> LLMResponse:
        """
        Run a single Interactions API request.

        Args:
            request_params: Interactions API request parameters

        Returns:
            LLMResponse with content and metadata

        Raises:
            NonRetryableGeminiError: If the error cannot be fixed by retrying
            Exception: If generation fails
        """
        try:
            interaction = await self.client.aio.interactions.create(**request_params)
        except Exception as e:
            logger.error(f"Error in _generate_complete: {e}")
            message = str(e).lower()
            if any(marker in message for marker in _NON_RETRYABLE_MARKERS):
                raise NonRetryableGeminiError(str(e)) from e
            raise

        outputs = getattr(interaction, "outputs", None)
        content = self._extract_text_from_outputs(outputs)
        usage = self._extract_usage(getattr(interaction, "usage", None))

        logger.info(
            "Generated response: %s input tokens, %s output tokens",
            usage.get("input_tokens") if usage else None,
            usage.get("output_tokens") if usage else None,
        )

        return LLMResponse(
            content=content,
            finish_reason=self._extract_finish_reason(outputs),
            usage=usage,
            metadata={
                "model": request_params["model"],
                "interaction_id": getattr(interaction, "id", None),
                "response_format_enabled": self.response_format is not None,
                "store": self.store,
            },
        )

    def _build_request_params(self, user_message: str, model: str | None = None) -> dict[str, Any]:
        """
        Build Interactions API request parameters.
        """
        request_params: dict[str, Any] = {
            "model": model or self.model,
            "input": [{"role": "user", "content": user_message}],
            "system_instruction": self.system_prompt,
            "generation_config": {
                "temperature": self.temperature,
                "max_output_tokens": self.max_tokens,
            },
            "store": self.store,
        }

        if self.response_format is not None:
            request_params["response_format"] = self.response_format

        return request_params

    @staticmethod
    def _get_value(obj: Any, key: str) -> Any:
        if obj is None:
            return None
        if isinstance(obj, dict):
            return obj.get(key)
        return getattr(obj, key, None)

    def _extract_usage(self, usage: Any) -> dict[str, int] | None:
        if usage is None:
            return None
        total_input = self._get_value(usage, "total_input_tokens")
        total_output = self._get_value(usage, "total_output_tokens")
        total_tokens = self._get_value(usage, "total_tokens")

        usage_dict: dict[str, int] = {}
        if total_input is not None:
            usage_dict["input_tokens"] = int(total_input)
        if total_output is not None:
            usage_dict["output_tokens"] = int(total_output)
        if total_tokens is not None:
            usage_dict["total_tokens"] = int(total_tokens)
        elif total_input is not None and total_output is not None:
            usage_dict["total_tokens"] = int(total_input) + int(total_output)

        return usage_dict or None

    def _extract_text_from_outputs(self, outputs: Any) -> str:
        """
        Extract text content from outputs, excluding thought parts.
        """
        if outputs is None:
            return ""
        items = outputs if isinstance(outputs, list) else [outputs]
        parts: list[str] = []
        for output in items:
            if self._get_value(output, "type") == "thought":
                continue

            text = self._get_value(output, "text")
            if text is None:
                content = self._get_value(output, "content")
                if isinstance(content, list):
                    for item in content:
                        if self._get_value(item, "type") == "thought":
                            continue
                        item_text = self._get_value(item, "text")
                        if isinstance(item_text, str) and item_text:
                            parts.append(item_text)
                    continue
                text = content
            if isinstance(text, str) and text:
                parts.append(text)
        return "\n".join(parts).strip()

    def _extract_finish_reason(self, outputs: Any) -> str | None:
        if not outputs:
            return None
        items = outputs if isinstance(outputs, list) else [outputs]
        for output in items:
            reason = self._get_value(output, "finish_reason")
            if reason:
                return str(reason)
        return None

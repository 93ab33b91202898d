"""Abstract base class for LLM providers."""

import logging
from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class LLMResponse(BaseModel):
    """Standardized LLM response."""

    content: str
    finish_reason: str | None = None
    usage: dict[str, int] | None = None  # tokens, cost tracking
    metadata: dict[str, Any] = {}


class BaseLLMProvider(ABC):
    """
    Abstract base for LLM providers.

    Providers are single-shot: every generate() call is independent and no
    conversation state is carried between calls.
    """

    def __init__(
        self,
        model: str,
        api_key: str,
        system_prompt: str,
        temperature: float = 0.8,
        max_tokens: int = 500,
        response_format: dict[str, Any] | None = None,
    ):
        """
        Initialize LLM provider.

        Args:
            model: Model identifier (e.g., 'gemini-2.0-flash-001')
            api_key: Provider API key
            system_prompt: System instruction sent with every request
            temperature: Sampling temperature (0.0-2.0)
            max_tokens: Maximum response length
            response_format: JSON schema the response must conform to

        Raises:
            ValueError: If parameters are invalid
        """
        if not model:
            raise ValueError("Model identifier is required")
        if not api_key:
            raise ValueError("API key is required")
        if not 0.0 <= temperature <= 2.0:
            raise ValueError(f"Temperature must be 0.0-2.0, got {temperature}")
        if max_tokens <= 0:
            raise ValueError(f"max_tokens must be positive, got {max_tokens}")

        self.model = model
        self.api_key = api_key
        self.system_prompt = system_prompt
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.response_format = response_format

    @abstractmethod
    async def generate(self, user_message: str) -> LLMResponse:
        """
        Generate complete response to user message.

        Args:
            user_message: User's input text

        Returns:
            LLMResponse with content and metadata

        Raises:
            Exception: If generation fails
        """
        pass

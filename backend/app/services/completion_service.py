"""
Service wrapper for the text completion provider (OpenAI chat completions).

Responsibilities:
- Lazily create the OpenAI client from configured credentials
- Send system instructions + user text, return the generated text
- Translate SDK errors into RateLimited / GenerationFailed
"""

from typing import Optional, Protocol

import openai
from openai import OpenAI

from app.core.errors import GenerationFailed, RateLimited
from app.core.logger import get_logger

logger = get_logger(__name__)


class CompletionClient(Protocol):
    def complete(self, system_text: str, user_text: str) -> str:
        ...


class OpenAICompletionClient:
    """
    Chat completion client backed by the openai SDK.

    The SDK client is created on first use so the server can start
    without an API key configured.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = "gpt-5.1",
        max_completion_tokens: int = 2048,
        temperature: float = 0.7,
        client: Optional[OpenAI] = None
    ):
        self.api_key = api_key
        self.model = model
        self.max_completion_tokens = max_completion_tokens
        self.temperature = temperature
        self._client = client

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            self._client = OpenAI(api_key=self.api_key)
            logger.info("OpenAI client initialized")
        return self._client

    def complete(self, system_text: str, user_text: str) -> str:
        """
        Run one chat completion.

        Raises:
            RateLimited: Provider returned HTTP 429
            GenerationFailed: Any other provider failure
        """
        try:
            completion = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_text},
                    {"role": "user", "content": user_text},
                ],
                max_completion_tokens=self.max_completion_tokens,
                temperature=self.temperature,
            )
        except openai.RateLimitError as e:
            logger.error(f"OpenAI rate limit hit: {e}")
            raise RateLimited() from e
        except openai.OpenAIError as e:
            message = getattr(e, "message", None) or str(e)
            logger.error(f"OpenAI completion failed: {message}")
            raise GenerationFailed(message) from e

        content = completion.choices[0].message.content
        if content is None:
            raise GenerationFailed("Provider returned an empty response")
        return content

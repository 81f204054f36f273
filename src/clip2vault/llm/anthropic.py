"""Claude/Anthropic LLM provider."""

from typing import Optional

import anthropic

from ..exceptions import LLMError
from .base import LLMProvider


class AnthropicProvider(LLMProvider):
    def __init__(
        self,
        api_key: str,
        model: str = "claude-3-5-haiku-latest",
        temperature: float = 0.3,
    ):
        self._client = anthropic.Anthropic(api_key=api_key, max_retries=0)
        self._model = model
        self._temperature = temperature

    @property
    def max_input_tokens(self) -> int:
        return 180_000

    def generate(
        self,
        system_prompt: str,
        user_prompt: str,
        max_output_tokens: Optional[int] = None,
    ) -> str:
        try:
            response = self._client.messages.create(
                model=self._model,
                max_tokens=max_output_tokens or self.default_max_output_tokens,
                temperature=self._temperature,
                system=system_prompt,
                messages=[{"role": "user", "content": user_prompt}],
            )
        except anthropic.APIError as e:
            raise LLMError(f"Anthropic API error: {e}") from e
        blocks = getattr(response, "content", None) or []
        text = getattr(blocks[0], "text", None) if blocks else None
        if text is None:
            raise LLMError("Anthropic API returned no text content")
        return text

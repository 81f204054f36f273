"""OpenAI LLM provider."""

from typing import Optional

import openai

from ..exceptions import LLMError
from .base import LLMProvider


class OpenAIProvider(LLMProvider):
    def __init__(self, api_key: str, model: str = "gpt-3.5-turbo", temperature: float = 0.3):
        self._client = openai.OpenAI(api_key=api_key, max_retries=0)
        self._model = model
        self._temperature = temperature
        # Newer models (o1, o3, gpt-4.1, gpt-5, etc.) require
        # max_completion_tokens instead of max_tokens.
        self._use_max_completion_tokens = not self._is_legacy_model(model)

    @property
    def max_input_tokens(self) -> int:
        if "gpt-3.5" in self._model:
            return 14_000
        return 120_000

    def generate(
        self,
        system_prompt: str,
        user_prompt: str,
        max_output_tokens: Optional[int] = None,
    ) -> str:
        token_param = (
            "max_completion_tokens"
            if self._use_max_completion_tokens
            else "max_tokens"
        )
        try:
            response = self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                temperature=self._temperature,
                **{token_param: max_output_tokens or self.default_max_output_tokens},
            )
        except openai.APIError as e:
            raise LLMError(f"OpenAI API error: {e}") from e
        choices = getattr(response, "choices", None) or []
        message = getattr(choices[0], "message", None) if choices else None
        if message is None or message.content is None:
            raise LLMError("OpenAI API returned no message content")
        return message.content

    @staticmethod
    def _is_legacy_model(model: str) -> bool:
        """Check if the model uses the legacy max_tokens parameter."""
        legacy_prefixes = ("gpt-3.5", "gpt-4o", "gpt-4-turbo", "gpt-4-")
        return any(model.startswith(p) for p in legacy_prefixes)

"""Tests for the LLM providers."""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from clip2vault.exceptions import LLMError
from clip2vault.llm.anthropic import AnthropicProvider
from clip2vault.llm.openai import OpenAIProvider


def _anthropic_reply(*blocks):
    return SimpleNamespace(content=list(blocks))


def _openai_reply(*contents):
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=c)) for c in contents]
    )


class TestAnthropicProvider:
    @patch("clip2vault.llm.anthropic.anthropic.Anthropic")
    def test_returns_first_text_block(self, mock_cls):
        mock_cls.return_value.messages.create.return_value = _anthropic_reply(
            SimpleNamespace(type="text", text='["Research"]')
        )
        provider = AnthropicProvider(api_key="sk-ant-test")
        assert provider.generate("system", "user") == '["Research"]'
        mock_cls.assert_called_once_with(api_key="sk-ant-test", max_retries=0)

    @patch("clip2vault.llm.anthropic.anthropic.Anthropic")
    def test_empty_content_raises_llm_error(self, mock_cls):
        mock_cls.return_value.messages.create.return_value = _anthropic_reply()
        with pytest.raises(LLMError, match="no text"):
            AnthropicProvider(api_key="sk-ant-test").generate("system", "user")

    @patch("clip2vault.llm.anthropic.anthropic.Anthropic")
    def test_block_without_text_raises_llm_error(self, mock_cls):
        mock_cls.return_value.messages.create.return_value = _anthropic_reply(
            SimpleNamespace(type="tool_use", id="t1", name="tags", input={})
        )
        with pytest.raises(LLMError):
            AnthropicProvider(api_key="sk-ant-test").generate("system", "user")


class TestOpenAIProvider:
    @patch("clip2vault.llm.openai.openai.OpenAI")
    def test_returns_message_content(self, mock_cls):
        mock_cls.return_value.chat.completions.create.return_value = _openai_reply('["AI"]')
        assert OpenAIProvider(api_key="sk-test").generate("system", "user") == '["AI"]'

    @patch("clip2vault.llm.openai.openai.OpenAI")
    def test_legacy_model_uses_max_tokens(self, mock_cls):
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _openai_reply("[]")
        mock_cls.return_value = mock_client
        OpenAIProvider(api_key="sk-test", model="gpt-3.5-turbo").generate("s", "u")
        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["max_tokens"] == 100
        assert "max_completion_tokens" not in kwargs

    @patch("clip2vault.llm.openai.openai.OpenAI")
    def test_empty_choices_raise_llm_error(self, mock_cls):
        mock_cls.return_value.chat.completions.create.return_value = _openai_reply()
        with pytest.raises(LLMError, match="no message"):
            OpenAIProvider(api_key="sk-test").generate("system", "user")

    @patch("clip2vault.llm.openai.openai.OpenAI")
    def test_null_content_raises_llm_error(self, mock_cls):
        mock_cls.return_value.chat.completions.create.return_value = _openai_reply(None)
        with pytest.raises(LLMError):
            OpenAIProvider(api_key="sk-test").generate("system", "user")

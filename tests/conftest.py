"""Shared test fixtures."""

from typing import Optional

import pytest
import requests

from clip2vault.config import Config
from clip2vault.exceptions import LLMError
from clip2vault.llm.base import LLMProvider
from clip2vault.transport import HttpClient, HttpResponse
from clip2vault.vault import FileSystemVault


class FakeHttpClient(HttpClient):
    """Serves canned responses by URL and records every request."""

    def __init__(self, responses: Optional[dict] = None):
        self.responses = responses or {}
        self.requested: list[str] = []

    def add(self, url, status=200, text="", content=None):
        if content is None:
            content = text.encode("utf-8")
        self.responses[url] = HttpResponse(status=status, text=text, content=content)

    def get(self, url, headers=None):
        self.requested.append(url)
        response = self.responses.get(url)
        if isinstance(response, Exception):
            raise response
        if response is None:
            raise requests.ConnectionError(f"no route to {url}")
        return response


class FakeLLM(LLMProvider):
    """Returns a fixed reply, or raises LLMError when reply is None."""

    def __init__(self, reply: Optional[str] = None):
        self.reply = reply
        self.calls: list[tuple[str, str]] = []

    def generate(self, system_prompt, user_prompt, max_output_tokens=None):
        self.calls.append((system_prompt, user_prompt))
        if self.reply is None:
            raise LLMError("OpenAI API error: 500 Internal Server Error")
        return self.reply

    @property
    def max_input_tokens(self) -> int:
        return 14_000


@pytest.fixture
def http():
    return FakeHttpClient()


@pytest.fixture
def vault(tmp_path):
    return FileSystemVault(tmp_path)


@pytest.fixture
def make_config(tmp_path):
    def _make(**overrides):
        overrides.setdefault("vault_path", tmp_path)
        return Config(**overrides)

    return _make


@pytest.fixture
def make_folders(tmp_path):
    def _make(*paths):
        for path in paths:
            (tmp_path / path).mkdir(parents=True, exist_ok=True)

    return _make

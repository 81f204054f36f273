"""HTTP transport used for page fetches and image downloads."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

import requests

USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


@dataclass(frozen=True)
class HttpResponse:
    status: int
    text: str
    content: bytes


class HttpClient(ABC):
    """Abstract GET-only HTTP capability."""

    @abstractmethod
    def get(self, url: str, headers: Optional[dict] = None) -> HttpResponse:
        """Perform a GET request.

        Transport failures raise ``requests.RequestException``; HTTP error
        statuses are returned, not raised, so callers decide what is fatal.
        """

    def close(self) -> None:
        pass


class RequestsHttpClient(HttpClient):
    def __init__(self, timeout: float = 30.0, session: Optional[requests.Session] = None):
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.setdefault("User-Agent", USER_AGENT)

    def get(self, url: str, headers: Optional[dict] = None) -> HttpResponse:
        response = self._session.get(url, headers=headers, timeout=self._timeout)
        # requests assumes ISO-8859-1 for text/* without a declared charset.
        if "charset" not in response.headers.get("Content-Type", "").lower():
            response.encoding = response.apparent_encoding
        return HttpResponse(
            status=response.status_code,
            text=response.text,
            content=response.content,
        )

    def close(self) -> None:
        self._session.close()

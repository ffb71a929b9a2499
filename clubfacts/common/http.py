"""HTTP client for page and image fetches."""

from __future__ import annotations

from dataclasses import dataclass
from types import TracebackType

import requests

from clubfacts.common.constants import USER_AGENT
from clubfacts.common.errors import HttpRequestError


@dataclass(frozen=True)
class TimeoutConfig:
    connect: float = 20.0
    read: float = 60.0


class HttpClient:
    def __init__(
        self,
        *,
        timeout: TimeoutConfig | None = None,
        user_agent: str = USER_AGENT,
    ) -> None:
        self.timeout = timeout or TimeoutConfig()
        self.user_agent = user_agent
        self.session = requests.Session()

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _headers(self, accept: str) -> dict[str, str]:
        return {"User-Agent": self.user_agent, "Accept": accept}

    def _raise_for_status(self, response: requests.Response, url: str) -> None:
        status = response.status_code
        if status != 200:
            raise HttpRequestError(f"HTTP status {status} for {url}")

    def _get(self, url: str, accept: str) -> requests.Response:
        try:
            response = self.session.request(
                method="GET",
                url=url,
                headers=self._headers(accept),
                timeout=(self.timeout.connect, self.timeout.read),
            )
        except requests.RequestException as exc:
            raise HttpRequestError(f"Transport error for {url}: {exc}") from exc
        self._raise_for_status(response, url)
        return response

    def get_text(self, url: str) -> str:
        return self._get(url, "text/html,application/xhtml+xml").text

    def get_bytes(self, url: str) -> bytes:
        return self._get(url, "image/*").content

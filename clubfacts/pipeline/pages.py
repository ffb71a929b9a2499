"""Document and image fetches that report failures as absent results."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup

from clubfacts.common.errors import DecodeError, HttpRequestError
from clubfacts.common.http import HttpClient
from clubfacts.common.logging import log_event
from clubfacts.common.models import PixelGrid
from clubfacts.extract.images import decode_image
from clubfacts.extract.markup import soup_from_html


class PageFetcher:
    def __init__(
        self,
        client: HttpClient,
        *,
        logger: logging.Logger | None = None,
        run_id: str | None = None,
    ) -> None:
        self.client = client
        self.logger = logger or logging.getLogger("club_facts")
        self.run_id = run_id

    def _warn(self, message: str, url: str, event: str, exc: Exception) -> None:
        log_event(
            self.logger,
            f"{message}: {exc}",
            level=logging.WARNING,
            run_id=self.run_id,
            stage="fetch",
            url=url,
            event=event,
            status="error",
            error_code=getattr(exc, "error_code", None),
        )

    def fetch_document(self, url: str) -> BeautifulSoup | None:
        try:
            html = self.client.get_text(url)
        except HttpRequestError as exc:
            self._warn("page fetch failed", url, "FETCH_FAIL", exc)
            return None
        return soup_from_html(html)

    def fetch_image(self, url: str) -> PixelGrid | None:
        try:
            return decode_image(self.client.get_bytes(url))
        except HttpRequestError as exc:
            self._warn("image fetch failed", url, "FETCH_FAIL", exc)
        except DecodeError as exc:
            self._warn("image decode failed", url, "DECODE_FAIL", exc)
        return None

    def log_parse_mismatch(self, url: str, exc: Exception) -> None:
        self._warn("coordinates unreadable", url, "PARSE_MISMATCH", exc)

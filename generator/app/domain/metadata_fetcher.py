"""OGP fetcher: one GET per call, body parsed with the fixed OGP patterns.

Uses the HTTP port (AbstractHttpClient); client is built in the composition root.
Domain depends only on ports, not on infrastructure. Does not check the status
code: whatever body the server returns is parsed. Failures never reach the
caller; they degrade to a record titled FAILED_TITLE.
"""
from __future__ import annotations

from typing import Any

from loguru import logger

from generator.app.constants import FAILED_TITLE, SERVICE_NAME
from generator.app.domain.models import OgpData
from generator.app.domain.ogp_parser import parse_ogp
from generator.app.ports.http_client import AbstractHttpClient, RequestTimeout


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).warning("")


class OgpFetcher:
    """Fetches a page and extracts OgpData using an injectable AbstractHttpClient."""

    def __init__(
        self,
        client: AbstractHttpClient,
        connect_timeout_seconds: float,
        read_timeout_seconds: float,
        *,
        follow_redirects: bool = True,
        default_headers: dict[str, str] | None = None,
    ) -> None:
        self._client = client
        self._timeout = RequestTimeout(
            connect_seconds=connect_timeout_seconds,
            read_seconds=read_timeout_seconds,
        )
        self._follow_redirects = follow_redirects
        self._default_headers = dict(default_headers) if default_headers else {}

    async def fetch(self, url: str) -> OgpData:
        try:
            response = await self._client.get(
                url,
                timeout=self._timeout,
                follow_redirects=self._follow_redirects,
                headers=self._default_headers or None,
            )
            html = response.text
        except Exception as exc:
            _log("ogp_fetch_failed", url=url, error=repr(exc))
            return OgpData(url=url, title=FAILED_TITLE)

        logger.debug("Fetched {} (status {}, {} chars)", url, response.status_code, len(html))
        return parse_ogp(html, url)

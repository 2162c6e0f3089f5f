from __future__ import annotations

from typing import Any

import httpx
import pytest
from fastapi import FastAPI

from api.app.routers.health import health_router
from api.app.routers.ogp import ogp_router
from generator.app.application.preview_service import PreviewService
from generator.app.config.settings import Settings
from generator.app.domain.metadata_fetcher import OgpFetcher
from generator.app.domain.models import OgpData, RenderOptions
from generator.app.infrastructure.http.factory import create_http_client
from generator.app.infrastructure.rendering.pillow_renderer import PillowImageRenderer
from generator.app.ports.http_client import AbstractHttpClient, RequestTimeout


class FakeResponse:
    """Implements HttpResponse for tests."""

    def __init__(self, text: str, *, status_code: int = 200, url: str = "https://example.com") -> None:
        self._text = text
        self.status_code = status_code
        self.url = url
        self.headers: dict[str, str] = {"content-type": "text/html"}

    @property
    def text(self) -> str:
        return self._text


class FakeHttpClient:
    """Implements AbstractHttpClient for tests; serves pages by URL or raises."""

    def __init__(
        self,
        pages: dict[str, str] | None = None,
        *,
        raise_on_get: Exception | None = None,
    ) -> None:
        self._pages = pages or {}
        self._raise_on_get = raise_on_get
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    async def get(
        self,
        url: str,
        *,
        timeout: RequestTimeout,
        follow_redirects: bool = True,
        headers: dict[str, str] | None = None,
    ) -> FakeResponse:
        self.calls.append(
            {"url": url, "timeout": timeout, "follow_redirects": follow_redirects, "headers": headers}
        )
        if self._raise_on_get is not None:
            raise self._raise_on_get
        return FakeResponse(self._pages.get(url, ""), url=url)

    async def close(self) -> None:
        self.closed = True


class FakeFetcher:
    def __init__(self, data: OgpData) -> None:
        self._data = data
        self.urls: list[str] = []

    async def fetch(self, url: str) -> OgpData:
        self.urls.append(url)
        return self._data


def make_fetcher(client: Any, **kwargs: Any) -> OgpFetcher:
    return OgpFetcher(client, connect_timeout_seconds=1.0, read_timeout_seconds=2.0, **kwargs)


def mock_httpx_client(handler) -> AbstractHttpClient:  # noqa: ANN001
    return create_http_client(Settings(_env_file=None), transport=httpx.MockTransport(handler))


@pytest.fixture()
def small_options() -> RenderOptions:
    """No template, no font file, small canvas: keeps renders fast and resource-free."""
    return RenderOptions(
        width=320,
        height=168,
        template_path=None,
        font_path=None,
        font_size=20,
        max_width=200,
    )


@pytest.fixture()
def sample_data() -> OgpData:
    return OgpData(
        url="https://example.com",
        title="The Quick Brown Fox Jumps Over The Lazy Dog",
        description="A sentence",
        site_name="Example Site",
    )


@pytest.fixture()
def test_app(small_options: RenderOptions, sample_data: OgpData) -> FastAPI:
    app = FastAPI()
    app.state.preview_service = PreviewService(FakeFetcher(sample_data), PillowImageRenderer(small_options))
    app.include_router(health_router)
    app.include_router(ogp_router)
    return app

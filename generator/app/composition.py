"""Generator composition root: build and lifecycle-manage concrete dependencies.

Composition may: import concrete classes, call factories, store interface types,
manage high-level lifecycle.
"""
from __future__ import annotations

from typing import Any

from loguru import logger

from generator.app.application.preview_service import PreviewService
from generator.app.config.settings import Settings
from generator.app.constants import SERVICE_NAME
from generator.app.domain.metadata_fetcher import OgpFetcher
from generator.app.infrastructure.http.factory import create_http_client
from generator.app.infrastructure.rendering.pillow_renderer import PillowImageRenderer
from generator.app.ports.http_client import AbstractHttpClient
from generator.app.ports.image_renderer import ImageRenderer


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


class GeneratorDependencies:
    """Holds wired generator dependencies and their lifecycle."""

    def __init__(
        self,
        *,
        settings: Settings,
        http_client: AbstractHttpClient | None = None,
        renderer: ImageRenderer | None = None,
    ) -> None:
        self._settings = settings
        self._http_client: AbstractHttpClient | None = http_client
        self._renderer: ImageRenderer | None = renderer
        self._preview_service: PreviewService | None = None
        self._connected = False

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def ready(self) -> bool:
        return self._connected

    @property
    def preview_service(self) -> PreviewService:
        if self._preview_service is None:
            raise RuntimeError("preview_service is not initialized")
        return self._preview_service

    async def connect(self) -> None:
        if self._http_client is None:
            self._http_client = create_http_client(self._settings)
        if self._renderer is None:
            self._renderer = PillowImageRenderer(self._settings.render_options())

        fetcher = OgpFetcher(
            self._http_client,
            connect_timeout_seconds=self._settings.fetch_connect_timeout_seconds,
            read_timeout_seconds=self._settings.fetch_read_timeout_seconds,
            follow_redirects=self._settings.fetch_follow_redirects,
            default_headers=self._settings.default_headers(),
        )
        self._preview_service = PreviewService(fetcher, self._renderer)
        self._connected = True
        _log("generator_connected")

    async def close(self) -> None:
        if self._http_client is not None:
            try:
                await self._http_client.close()
            except Exception as exc:
                logger.warning("http client close failed: {}", exc)
            self._http_client = None

        self._preview_service = None
        self._connected = False
        _log("generator_closed")


def create_generator_dependencies(settings: Settings | None = None) -> GeneratorDependencies:
    return GeneratorDependencies(settings=settings or Settings())

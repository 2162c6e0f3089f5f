"""Application service: fetch OGP data for a URL, then render its preview card."""
from __future__ import annotations

import asyncio
from typing import Any, Protocol

from loguru import logger

from generator.app.constants import SERVICE_NAME
from generator.app.domain.models import OgpData, OgpPreview, RenderOptions
from generator.app.ports.image_renderer import ImageRenderer


class OgpDataSource(Protocol):
    async def fetch(self, url: str) -> OgpData: ...


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


class PreviewService:
    """Runs the two steps in order; each call is independent of the others."""

    def __init__(self, fetcher: OgpDataSource, renderer: ImageRenderer) -> None:
        self._fetcher = fetcher
        self._renderer = renderer

    async def fetch_metadata(self, url: str) -> OgpData:
        return await self._fetcher.fetch(url)

    async def render(self, data: OgpData, options: RenderOptions | None = None, **overrides: Any) -> bytes:
        """Render in a worker thread so drawing does not block the event loop."""
        return await asyncio.to_thread(self._renderer.render, data, options, **overrides)

    async def generate(self, url: str, options: RenderOptions | None = None, **overrides: Any) -> OgpPreview:
        data = await self.fetch_metadata(url)
        image = await self.render(data, options, **overrides)
        _log("preview_generated", url=url, title=data.title, image_bytes=len(image))
        return OgpPreview(data=data, image=image)

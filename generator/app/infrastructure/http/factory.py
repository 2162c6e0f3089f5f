"""HTTP client factory: builds AbstractHttpClient from settings (no provider logic in composition)."""
from __future__ import annotations

import httpx

from generator.app.config.settings import Settings
from generator.app.ports.http_client import AbstractHttpClient
from generator.app.infrastructure.http.httpx_client import HttpxHttpClient


def create_http_client(settings: Settings, *, transport: httpx.AsyncBaseTransport | None = None) -> AbstractHttpClient:
    """Build an HTTP client from settings. Timeouts are applied per-request by the adapter."""
    async_client = httpx.AsyncClient(transport=transport)
    return HttpxHttpClient(async_client)

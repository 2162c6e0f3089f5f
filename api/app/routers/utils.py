from __future__ import annotations

from typing import Any

from fastapi import Request
from loguru import logger

from api.app.constants import SERVICE_NAME
from generator.app.application.preview_service import PreviewService


def get_preview_service(request: Request) -> PreviewService | None:
    """PreviewService from app.state, or None when the app is not wired yet."""
    return getattr(request.app.state, "preview_service", None)


def log_warning(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).warning("")


__all__ = [
    "get_preview_service",
    "log_warning",
]

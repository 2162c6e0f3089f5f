"""API-level constants shared across modules."""
from __future__ import annotations

SERVICE_NAME = "api"

PNG_MEDIA_TYPE = "image/png"

"""Image renderer port: turns OgpData into encoded image bytes.

The application layer depends on this port; the Pillow implementation lives
in infrastructure.
"""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from generator.app.domain.models import OgpData, RenderOptions


@runtime_checkable
class ImageRenderer(Protocol):
    """Port: render a preview card. Implementations must not keep per-call state."""

    def render(
        self,
        data: OgpData,
        options: RenderOptions | None = None,
        **overrides: Any,
    ) -> bytes:
        """Return PNG bytes; resource problems degrade, they never raise."""
        ...

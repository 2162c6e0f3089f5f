"""Domain models."""
from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from typing import Any


@dataclass(frozen=True)
class OgpData:
    """OGP metadata extracted from a page (value object)."""

    url: str
    title: str
    description: str | None = None
    image: str | None = None
    site_name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialisable dict; optional fields that are missing are omitted."""
        return {key: value for key, value in asdict(self).items() if value is not None}


@dataclass(frozen=True)
class RenderOptions:
    """Drawing configuration for one render call.

    Attributes:
        width: Canvas width in pixels
        height: Canvas height in pixels
        template_path: Background image; gradient is used when missing
        font_path: Font file registered under font_family when present
        font_size: Title font size in pixels
        font_family: Family name the font is registered under
        text_color: Title color (any Pillow color string or RGB(A) tuple)
        max_width: Maximum pixel width of one title line
        text_shadow: Composite a soft drop shadow under text
    """

    width: int = 1200
    height: int = 630
    template_path: str | None = "./assets/ogp-template.png"
    font_path: str | None = "./assets/NotoSansJP-Bold.ttf"
    font_size: float = 48
    font_family: str = "NotoSansJP"
    text_color: str | tuple[int, ...] = "#000000"
    max_width: float = 800
    text_shadow: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.width, int) or self.width <= 0:
            raise ValueError("width must be a positive int")
        if not isinstance(self.height, int) or self.height <= 0:
            raise ValueError("height must be a positive int")
        if self.font_size <= 0:
            raise ValueError("font_size must be positive")
        if self.max_width <= 0:
            raise ValueError("max_width must be positive")

    def merged(self, **overrides: Any) -> "RenderOptions":
        """Return a copy with overrides applied; None values keep the current value."""
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise TypeError(f"unknown render options: {', '.join(sorted(unknown))}")
        changes = {key: value for key, value in overrides.items() if value is not None}
        if not changes:
            return self
        return replace(self, **changes)


@dataclass(frozen=True)
class OgpPreview:
    """Result of fetch-then-render for one URL."""

    data: OgpData
    image: bytes

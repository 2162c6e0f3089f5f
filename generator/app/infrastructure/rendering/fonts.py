"""Family-name font registry backed by Pillow's FreeType loader."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Union

from loguru import logger
from PIL import ImageFont

from generator.app.constants import SERVICE_NAME

Font = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).warning("")


class FontRegistry:
    """Maps family names to font files; unknown families resolve to Pillow's default font."""

    def __init__(self) -> None:
        self._paths: dict[str, Path] = {}

    def register(self, path: str | Path | None, family: str) -> bool:
        """Register path under family if the file exists. Returns whether it was registered."""
        if not path:
            return False
        font_path = Path(path)
        if not font_path.is_file():
            logger.debug("Font {} not found, family {} stays unregistered", font_path, family)
            return False
        self._paths[family] = font_path
        return True

    def is_registered(self, family: str) -> bool:
        return family in self._paths

    def get(self, family: str, size: float) -> Font:
        path = self._paths.get(family)
        if path is not None:
            try:
                return ImageFont.truetype(str(path), size)
            except OSError as exc:
                _log("font_load_failed", family=family, path=str(path), error=str(exc))
        return ImageFont.load_default(size=size)

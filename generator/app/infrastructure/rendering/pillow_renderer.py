"""Pillow implementation of the ImageRenderer port.

Each render call builds its own canvas and font registry, so concurrent
calls never share drawing state. Output depends only on the inputs and the
font/template files, which keeps the PNG bytes reproducible.
"""
from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from loguru import logger
from PIL import Image, ImageChops, ImageColor, ImageDraw, ImageFilter, ImageFont

from generator.app.constants import (
    GRADIENT_STOPS,
    LINE_HEIGHT_FACTOR,
    SERVICE_NAME,
    SHADOW,
    SITE_NAME_BOTTOM_OFFSET,
    SITE_NAME_COLOR,
    SITE_NAME_SCALE,
)
from generator.app.domain.models import OgpData, RenderOptions
from generator.app.domain.text_wrap import wrap_text
from generator.app.infrastructure.rendering.fonts import Font, FontRegistry
from generator.app.ports.image_renderer import ImageRenderer

Color = tuple[int, int, int, int]

# Pillow cannot measure or anchor multi-line strings; line breaks inside a
# wrapped line are drawn as spaces.
_LINE_BREAKS = str.maketrans({"\r": " ", "\n": " "})


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).warning("")


def parse_color(color: str | tuple[int, ...]) -> Color:
    """Convert a Pillow color string or RGB(A) tuple to an RGBA tuple."""
    if isinstance(color, tuple):
        rgb = tuple(int(c) for c in color)
    else:
        rgb = ImageColor.getrgb(color)
    if len(rgb) == 3:
        return (rgb[0], rgb[1], rgb[2], 255)
    if len(rgb) == 4:
        return (rgb[0], rgb[1], rgb[2], rgb[3])
    raise ValueError(f"invalid color: {color!r}")


def _gradient_lut(stops: tuple[tuple[float, str], ...]) -> list[tuple[int, int, int]]:
    """256-entry color table interpolated linearly between stops."""
    parsed = [(offset, ImageColor.getrgb(color)[:3]) for offset, color in stops]
    lut: list[tuple[int, int, int]] = []
    for i in range(256):
        t = i / 255
        if t <= parsed[0][0]:
            lut.append(tuple(parsed[0][1]))
            continue
        if t >= parsed[-1][0]:
            lut.append(tuple(parsed[-1][1]))
            continue
        for (start, c0), (end, c1) in zip(parsed, parsed[1:]):
            if start <= t <= end:
                f = (t - start) / (end - start) if end > start else 0.0
                lut.append(tuple(round(a + (b - a) * f) for a, b in zip(c0, c1)))
                break
    return lut


def diagonal_gradient(width: int, height: int, stops: tuple[tuple[float, str], ...] = GRADIENT_STOPS) -> Image.Image:
    """RGB image with a linear gradient from the top-left to the bottom-right corner.

    The gradient position of (x, y) is its projection on the diagonal:
    (x * width + y * height) / (width**2 + height**2).
    """
    denom = width * width + height * height
    columns = Image.new("L", (width, 1))
    columns.putdata([round(255 * x * width / denom) for x in range(width)])
    rows = Image.new("L", (1, height))
    rows.putdata([round(255 * y * height / denom) for y in range(height)])
    position = ImageChops.add(
        columns.resize((width, height), Image.Resampling.NEAREST),
        rows.resize((width, height), Image.Resampling.NEAREST),
    )

    lut = _gradient_lut(stops)
    channels = [position.point([entry[i] for entry in lut]) for i in range(3)]
    return Image.merge("RGB", channels)


@dataclass(frozen=True)
class _TextRun:
    text: str
    center: tuple[float, float]
    font: Font
    fill: Color


def _draw_centered(draw: ImageDraw.ImageDraw, run: _TextRun, offset: tuple[float, float] = (0, 0), fill: Color | None = None) -> None:
    cx = run.center[0] + offset[0]
    cy = run.center[1] + offset[1]
    ink = fill if fill is not None else run.fill
    if isinstance(run.font, ImageFont.FreeTypeFont):
        draw.text((cx, cy), run.text, font=run.font, fill=ink, anchor="mm")
        return
    # Bitmap fonts do not support anchors; center on the ink box instead.
    left, top, right, bottom = draw.textbbox((0, 0), run.text, font=run.font)
    draw.text((cx - (left + right) / 2, cy - (top + bottom) / 2), run.text, font=run.font, fill=ink)


class PillowImageRenderer(ImageRenderer):
    """Draws the title card: background, wrapped title, optional site name."""

    def __init__(self, defaults: RenderOptions | None = None) -> None:
        self._defaults = defaults or RenderOptions()

    def render(
        self,
        data: OgpData,
        options: RenderOptions | None = None,
        **overrides: Any,
    ) -> bytes:
        opts = (options or self._defaults).merged(**overrides)
        text_color = parse_color(opts.text_color)

        fonts = FontRegistry()
        fonts.register(opts.font_path, opts.font_family)

        canvas = self._background(opts).convert("RGBA")
        measure_draw = ImageDraw.Draw(canvas)

        title_font = fonts.get(opts.font_family, opts.font_size)
        lines = wrap_text(
            data.title,
            opts.max_width,
            lambda text: measure_draw.textlength(text.translate(_LINE_BREAKS), font=title_font),
        )
        line_height = opts.font_size * LINE_HEIGHT_FACTOR
        total_height = len(lines) * line_height
        start_y = (opts.height - total_height) / 2 + line_height / 2

        runs = [
            _TextRun(line.translate(_LINE_BREAKS), (opts.width / 2, start_y + index * line_height), title_font, text_color)
            for index, line in enumerate(lines)
        ]
        if data.site_name:
            runs.append(
                _TextRun(
                    data.site_name.translate(_LINE_BREAKS),
                    (opts.width / 2, opts.height - SITE_NAME_BOTTOM_OFFSET),
                    fonts.get(opts.font_family, opts.font_size * SITE_NAME_SCALE),
                    SITE_NAME_COLOR,
                )
            )

        if opts.text_shadow:
            canvas = self._composite_shadow(canvas, runs)
        canvas = self._composite_text(canvas, runs)

        logger.debug(
            "Rendered {}x{} card for {} ({} title lines, font registered: {})",
            opts.width,
            opts.height,
            data.url,
            len(lines),
            fonts.is_registered(opts.font_family),
        )
        buffer = io.BytesIO()
        canvas.convert("RGB").save(buffer, format="PNG")
        return buffer.getvalue()

    def _background(self, opts: RenderOptions) -> Image.Image:
        if opts.template_path and Path(opts.template_path).is_file():
            try:
                with Image.open(opts.template_path) as template:
                    return template.convert("RGB").resize(
                        (opts.width, opts.height), Image.Resampling.LANCZOS
                    )
            except (OSError, ValueError, Image.DecompressionBombError) as exc:
                _log("template_load_failed", path=opts.template_path, error=str(exc))
        return diagonal_gradient(opts.width, opts.height)

    @staticmethod
    def _composite_shadow(canvas: Image.Image, runs: list[_TextRun]) -> Image.Image:
        layer = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
        draw = ImageDraw.Draw(layer)
        for run in runs:
            _draw_centered(draw, run, offset=(SHADOW.OFFSET_X, SHADOW.OFFSET_Y), fill=SHADOW.COLOR)
        layer = layer.filter(ImageFilter.GaussianBlur(SHADOW.BLUR / 2))
        return Image.alpha_composite(canvas, layer)

    @staticmethod
    def _composite_text(canvas: Image.Image, runs: list[_TextRun]) -> Image.Image:
        layer = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
        draw = ImageDraw.Draw(layer)
        for run in runs:
            _draw_centered(draw, run)
        return Image.alpha_composite(canvas, layer)

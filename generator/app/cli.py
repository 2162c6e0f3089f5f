"""CLI for the OGP image generator.

Usage:
    ogp-image generate https://example.com --output card.png
    ogp-image generate https://example.com -o card.png --width 800 --height 420 --shadow
    ogp-image metadata https://example.com
"""

import asyncio
import json
from pathlib import Path as FilePath
from typing import Any, Optional

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from generator.app.composition import create_generator_dependencies
from generator.app.constants import MAX_CANVAS_SIDE
from generator.app.domain.models import OgpData, OgpPreview

app = typer.Typer(
    name="ogp-image",
    help="Generate Open Graph preview images for a URL",
    add_completion=False,
)
console = Console()


async def _generate_async(url: str, overrides: dict[str, Any]) -> OgpPreview:
    dependencies = create_generator_dependencies()
    await dependencies.connect()
    try:
        return await dependencies.preview_service.generate(url, **overrides)
    finally:
        await dependencies.close()


async def _metadata_async(url: str) -> OgpData:
    dependencies = create_generator_dependencies()
    await dependencies.connect()
    try:
        return await dependencies.preview_service.fetch_metadata(url)
    finally:
        await dependencies.close()


def _metadata_table(data: OgpData) -> Table:
    table = Table(title="OGP metadata", box=box.ROUNDED)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for key, value in data.to_dict().items():
        table.add_row(key, value)
    return table


@app.command()
def generate(
    url: str = typer.Argument(..., help="Page to build the preview for"),
    output: FilePath = typer.Option(FilePath("ogp.png"), "--output", "-o", help="Where to write the PNG"),
    width: Optional[int] = typer.Option(None, min=1, max=MAX_CANVAS_SIDE, help="Canvas width in pixels"),
    height: Optional[int] = typer.Option(None, min=1, max=MAX_CANVAS_SIDE, help="Canvas height in pixels"),
    font_size: Optional[float] = typer.Option(None, min=1, help="Title font size"),
    max_width: Optional[float] = typer.Option(None, min=1, help="Maximum title line width"),
    text_color: Optional[str] = typer.Option(None, help="Title color, e.g. '#ffffff'"),
    template: Optional[str] = typer.Option(None, help="Background template image"),
    font: Optional[str] = typer.Option(None, help="Font file (TTF/OTF)"),
    font_family: Optional[str] = typer.Option(None, help="Family name to register the font under"),
    shadow: Optional[bool] = typer.Option(None, "--shadow/--no-shadow", help="Drop shadow under text"),
) -> None:
    """Fetch a page and write its preview image."""
    overrides = {
        "width": width,
        "height": height,
        "font_size": font_size,
        "max_width": max_width,
        "text_color": text_color,
        "template_path": template,
        "font_path": font,
        "font_family": font_family,
        "text_shadow": shadow,
    }
    try:
        preview = asyncio.run(_generate_async(url, overrides))
    except ValueError as exc:
        console.print(f"[red]Invalid render option:[/red] {exc}")
        raise typer.Exit(code=2) from exc

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(preview.image)
    console.print(_metadata_table(preview.data))
    console.print(f"[green]Saved[/green] {output} ({len(preview.image)} bytes)")


@app.command()
def metadata(
    url: str = typer.Argument(..., help="Page to extract OGP metadata from"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
) -> None:
    """Print the OGP metadata extracted from a page."""
    data = asyncio.run(_metadata_async(url))
    if as_json:
        console.print_json(json.dumps(data.to_dict()))
    else:
        console.print(_metadata_table(data))


if __name__ == "__main__":
    app()

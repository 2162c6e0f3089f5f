from __future__ import annotations

from fastapi import APIRouter, Query, Request, Response

from api.app.constants import PNG_MEDIA_TYPE
from api.app.routers.utils import get_preview_service, log_warning
from api.app.schemas.ogp import OgpMetadataResponse
from generator.app.constants import MAX_CANVAS_SIDE

ogp_router = APIRouter(prefix="/ogp", tags=["OGP"])


@ogp_router.get(
    "/metadata",
    summary="Extract OGP metadata",
    description="Fetches the page once and returns og:title (or <title>), og:description, og:image and og:site_name. Fetch failures are not errors: the record comes back with the title 'Failed to load'.",
    response_model=OgpMetadataResponse,
    response_model_exclude_none=True,
    responses={
        200: {"description": "Metadata extracted (possibly degraded)."},
        400: {"description": "Missing url query parameter."},
        503: {"description": "Preview service not available."},
    },
)
async def get_ogp_metadata(request: Request, url: str | None = None) -> Response | OgpMetadataResponse:
    if not url:
        return Response(status_code=400, content="Missing required query parameter: url")
    service = get_preview_service(request)
    if service is None:
        return Response(status_code=503, content="Preview service not available")

    data = await service.fetch_metadata(url)
    return OgpMetadataResponse.from_domain(data)


@ogp_router.get(
    "/image",
    summary="Render OGP preview image",
    description="Fetches the page, then draws its title and site name over the configured template (or the default gradient). Query parameters override the configured render defaults.",
    response_class=Response,
    responses={
        200: {"content": {PNG_MEDIA_TYPE: {}}, "description": "PNG preview image."},
        400: {"description": "Missing url query parameter."},
        422: {"description": "Invalid render option."},
        503: {"description": "Preview service not available."},
    },
)
async def get_ogp_image(
    request: Request,
    url: str | None = None,
    width: int | None = Query(None, gt=0, le=MAX_CANVAS_SIDE),
    height: int | None = Query(None, gt=0, le=MAX_CANVAS_SIDE),
    font_size: float | None = Query(None, gt=0),
    max_width: float | None = Query(None, gt=0),
    text_color: str | None = None,
    shadow: bool | None = None,
) -> Response:
    if not url:
        return Response(status_code=400, content="Missing required query parameter: url")
    service = get_preview_service(request)
    if service is None:
        return Response(status_code=503, content="Preview service not available")

    data = await service.fetch_metadata(url)
    try:
        image = await service.render(
            data,
            width=width,
            height=height,
            font_size=font_size,
            max_width=max_width,
            text_color=text_color,
            text_shadow=shadow,
        )
    except ValueError as exc:
        log_warning("render_rejected", url=url, error=str(exc))
        return Response(status_code=422, content=f"Invalid render option: {exc}")

    return Response(
        content=image,
        media_type=PNG_MEDIA_TYPE,
        headers={"Content-Disposition": "inline; filename=ogp.png"},
    )

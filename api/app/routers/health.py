from typing import Any

from fastapi import APIRouter, Request, Response
from loguru import logger

from api.app.constants import SERVICE_NAME
from api.app.routers.utils import get_preview_service

health_router = APIRouter(tags=["Health"])

def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")

@health_router.get(
    "/health/live",
    summary="Liveness probe",
    description="Returns 200 if the API process is running. Used to confirm the service is running.",
    responses={200: {"description": "Service is alive."}},
)
async def live() -> dict:
    return {"status": "ok"}


@health_router.get(
    "/health/ready",
    summary="Readiness probe",
    description="Returns 200 only when the preview service (HTTP client and renderer) is wired. Used to confirm the service is ready to accept requests.",
    responses={
        200: {"description": "Preview service is ready."},
        503: {"description": "Preview service not initialized."},
    },
)
async def ready(request: Request) -> Response:
    if get_preview_service(request) is None:
        _log("components_not_initialized")
        return Response(status_code=503, content="Not ready")
    return Response(status_code=200, content="OK")

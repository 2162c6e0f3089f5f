from contextlib import asynccontextmanager
from typing import Any

import uvicorn
from fastapi import FastAPI
from loguru import logger

from api.app.config.settings import Settings
from api.app.constants import SERVICE_NAME
from api.app.routers.health import health_router
from api.app.routers.ogp import ogp_router
from generator.app.composition import create_generator_dependencies


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


@asynccontextmanager
async def lifespan(app: FastAPI):
    _log("api_starting")
    settings = getattr(app.state, "settings", None) or Settings()
    dependencies = create_generator_dependencies(settings)
    await dependencies.connect()
    app.state.settings = settings
    app.state.preview_service = dependencies.preview_service
    try:
        yield
    finally:
        _log("api_stopping")
        app.state.preview_service = None
        await dependencies.close()


def create_app(settings: Settings | None = None) -> FastAPI:
    application = FastAPI(
        title="OGP Image Generator API",
        version="0.1.0",
        lifespan=lifespan,
    )
    if settings is not None:
        application.state.settings = settings
    application.include_router(health_router)
    application.include_router(ogp_router)
    return application


app = create_app()


def main() -> None:
    settings = Settings()
    uvicorn.run("api.app.main:app", host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    main()

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from weather_widget.api.v1.router import api_v1_router
from weather_widget.core.config import get_settings
from weather_widget.core.http import create_http_client, set_http_client
from weather_widget.core.logging_conf import setup_logging
from weather_widget.services.weather.adapter import build_weather_adapter

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # Setup HTTP client
    client = create_http_client(settings)
    set_http_client(client)

    app.state.settings = settings
    app.state.weather_adapter = build_weather_adapter(settings, client=client)
    logger.info(
        "Weather provider: %s (demo fallback %s)",
        settings.provider,
        "on" if settings.fallback_enabled else "off",
    )

    try:
        yield
    finally:
        await client.aclose()
        set_http_client(None)


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="weather widget api",
        version="0.1.0",
        lifespan=lifespan,
    )

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["GET"],
            allow_headers=["*"],
        )

    app.include_router(api_v1_router, prefix="/api/v1")
    return app


app = create_app()

"""FastAPI application factory for the product API."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from productapi.core.config import Settings, get_settings
from productapi.core.logging_config import configure_logging
from productapi.db.create_tables import create_all
from productapi.repositories.sql_repository import ProductRepository
from productapi.routers.products import ProductHandler, build_router

logger = logging.getLogger(__name__)


def create_app(repository: ProductRepository | None = None, settings: Settings | None = None) -> FastAPI:
    """Build the app. ``repository`` is injected into the product handler as-is."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        if settings.auto_create_tables:
            create_all()
        logger.info("Product API started (env=%s)", settings.app_env)
        yield

    app = FastAPI(title="Product API", lifespan=lifespan)

    origins = list(settings.cors_origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    handler = ProductHandler(repository if repository is not None else ProductRepository())
    app.include_router(build_router(handler))

    @app.get("/health")
    def health():
        return {"ok": True}

    return app


app = create_app()

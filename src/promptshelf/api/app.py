# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""FastAPI application factory."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from promptshelf import __version__
from promptshelf.api.middleware import RequestMiddleware
from promptshelf.api.routes import health, pages, prompts, skills

logger = logging.getLogger("promptshelf.api.app")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    from promptshelf.cache.manager import get_catalog_cache, reset_catalog_cache
    from promptshelf.core.config import get_settings

    settings = get_settings()
    if not settings.content_root.is_dir():
        logger.warning("Content root %s does not exist; catalog will be empty", settings.content_root)

    yield

    cache = get_catalog_cache()
    if cache is not None:
        await cache.close()
    reset_catalog_cache()


def create_app() -> FastAPI:
    from promptshelf.core.config import get_settings

    settings = get_settings()
    app = FastAPI(
        title="promptshelf",
        description="Prompts and skills for AI coding assistants",
        version=__version__,
        lifespan=lifespan,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(prompts.router, prefix="/api", tags=["prompts"])
    app.include_router(skills.router, prefix="/api", tags=["skills"])
    app.include_router(pages.router, tags=["pages"])
    app.add_middleware(RequestMiddleware)

    return app


def _create_app_from_env() -> FastAPI:
    """Factory for uvicorn: configures logging from settings first."""
    from promptshelf.core.config import get_settings
    from promptshelf.core.logging import setup_logging

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    return create_app()

"""FastAPI application factory: entry point for MovieFeed."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from moviefeed import __version__
from moviefeed.adapters.catalog.memory import InMemoryCatalogAdapter
from moviefeed.adapters.catalog.sql import SqlCatalogAdapter
from moviefeed.api.routes.feed import router as feed_router
from moviefeed.api.schemas import HealthResponse
from moviefeed.config import CatalogBackend, settings
from moviefeed.database import async_session_factory, dispose_db, init_db
from moviefeed.ports.catalog import CatalogPort
from moviefeed.services.scorer import Scorer
from moviefeed.services.seed import read_seed_bundle, seed_database

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


async def build_catalog() -> CatalogPort:
    """Prepare storage and return the catalog adapter for the configured backend."""
    if settings.catalog_backend is CatalogBackend.MEMORY:
        bundle = await read_seed_bundle(settings.seed_data_dir)
        return InMemoryCatalogAdapter.from_seed(bundle)

    if settings.create_schema:
        await init_db()
    if settings.seed_on_startup:
        bundle = await read_seed_bundle(settings.seed_data_dir)
        await seed_database(async_session_factory, bundle)
    return SqlCatalogAdapter(async_session_factory)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: storage setup and seeding before serving."""
    logger.info("MovieFeed starting up...")
    logger.info("Catalog backend: %s", settings.catalog_backend.value)
    logger.info("Seed data directory: %s", settings.seed_data_dir)
    logger.info("Feed limit: %d", settings.feed_limit)

    catalog = await build_catalog()
    app.state.scorer = Scorer(catalog, limit=settings.feed_limit)
    yield
    logger.info("MovieFeed shutting down...")
    await dispose_db()


def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""
    application = FastAPI(
        title="MovieFeed",
        description="Personalized movie feed ranked by recency and genre preferences",
        version=__version__,
        lifespan=lifespan,
    )

    # ── Middleware ──────────────────────────────────
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Routes ─────────────────────────────────────
    application.include_router(feed_router)

    # ── Health Check ───────────────────────────────
    @application.get("/health", response_model=HealthResponse, tags=["System"])
    async def health() -> HealthResponse:
        return HealthResponse(status="healthy", service="moviefeed")

    return application


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    uvicorn.run(
        "moviefeed.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()

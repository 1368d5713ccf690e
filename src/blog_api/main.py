"""
Blog Posts API Application

FastAPI application entrypoint with async lifespan management.

Start locally:
    uvicorn blog_api.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from blog_api.api.errors import setup_error_handling
from blog_api.api.v1.posts import router as posts_router
from blog_api.core.config import settings
from blog_api.core.logging import setup_logging
from blog_api.repositories import PostStore, create_store

# Initialize logging before any log statements
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup:
        - Builds the configured store unless one was injected
        - Opens it (creates tables for the SQL backend)

    Shutdown:
        - Closes stores this handler created; injected stores belong
          to the caller
    """
    owned = app.state.store is None
    if owned:
        app.state.store = create_store(settings)
    store: PostStore = app.state.store

    logger.info("Starting %s (store=%s)...", settings.PROJECT_NAME, store.backend)
    await store.open()

    yield

    if owned:
        await store.close()
        app.state.store = None
    logger.info("Shutting down %s...", settings.PROJECT_NAME)


def create_app(store: PostStore | None = None) -> FastAPI:
    """
    Build an application bound to ``store``.

    Passing a store makes the app usable without running the lifespan
    (e.g. behind ``httpx.ASGITransport``), and keeps state isolated per app.
    """
    app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)
    app.state.store = store

    setup_error_handling(app)
    app.include_router(posts_router, prefix="/posts", tags=["Posts"])

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check for load balancers and orchestrators."""
        return {
            "status": "ok",
            "service": "blog-api",
            "environment": settings.ENVIRONMENT,
            "store": app.state.store.backend if app.state.store else "none",
        }

    return app


app = create_app()

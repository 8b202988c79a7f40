"""
FastAPI application entry point for the meme API.

This is the main application file that configures logging, builds the
listing cache and meme service, and registers routes. The business logic
lives in separate modules (cache, sampler, meme_service, reddit_client).
"""
import logging
import time
from collections.abc import Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response

from .cache import ListingCache
from .config_loader import config
from .meme_service import MemeService
from .reddit_client import RedditClient
from .routes import router

# Configure logging for the application
logging.basicConfig(
    level=config.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def build_meme_service() -> MemeService:
    """Wire the Reddit client, listing cache and service from config."""
    cache = ListingCache(
        RedditClient(),
        ttl_seconds=config.cache_ttl,
        max_entries=config.cache_max_entries,
    )
    return MemeService(cache, config.default_subreddits)


@asynccontextmanager
async def app_lifespan(app: FastAPI):
    """
    FastAPI lifespan handler.

    Pre-warms the listing cache before the app starts serving when
    enabled, and logs startup and shutdown.
    """
    logger.info("Starting meme API")
    logger.info(f"Reddit URL: {config.reddit_base_url}")
    logger.info(f"Server: {config.server_host}:{config.server_port}")
    if config.prewarm_on_startup:
        await app.state.meme_service.prewarm()
    try:
        yield
    finally:
        logger.info("Shutting down meme API")


def create_app(meme_service: MemeService | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        meme_service: Service to serve requests with; built from config when omitted
    """
    app = FastAPI(
        title="Meme API",
        version="1.0.0",
        description="Random memes from Reddit's public listings",
        lifespan=app_lifespan,
    )
    app.state.meme_service = meme_service or build_meme_service()
    app.include_router(router)

    @app.middleware("http")
    async def log_requests(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        """Log one access line per request with its status and duration."""
        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            "%s %s -> %s in %.1fms",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=config.server_host,
        port=config.server_port,
        log_level=config.log_level.lower(),
    )

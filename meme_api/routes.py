"""
FastAPI route handlers for the meme API.

Route handlers stay thin: they parse the ``amount`` query parameter, pull
the MemeService from application state and render domain errors as
HTTP responses.
"""

import logging

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import PlainTextResponse

from .config_loader import config
from .errors import MemeApiError
from .meme_service import MemeService
from .models import Post

# Initialize logger for routes
logger = logging.getLogger(__name__)

# Create API router
router = APIRouter()


def get_meme_service(request: Request) -> MemeService:
    """Dependency returning the service built by ``create_app``."""
    return request.app.state.meme_service


@router.get("/", response_model=list[Post])
async def random_memes(
    amount: int = Query(1, ge=0, le=config.max_amount),
    service: MemeService = Depends(get_meme_service),
) -> list[Post]:
    """
    Random posts from the default subreddit pool.

    Each post comes from an independently chosen subreddit. Picks whose
    subreddit cannot be fetched are left out, so the array may be shorter
    than ``amount`` or empty.
    """
    return await service.random_memes(amount)


@router.get("/{subreddit}", response_model=list[Post])
async def subreddit_memes(
    subreddit: str,
    amount: int = Query(1, ge=0, le=config.max_amount),
    service: MemeService = Depends(get_meme_service),
):
    """
    Random posts from one subreddit.

    Returns:
        JSON array of ``amount`` posts, or a 500 plain-text response with
        the error message when the subreddit cannot be fetched
    """
    try:
        return await service.subreddit_memes(subreddit, amount)
    except MemeApiError as exc:
        logger.warning("Request for r/%s failed: %s", exc.subreddit, exc)
        return PlainTextResponse(str(exc), status_code=500)

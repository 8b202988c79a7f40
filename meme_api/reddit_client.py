"""Thin HTTP client for Reddit's public listing endpoints."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

import aiohttp
from pydantic import ValidationError

from .config_loader import config
from .errors import SubredditNotFound, UpstreamUnavailable
from .models import Listing, RedditListingResponse


class RedditClient:
    """Fetches one hot-listing page per call; caching is left to the caller."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        user_agent: str | None = None,
        limit: int | None = None,
        timeout: float | None = None,
        logger: logging.Logger | None = None,
    ):
        self.base_url = (base_url or config.reddit_base_url).rstrip("/")
        self.user_agent = user_agent or config.reddit_user_agent
        self.limit = limit or config.listing_limit
        self.timeout = timeout or config.upstream_timeout
        self.logger = logger or logging.getLogger(self.__class__.__module__)

    async def fetch(self, subreddit: str) -> Listing:
        """
        Fetch the hot listing of a subreddit.

        Raises:
            SubredditNotFound: Reddit answered with anything but 200
            UpstreamUnavailable: connection error, timeout or unexpected body
        """
        subreddit = subreddit.strip()
        self.logger.info("Fetching r/%s (limit=%s)", subreddit, self.limit)

        async with aiohttp.ClientSession() as session:
            try:
                # Unknown subreddits redirect to the search page, so redirects
                # are reported as a status failure instead of being followed.
                async with session.get(
                    f"{self.base_url}/r/{subreddit}/hot.json",
                    params={"limit": str(self.limit)},
                    headers={"User-Agent": self.user_agent},
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                    allow_redirects=False,
                ) as response:
                    if response.status != 200:
                        self.logger.warning(
                            "Reddit returned %s for r/%s", response.status, subreddit
                        )
                        raise SubredditNotFound(subreddit)
                    payload = await response.json(content_type=None)
                    posts = RedditListingResponse.model_validate(payload).to_posts()
            except TimeoutError:
                self.logger.error("Reddit timeout for r/%s", subreddit)
                raise UpstreamUnavailable(subreddit, "timeout")
            except aiohttp.ClientError as exc:
                self.logger.error("Reddit connection error for r/%s: %s", subreddit, exc)
                raise UpstreamUnavailable(subreddit, "connection error") from exc
            except ValidationError as exc:
                self.logger.error("Unexpected listing shape for r/%s: %s", subreddit, exc)
                raise UpstreamUnavailable(subreddit, "malformed listing") from exc
            except ValueError as exc:
                self.logger.error("Invalid JSON for r/%s: %s", subreddit, exc)
                raise UpstreamUnavailable(subreddit, "malformed listing") from exc

        return Listing(
            subreddit=subreddit,
            posts=posts,
            fetched_at=datetime.now(timezone.utc),
        )


__all__ = ["RedditClient"]

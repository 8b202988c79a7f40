"""Meme selection on top of the listing cache."""

from __future__ import annotations

import asyncio
import logging
import random

from .cache import ListingCache
from .errors import MemeApiError
from .models import Post
from .sampler import sample


class MemeService:
    """Serves random posts from the default pool or from a named subreddit."""

    def __init__(
        self,
        cache: ListingCache,
        default_subreddits: list[str],
        rng: random.Random | None = None,
        logger: logging.Logger | None = None,
    ):
        self.logger = logger or logging.getLogger(self.__class__.__module__)
        if not default_subreddits:
            raise ValueError("default_subreddits must not be empty")
        self.cache = cache
        self.default_subreddits = list(default_subreddits)
        self.rng = rng or random.Random()

    async def random_memes(self, amount: int) -> list[Post]:
        """
        Draw ``amount`` posts, each from an independently chosen default subreddit.

        Picks that fail are logged and left out of the result.
        """
        picks = [self.rng.choice(self.default_subreddits) for _ in range(amount)]
        results = await asyncio.gather(
            *(self._one_from(subreddit) for subreddit in picks),
            return_exceptions=True,
        )

        memes: list[Post] = []
        for subreddit, result in zip(picks, results, strict=True):
            if isinstance(result, MemeApiError):
                self.logger.warning("Skipping pick from r/%s: %s", subreddit, result)
                continue
            if isinstance(result, BaseException):
                raise result
            memes.append(result)

        self.logger.info("Random memes: %s/%s picks served", len(memes), amount)
        return memes

    async def subreddit_memes(self, subreddit: str, amount: int) -> list[Post]:
        """Draw ``amount`` posts from one subreddit's listing; errors propagate."""
        if amount == 0:
            return []
        listing = await self.cache.get(subreddit.strip())
        return sample(listing, amount, self.rng)

    async def prewarm(self) -> None:
        """Load every default subreddit into the cache, ignoring failures."""
        self.logger.info("Pre-warming cache for %s subreddits", len(self.default_subreddits))
        results = await asyncio.gather(
            *(self.cache.get(subreddit) for subreddit in self.default_subreddits),
            return_exceptions=True,
        )
        for subreddit, result in zip(self.default_subreddits, results, strict=True):
            if isinstance(result, BaseException):
                self.logger.warning("Pre-warm failed for r/%s: %s", subreddit, result)

    async def _one_from(self, subreddit: str) -> Post:
        listing = await self.cache.get(subreddit)
        return sample(listing, 1, self.rng)[0]


__all__ = ["MemeService"]

"""Random post selection over a cached listing."""

from __future__ import annotations

import random

from .errors import EmptyListing
from .models import Listing, Post


def sample(listing: Listing, count: int, rng: random.Random | None = None) -> list[Post]:
    """
    Draw ``count`` posts uniformly at random, with replacement.

    Args:
        listing: Listing to draw from
        count: Number of independent draws, at least 1
        rng: Random source; the module-level ``random`` state when omitted

    Raises:
        EmptyListing: the listing holds no posts
    """
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")
    if not listing.posts:
        raise EmptyListing(listing.subreddit)

    source = rng or random
    return [source.choice(listing.posts) for _ in range(count)]


__all__ = ["sample"]

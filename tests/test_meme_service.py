import random

import pytest

from meme_api.cache import ListingCache
from meme_api.errors import EmptyListing, SubredditNotFound, UpstreamUnavailable
from meme_api.meme_service import MemeService


class _StubFetcher:
    def __init__(self, make_listing, sizes: dict[str, int] | None = None):
        self.make_listing = make_listing
        self.sizes = sizes or {}
        self.calls: list[str] = []
        self.errors: dict[str, Exception] = {}

    async def fetch(self, subreddit):
        self.calls.append(subreddit)
        if subreddit in self.errors:
            raise self.errors[subreddit]
        return self.make_listing(subreddit, self.sizes.get(subreddit, 10))


def _service(fetcher, pool, seed=1) -> MemeService:
    cache = ListingCache(fetcher, ttl_seconds=3600, max_entries=10)
    return MemeService(cache, pool, rng=random.Random(seed))


@pytest.mark.asyncio
async def test_subreddit_memes_draws_all_items_from_one_fetch(make_listing):
    fetcher = _StubFetcher(make_listing)
    service = _service(fetcher, ["memes"])

    posts = await service.subreddit_memes(" funny", 3)

    assert len(posts) == 3
    assert all(post.subreddit == "funny" for post in posts)
    assert fetcher.calls == ["funny"]


@pytest.mark.asyncio
async def test_subreddit_memes_zero_amount_skips_cache(make_listing):
    fetcher = _StubFetcher(make_listing)
    service = _service(fetcher, ["memes"])

    assert await service.subreddit_memes("funny", 0) == []
    assert fetcher.calls == []


@pytest.mark.asyncio
async def test_subreddit_memes_propagates_errors(make_listing):
    fetcher = _StubFetcher(make_listing, sizes={"quiet": 0})
    fetcher.errors["nope"] = SubredditNotFound("nope")
    service = _service(fetcher, ["memes"])

    with pytest.raises(SubredditNotFound):
        await service.subreddit_memes("nope", 1)
    with pytest.raises(EmptyListing):
        await service.subreddit_memes("quiet", 1)


@pytest.mark.asyncio
async def test_random_memes_uses_default_pool(make_listing):
    pool = ["memes", "dankmemes", "me_irl"]
    fetcher = _StubFetcher(make_listing)
    service = _service(fetcher, pool)

    posts = await service.random_memes(20)

    assert len(posts) == 20
    assert {post.subreddit for post in posts} <= set(pool)
    # One fetch per distinct subreddit, however many picks hit it.
    assert sorted(fetcher.calls) == sorted(set(fetcher.calls))


@pytest.mark.asyncio
async def test_random_memes_skips_failed_picks(make_listing):
    fetcher = _StubFetcher(make_listing, sizes={"antimeme": 0})
    fetcher.errors["funny"] = UpstreamUnavailable("funny", "timeout")
    service = _service(fetcher, ["memes", "funny", "antimeme"], seed=7)

    posts = await service.random_memes(30)

    assert 0 < len(posts) < 30
    assert all(post.subreddit == "memes" for post in posts)


@pytest.mark.asyncio
async def test_random_memes_returns_empty_list_when_everything_fails(make_listing):
    fetcher = _StubFetcher(make_listing)
    fetcher.errors["funny"] = SubredditNotFound("funny")
    service = _service(fetcher, ["funny"])

    assert await service.random_memes(3) == []


@pytest.mark.asyncio
async def test_prewarm_fills_cache_and_ignores_failures(make_listing):
    fetcher = _StubFetcher(make_listing)
    fetcher.errors["dankmemes"] = UpstreamUnavailable("dankmemes", "connection error")
    service = _service(fetcher, ["memes", "dankmemes", "funny"])

    await service.prewarm()

    assert "memes" in service.cache
    assert "funny" in service.cache
    assert "dankmemes" not in service.cache
    assert sorted(fetcher.calls) == ["dankmemes", "funny", "memes"]


def test_service_requires_default_pool(make_listing):
    with pytest.raises(ValueError):
        _service(_StubFetcher(make_listing), [])

import pathlib
import sys
from datetime import datetime, timezone

import pytest

# Ensure repo root on sys.path for direct module imports when running tests locally.
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from meme_api.models import Listing, Post
from reddit_fixtures import reddit_post


@pytest.fixture
def make_listing():
    def _make(subreddit: str = "funny", size: int = 10) -> Listing:
        posts = tuple(Post(**reddit_post(i, subreddit)) for i in range(size))
        return Listing(
            subreddit=subreddit,
            posts=posts,
            fetched_at=datetime.now(timezone.utc),
        )

    return _make

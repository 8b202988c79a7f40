"""
Pydantic models for Reddit listings and the posts served by the API.

Post and Listing are frozen so cached values can be shared between
requests without defensive copies. The Reddit* models describe only the
part of the upstream JSON envelope needed to reach the posts.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class Post(BaseModel):
    """
    A single Reddit post as returned by the API.

    Attributes:
        id: Reddit base36 post id
        title: Post title
        url: Link to the media or content the post points at
        author: Username of the poster
        subreddit: Subreddit the post belongs to
        permalink: Path of the comments page on reddit.com
        ups: Upvote count at fetch time
        over_18: NSFW flag
        spoiler: Spoiler flag
        created_utc: Creation time as a unix timestamp
        thumbnail: Thumbnail URL or a Reddit placeholder keyword
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    url: str
    author: str | None = None
    subreddit: str | None = None
    permalink: str | None = None
    ups: int = 0
    over_18: bool = False
    spoiler: bool = False
    created_utc: float | None = None
    thumbnail: str | None = None


class Listing(BaseModel):
    """Posts fetched for one subreddit in one upstream call."""

    model_config = ConfigDict(frozen=True)

    subreddit: str
    posts: tuple[Post, ...]
    fetched_at: datetime


class RedditChild(BaseModel):
    data: Post


class RedditListingData(BaseModel):
    children: list[RedditChild]


class RedditListingResponse(BaseModel):
    """Envelope of ``/r/{name}/hot.json``: ``data.children[].data``."""

    data: RedditListingData

    def to_posts(self) -> tuple[Post, ...]:
        return tuple(child.data for child in self.data.children)


__all__ = [
    "Post",
    "Listing",
    "RedditChild",
    "RedditListingData",
    "RedditListingResponse",
]

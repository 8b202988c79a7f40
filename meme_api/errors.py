"""Domain exceptions raised by the fetcher, cache and sampler."""


class MemeApiError(Exception):
    """Base exception for failures tied to a single subreddit."""

    retryable = False

    def __init__(self, subreddit: str, message: str):
        super().__init__(message)
        self.subreddit = subreddit


class SubredditNotFound(MemeApiError):
    """Reddit answered with a non-success status for the listing."""

    def __init__(self, subreddit: str):
        super().__init__(subreddit, f"subreddit r/{subreddit} was not found")


class UpstreamUnavailable(MemeApiError):
    """Transport, timeout or decoding failure while fetching a listing."""

    retryable = True

    def __init__(self, subreddit: str, reason: str):
        super().__init__(subreddit, f"could not fetch r/{subreddit}: {reason}")
        self.reason = reason


class EmptyListing(MemeApiError):
    def __init__(self, subreddit: str):
        super().__init__(subreddit, f"subreddit r/{subreddit} has no posts")


__all__ = ["MemeApiError", "SubredditNotFound", "UpstreamUnavailable", "EmptyListing"]

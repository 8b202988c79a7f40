"""
Reddit meme API package.

A FastAPI application that serves random posts from Reddit's public JSON
listings, backed by an in-memory per-subreddit listing cache.
"""
from .main import app, create_app

__version__ = "1.0.0"
__all__ = ["app", "create_app"]

"""
Post Feed

Fetches posts from a JSON endpoint and filters them by title search.
"""

from .api import APIClient, FetchResult, NetworkError, Post
from .store import LoadStatus, PostStore, filter_posts, tokenize

__all__ = [
    "APIClient",
    "FetchResult",
    "NetworkError",
    "Post",
    "LoadStatus",
    "PostStore",
    "filter_posts",
    "tokenize",
]

"""
API Client Module

Provides the async HTTP client for fetching posts and the error taxonomy.
"""

from .client import APIClient, FetchResult
from .errors import FetchError, NetworkError
from .models import Post

__all__ = ["APIClient", "FetchResult", "FetchError", "NetworkError", "Post"]

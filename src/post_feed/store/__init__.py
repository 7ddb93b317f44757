"""
Post Store Module

Provides the post store and the title search it uses.
"""

from .filtering import filter_posts, title_matches, tokenize
from .store import LoadStatus, PostStore

__all__ = ["LoadStatus", "PostStore", "filter_posts", "title_matches", "tokenize"]

"""
Title search used by the post list.

A search string is split into tokens and a post matches when its title
contains every token, ignoring case.
"""

from typing import List, Optional, Sequence

from ..api.models import Post
from ..config import config


def tokenize(text: str, separator: Optional[str] = None) -> List[str]:
    """Split search text on the separator, dropping empty tokens."""
    separator = separator or config.search.token_separator
    return [token for token in text.split(separator) if token]


def title_matches(post: Post, tokens: Sequence[str]) -> bool:
    """True if the post title contains every token (case-insensitive)."""
    title = post.title.lower()
    return all(token.lower() in title for token in tokens)


def filter_posts(posts: Sequence[Post], search_text: str) -> List[Post]:
    """
    Filter posts by search text, keeping the original order.

    Args:
        posts: Posts in display order.
        search_text: Raw text from the search box. Not trimmed.

    Returns:
        All posts when the text is empty, otherwise the posts whose
        title matches every token.
    """
    if not search_text:
        return list(posts)

    tokens = tokenize(search_text)
    return [post for post in posts if title_matches(post, tokens)]

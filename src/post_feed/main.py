"""
Main Entry Point

Console front end for the post feed:

1. Load posts from the API once
2. Filter them by the search text given on the command line
3. Print one row per matching post

Load failures do not raise; they are reported through the store's
status and the log.
"""

import asyncio
import logging
import sys
from typing import List, Optional, TextIO

from .config import config
from .store import LoadStatus, PostStore


# Configure logging
def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """Set up logging for the application."""
    # Ensure log directory exists
    config.log.log_directory.mkdir(parents=True, exist_ok=True)

    # Create logger
    logger = logging.getLogger("post_feed")
    logger.setLevel(logging.DEBUG)

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, log_level.upper()))
    console_format = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%H:%M:%S"
    )
    console_handler.setFormatter(console_format)

    # File handler
    file_handler = logging.FileHandler(
        config.log.log_file_path,
        mode='w',
        encoding='utf-8'
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(config.log.log_format))

    logger.addHandler(console_handler)
    logger.addHandler(file_handler)

    return logger


def render(store: PostStore, out: Optional[TextIO] = None) -> int:
    """
    Print the filtered posts.

    Returns:
        Number of rows printed.
    """
    out = out or sys.stdout
    posts = store.filtered_posts()
    for post in posts:
        print(post.format_line(), file=out)
    return len(posts)


async def run(search_text: str = "", store: Optional[PostStore] = None) -> PostStore:
    """Load posts once and apply the search text."""
    store = store or PostStore()
    store.set_search_text(search_text)

    task = store.ensure_loaded()
    if task is not None:
        await task

    return store


def main(argv: Optional[List[str]] = None):
    """Main entry point for the console front end."""
    args = sys.argv[1:] if argv is None else argv
    logger = setup_logging(config.log.log_level)

    try:
        store = asyncio.run(run(" ".join(args)))
        shown = render(store)
        logger.info(f"Showing {shown} of {len(store.posts)} posts")

        if store.status is LoadStatus.FAILED:
            logger.error(f"Could not load posts: {store.last_error.message}")
            sys.exit(1)
        sys.exit(0)

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(130)


if __name__ == "__main__":
    main()

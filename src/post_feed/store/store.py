"""
Post Store Module

Owns the fetched posts and the current search text, and derives the
filtered list shown to the user. Load failures are absorbed: they never
raise to the caller and never clear previously loaded posts.
"""

import asyncio
import logging
from enum import Enum
from typing import Callable, List, Optional, Tuple

from ..api import APIClient, NetworkError, Post
from ..config import config
from .filtering import filter_posts


logger = logging.getLogger(__name__)


class LoadStatus(Enum):
    """Load state of a PostStore."""
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


Listener = Callable[["PostStore"], None]


class PostStore:
    """
    Store for the post list screen.

    Observers subscribe to be called after every change of posts, status
    or search text.
    """

    def __init__(
        self,
        api: Optional[APIClient] = None,
        url: Optional[str] = None
    ):
        """
        Initialize the store.

        Args:
            api: Client used for fetching (a new APIClient if None).
            url: Default endpoint for load() (config.api.posts_url if None).
        """
        self.api = api or APIClient()
        self.url = url or config.api.posts_url
        self.posts: Tuple[Post, ...] = ()
        self.search_text = ""
        self.status = LoadStatus.IDLE
        self.last_error: Optional[NetworkError] = None

        self._listeners: List[Listener] = []
        self._task: Optional[asyncio.Task] = None
        self._generation = 0

    @property
    def is_loading(self) -> bool:
        """True while a load is in flight."""
        if self._task is not None and not self._task.done():
            return True
        return self.status is LoadStatus.LOADING

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a change listener.

        Returns:
            A callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_search_text(self, text: str) -> None:
        """Update the search text and notify listeners."""
        self.search_text = text
        self._notify()

    def filtered_posts(self, search_text: Optional[str] = None) -> List[Post]:
        """
        Get the posts matching the search text.

        Args:
            search_text: Text to filter by (the store's search_text if None).

        Returns:
            Matching posts in their original order.
        """
        if search_text is None:
            search_text = self.search_text
        return filter_posts(self.posts, search_text)

    async def load(self, url: Optional[str] = None) -> None:
        """
        Fetch posts and replace the current list on success.

        A failure keeps the current posts and is recorded in last_error.
        A load that was cancelled or superseded by a newer one does not
        touch the store.
        """
        self._generation += 1
        generation = self._generation

        self.status = LoadStatus.LOADING
        self._notify()

        try:
            result = await self.api.fetch(url or self.url, Post)
        except asyncio.CancelledError:
            if generation == self._generation:
                self._settle()
            raise

        if generation != self._generation:
            logger.info("Discarding result of a superseded load")
            return

        if result.ok:
            self.posts = tuple(result.value)
            self.last_error = None
            self.status = LoadStatus.LOADED
            logger.info(f"Loaded {len(self.posts)} posts")
        else:
            self.last_error = result.error
            self.status = LoadStatus.LOADED if self.posts else LoadStatus.FAILED
            logger.info(f"Load failed ({result.error.name}), keeping {len(self.posts)} posts")

        self._notify()

    def start_load(self, url: Optional[str] = None) -> asyncio.Task:
        """Start load() as a task on the running loop and return the handle."""
        if self.is_loading:
            self.cancel()
        self._task = asyncio.create_task(self.load(url))
        return self._task

    def ensure_loaded(self, url: Optional[str] = None) -> Optional[asyncio.Task]:
        """Start a load only if no posts are present and none is in flight."""
        if self.posts or self.is_loading:
            return None
        return self.start_load(url)

    def cancel(self) -> bool:
        """
        Cancel the in-flight load started by start_load().

        Returns:
            True if a load was cancelled, False if there was none.
        """
        if self._task is None or self._task.done():
            return False

        self._generation += 1
        self._task.cancel()
        self._task = None
        self._settle()
        logger.info("Load cancelled")
        return True

    def _settle(self) -> None:
        self.status = LoadStatus.LOADED if self.posts else LoadStatus.IDLE
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

"""
Network Errors

Failure taxonomy for a single fetch, plus the exception used to carry
a failure up to the fetcher boundary.
"""

from enum import Enum


class NetworkError(Enum):
    """Kinds of failure a fetch can report."""
    BAD_URL = "There was an error creating the URL"
    # Never raised by the fetcher; kept so the taxonomy stays complete.
    INVALID_REQUEST = "The request could not be built"
    BAD_RESPONSE = "Did not get a valid response"
    BAD_STATUS = "Did not get a 2xx status code from the response"
    FAILED_TO_DECODE_RESPONSE = "Failed to decode response into the given type"

    @property
    def message(self) -> str:
        """Human-readable diagnostic for this error kind."""
        return self.value


class FetchError(Exception):
    """Raised inside the fetcher and converted to a result at its boundary."""

    def __init__(self, kind: NetworkError, detail: str = ""):
        self.kind = kind
        self.detail = detail
        super().__init__(f"{kind.message}: {detail}" if detail else kind.message)

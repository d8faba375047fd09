"""
Exception hierarchy for the twitter_client package.
"""
from typing import Optional


class TwitterClientError(Exception):
    """Base exception for all library errors."""


class StreamingError(TwitterClientError):
    """Raised when a streaming endpoint answers with a non-200 status."""

    def __init__(self, status_code: int, body: str = "", url: Optional[str] = None):
        message = f"Streaming request failed with status {status_code}"
        if url:
            message += f" ({url})"
        if body:
            message += f": {body}"
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.url = url


class StreamingConnectionError(TwitterClientError):
    """Raised when the streaming connection cannot be established."""

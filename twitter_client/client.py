"""
Twitter Streaming Client
Main client for interacting with Twitter's streaming APIs.
"""

from typing import Optional

from .auth import Auth
from .statuses import TwitterStatusClient
from .streaming import StreamingClient


class TwitterStreamingClient(TwitterStatusClient):
    """Twitter API client for the statuses streams."""

    def __init__(self, auth: Optional[Auth] = None, streaming_client: Optional[StreamingClient] = None):
        """
        Initialize the streaming client.

        Args:
            auth: Credentials for the streaming endpoints
            streaming_client: Transport to use instead of a new one built from `auth`
        """
        self.auth = auth
        self.streaming_client = streaming_client or StreamingClient(auth=auth)

    @classmethod
    def from_env(cls) -> "TwitterStreamingClient":
        """Build a client from the TWITTER_* environment variables."""
        return cls(auth=Auth())

    async def close(self):
        await self.streaming_client.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

"""
Authentication Module
Attach Twitter API credentials to streaming requests.
"""

from typing import Optional

from .config import Config


class Auth:
    """Hold the bearer token used by the streaming transport."""

    def __init__(self, bearer_token: Optional[str] = None):
        """
        Initialize authentication.

        Args:
            bearer_token: Twitter bearer token (or from env TWITTER_BEARER_TOKEN)
        """
        self.bearer_token = bearer_token or Config.TWITTER_BEARER_TOKEN

        if not self.bearer_token:
            raise ValueError("Missing required authentication credentials")

    def headers(self) -> dict:
        """Get the request headers carrying the credentials."""
        return {"Authorization": f"Bearer {self.bearer_token}"}

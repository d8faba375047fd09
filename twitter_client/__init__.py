"""
twitter_client - Twitter Streaming API Client
A Python client for the statuses streams of Twitter's Streaming API.
"""

__version__ = "0.1.0"
__author__ = "Developer"

from .auth import Auth
from .client import TwitterStreamingClient
from .enums import Language
from .exceptions import StreamingConnectionError, StreamingError, TwitterClientError
from .messages import (
    DisconnectMessage,
    LimitNotice,
    LocationDeletionNotice,
    StatusDeletionNotice,
    StatusWithheldNotice,
    Tweet,
    UserWithheldNotice,
    WarningMessage,
)
from .statuses import TwitterStatusClient
from .streaming import StreamingClient, TwitterStream

__all__ = [
    "Auth",
    "TwitterStreamingClient",
    "TwitterStatusClient",
    "StreamingClient",
    "TwitterStream",
    "Language",
    "TwitterClientError",
    "StreamingError",
    "StreamingConnectionError",
    "Tweet",
    "StatusDeletionNotice",
    "LocationDeletionNotice",
    "LimitNotice",
    "StatusWithheldNotice",
    "UserWithheldNotice",
    "DisconnectMessage",
    "WarningMessage",
]

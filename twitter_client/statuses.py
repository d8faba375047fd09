"""
Statuses Streaming Module
Requests against the public ``statuses`` streaming endpoints.
"""

from typing import Awaitable, Iterable, Optional

from .config import Config
from .enums import Language
from .logger import logger
from .parameters import StatusFilters, StatusFirehoseParameters, StatusSampleParameters
from .streaming import Handler, StreamingClient, TwitterStream
from .utils import as_items, validate_count

MAX_FIREHOSE_COUNT = 150000


class TwitterStatusClient:
    """
    Mixin for the statuses streams. Requires a ``streaming_client`` attribute.

    Every method validates its arguments before any I/O happens, so invalid
    arguments raise ``ValueError`` immediately. The returned awaitable resolves
    to a `TwitterStream` that can be used to close the stream; it fails if the
    connection cannot be established.
    """

    streaming_client: StreamingClient

    @property
    def status_url(self) -> str:
        return f"{Config.STATUS_STREAMING_URL}/{Config.TWITTER_VERSION}/statuses"

    def filter_statuses(self,
                        follow: Iterable[int] = (),
                        tracks: Iterable[str] = (),
                        locations: Iterable[float] = (),
                        languages: Iterable[Language] = (),
                        stall_warnings: bool = False,
                        handler: Optional[Handler] = None) -> Awaitable[TwitterStream]:
        """
        Stream public statuses matching the 'follow', 'track' and 'locations' predicates.

        The three predicates are optional but at least one must be given; they
        are combined with OR.

        Args:
            follow: User IDs whose statuses should be delivered
            tracks: Keywords or phrases to track
            locations: Bounding boxes as a flat list of longitude/latitude pairs,
                south-west corner first
            languages: BCP 47 language identifiers to restrict the stream to
            stall_warnings: Deliver `WarningMessage` stall warnings
            handler: Callable receiving every message, or a mapping from message
                type to callable; messages with no matching entry are ignored

        Returns:
            Awaitable resolving to the open `TwitterStream`
        """
        follow, tracks, locations = as_items(follow), as_items(tracks), as_items(locations)
        if not (follow or tracks or locations):
            raise ValueError("At least one of 'follow', 'tracks' or 'locations' needs to be non empty")
        filters = StatusFilters(
            follow=follow,
            track=tracks,
            locations=locations,
            language=as_items(languages),
            stall_warnings=stall_warnings,
        )
        self.streaming_client.pre_processing()
        logger.debug('Filter stream parameters: %s', filters)
        return self.streaming_client.post(f"{self.status_url}/filter.json", filters, handler)

    def sample_statuses(self,
                        languages: Iterable[Language] = (),
                        stall_warnings: bool = False,
                        handler: Optional[Handler] = None) -> Awaitable[TwitterStream]:
        """
        Stream a small random sample of all public statuses.

        Every client connected with the default access level receives the same
        tweets.

        Args:
            languages: BCP 47 language identifiers to restrict the stream to
            stall_warnings: Deliver `WarningMessage` stall warnings
            handler: Callable or type-to-callable mapping processing the messages

        Returns:
            Awaitable resolving to the open `TwitterStream`
        """
        parameters = StatusSampleParameters(language=as_items(languages), stall_warnings=stall_warnings)
        self.streaming_client.pre_processing()
        return self.streaming_client.get(f"{self.status_url}/sample.json", parameters, handler)

    def firehose_statuses(self,
                          count: Optional[int] = None,
                          languages: Iterable[Language] = (),
                          stall_warnings: bool = False,
                          handler: Optional[Handler] = None) -> Awaitable[TwitterStream]:
        """
        Stream all public statuses. Few applications need this access level.

        Args:
            count: Number of messages to backfill, between -150000 and +150000
            languages: BCP 47 language identifiers to restrict the stream to
            stall_warnings: Deliver `WarningMessage` stall warnings
            handler: Callable or type-to-callable mapping processing the messages

        Returns:
            Awaitable resolving to the open `TwitterStream`
        """
        validate_count(count, MAX_FIREHOSE_COUNT)
        parameters = StatusFirehoseParameters(
            language=as_items(languages),
            count=count,
            stall_warnings=stall_warnings,
        )
        self.streaming_client.pre_processing()
        return self.streaming_client.get(f"{self.status_url}/firehose.json", parameters, handler)

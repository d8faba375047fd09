"""
Streaming transport shared by the streaming endpoint clients.

`StreamingClient` opens long-lived HTTP connections with aiohttp and wraps
each accepted connection in a `TwitterStream`, which decodes the
newline-delimited JSON messages and hands them to the caller.
"""
import asyncio
import contextlib
import inspect
import json
from typing import Any, Callable, Mapping, Optional, Set, Union

import aiohttp

from .auth import Auth
from .config import Config
from .exceptions import StreamingConnectionError, StreamingError
from .logger import logger
from .messages import parse_message

Handler = Union[Callable[[Any], Any], Mapping[type, Callable[[Any], Any]]]


class TwitterStream:
    """Handle to one live streaming connection."""

    def __init__(self, response: aiohttp.ClientResponse, handler: Optional[Handler] = None):
        self.response = response
        self.handler = handler
        self.error: Optional[Exception] = None
        self._task: Optional[asyncio.Task] = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed or bool(getattr(self.response, 'closed', False))

    def start(self):
        """Start dispatching messages to the handler in a background task."""
        if self.handler is not None and self._task is None:
            self._task = asyncio.ensure_future(self._consume())
        return self

    def __aiter__(self):
        if self.handler is not None:
            raise TypeError("Stream messages are already dispatched to a handler")
        return self._messages()

    async def _messages(self):
        try:
            async for line in self.response.content:
                if self._closed:
                    break
                line = line.strip()
                if not line:
                    # keep-alive
                    continue
                try:
                    payload = json.loads(line)
                except ValueError:
                    logger.warning('Skipping undecodable stream line: %r', line[:200])
                    continue
                message = parse_message(payload)
                if message is None:
                    logger.debug('Ignoring unknown stream message: %s', payload)
                    continue
                yield message
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            if not self._closed:
                raise StreamingConnectionError(f'Stream {self.response.url} interrupted: {e!r}') from e
        finally:
            self._closed = True
            self.response.close()

    def _resolve(self, message):
        if isinstance(self.handler, Mapping):
            for message_type, callback in self.handler.items():
                if isinstance(message, message_type):
                    return callback
            return None
        return self.handler

    async def _dispatch(self, message):
        callback = self._resolve(message)
        if callback is None:
            return
        try:
            result = callback(message)
            if inspect.isawaitable(result):
                await result
        except Exception:
            logger.exception('Stream handler failed on %s', type(message).__name__)

    async def _consume(self):
        try:
            async for message in self._messages():
                await self._dispatch(message)
                if self._closed:
                    break
        except StreamingConnectionError as e:
            logger.error('%s', e)
            self.error = e
        except Exception as e:
            logger.exception('Stream %s failed', self.response.url)
            self.error = e
        logger.info('Stream %s finished', self.response.url)

    async def wait(self):
        """Wait until the stream ends; raises the error that ended it, if any."""
        if self._task is not None:
            await asyncio.wait({self._task})
        if self.error is not None:
            raise self.error

    async def close(self):
        """Stop reading and release the connection."""
        if self._closed and (self._task is None or self._task.done()):
            self.response.close()
            return
        self._closed = True
        task = self._task
        if task is not None and not task.done() and task is not asyncio.current_task():
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task
        self.response.close()
        logger.info('Closed stream %s', self.response.url)


class StreamingClient:
    """Issue requests against streaming endpoints."""

    def __init__(self, auth: Optional[Auth] = None, timeout: Optional[float] = None,
                 user_agent: Optional[str] = None, session: Optional[aiohttp.ClientSession] = None):
        """
        Initialize the streaming transport.

        Args:
            auth: Credentials attached to every request
            timeout: Seconds without data before a read fails (default Config.STREAM_TIMEOUT)
            user_agent: User-Agent header (default Config.USER_AGENT)
            session: Existing aiohttp session to use instead of an owned one
        """
        self.auth = auth
        self.timeout = Config.STREAM_TIMEOUT if timeout is None else timeout
        self.user_agent = user_agent or Config.USER_AGENT
        self._session = session
        self._owns_session = session is None
        self.streams: Set[TwitterStream] = set()

    def pre_processing(self):
        """
        Hook run before every request is issued.

        Drops streams that have ended from `streams`. A stream opened without a
        handler only ends once it is iterated to the end, closed, or its
        response is released; until then it stays tracked and is closed by `close()`.
        """
        finished = {stream for stream in self.streams if stream.closed}
        self.streams -= finished
        if finished:
            logger.debug('Dropped %d finished streams', len(finished))

    def _headers(self) -> dict:
        headers = {'User-Agent': self.user_agent}
        if self.auth is not None:
            headers.update(self.auth.headers())
        return headers

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=None, sock_read=self.timeout)
            self._session = aiohttp.ClientSession(timeout=timeout)
            self._owns_session = True
        return self._session

    async def _request(self, method: str, url: str, parameters, handler: Optional[Handler]) -> TwitterStream:
        params = parameters.to_params() if parameters is not None else {}
        session = self._get_session()
        if method == 'GET':
            options = {'params': params}
        else:
            options = {'data': params}

        logger.info('Opening stream %s %s', method, url)
        try:
            response = await session.request(method, url, headers=self._headers(), **options)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise StreamingConnectionError(f'Could not connect to {url}: {e!r}') from e

        if response.status != 200:
            body = await response.text()
            response.release()
            logger.error('Stream %s rejected with status %s', url, response.status)
            raise StreamingError(response.status, body, url)

        stream = TwitterStream(response, handler)
        self.streams.add(stream)
        return stream.start()

    async def get(self, url: str, parameters=None, handler: Optional[Handler] = None) -> TwitterStream:
        return await self._request('GET', url, parameters, handler)

    async def post(self, url: str, parameters=None, handler: Optional[Handler] = None) -> TwitterStream:
        return await self._request('POST', url, parameters, handler)

    async def close(self):
        """Close every open stream and the owned session."""
        for stream in list(self.streams):
            await stream.close()
        self.streams.clear()
        if self._session is not None and self._owns_session:
            await self._session.close()
        self._session = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

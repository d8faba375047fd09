"""Shared fakes for the streaming tests."""

import asyncio

import pytest

from twitter_client.config import Config


class RecordingStreamingClient:
    """Stand-in for StreamingClient that records the requests it is given."""

    def __init__(self):
        self.calls = []
        self.pre_processed = 0

    def pre_processing(self):
        self.pre_processed += 1

    async def get(self, url, parameters=None, handler=None):
        self.calls.append(("GET", url, parameters, handler))
        return "stream"

    async def post(self, url, parameters=None, handler=None):
        self.calls.append(("POST", url, parameters, handler))
        return "stream"

    async def close(self):
        pass


class FakeContent:
    def __init__(self, lines, error=None, block=False):
        self.lines = list(lines)
        self.error = error
        self.block = block

    def __aiter__(self):
        return self._iter()

    async def _iter(self):
        for line in self.lines:
            yield line
            await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        if self.block:
            await asyncio.Event().wait()


class FakeResponse:
    def __init__(self, lines=(), status=200, body="", error=None, block=False):
        self.content = FakeContent(lines, error=error, block=block)
        self.status = status
        self.body = body
        self.url = "https://stream.example.com/1.1/statuses/sample.json"
        self.closed = False
        self.released = False

    async def text(self):
        return self.body

    def release(self):
        self.released = True

    def close(self):
        self.closed = True


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requests = []
        self.closed = False

    def request(self, method, url, **kwargs):
        self.requests.append((method, url, kwargs))

        async def _send():
            if self.error is not None:
                raise self.error
            return self.response

        return _send()

    async def close(self):
        self.closed = True


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    monkeypatch.setattr(Config, "STATUS_STREAMING_URL", "https://stream.twitter.com")
    monkeypatch.setattr(Config, "TWITTER_VERSION", "1.1")
    monkeypatch.setattr(Config, "USER_AGENT", "twitter-streaming-client")
    monkeypatch.setattr(Config, "TWITTER_BEARER_TOKEN", None)


@pytest.fixture
def recorder():
    return RecordingStreamingClient()

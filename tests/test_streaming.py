"""Tests for the streaming transport."""

import asyncio
import logging

import aiohttp
import pytest

from conftest import FakeResponse, FakeSession
from twitter_client.auth import Auth
from twitter_client.exceptions import StreamingConnectionError, StreamingError
from twitter_client.messages import LimitNotice, Tweet, WarningMessage
from twitter_client.parameters import StatusFilters, StatusSampleParameters
from twitter_client.streaming import StreamingClient, TwitterStream

TWEET = b'{"id": 1, "text": "hello", "user": {"id": 2, "screen_name": "bob"}}\r\n'
LIMIT = b'{"limit": {"track": 7}}\r\n'
WARNING = b'{"warning": {"code": "FALLING_BEHIND", "message": "slow", "percent_full": 60}}\r\n'


@pytest.mark.asyncio
async def test_handler_receives_decoded_messages():
    received = []
    response = FakeResponse([TWEET, b"\r\n", b"not json\r\n", b'{"friends": []}\r\n', LIMIT])
    stream = TwitterStream(response, received.append).start()
    await stream.wait()
    assert [type(message) for message in received] == [Tweet, LimitNotice]
    assert received[0].text == "hello"
    assert stream.closed
    assert response.closed


@pytest.mark.asyncio
async def test_mapping_handler_ignores_unmatched_messages():
    tweets = []
    warnings = []
    handler = {Tweet: tweets.append, WarningMessage: warnings.append}
    stream = TwitterStream(FakeResponse([TWEET, LIMIT, WARNING, TWEET]), handler).start()
    await stream.wait()
    assert len(tweets) == 2
    assert warnings == [WarningMessage(code="FALLING_BEHIND", message="slow", percent_full=60)]


@pytest.mark.asyncio
async def test_async_handler_and_failing_handler(caplog):
    seen = []

    async def handler(message):
        seen.append(message)
        if isinstance(message, LimitNotice):
            raise RuntimeError("boom")

    stream = TwitterStream(FakeResponse([LIMIT, TWEET]), handler).start()
    with caplog.at_level(logging.ERROR, logger="twitter_client"):
        await stream.wait()
    assert len(seen) == 2
    assert "Stream handler failed on LimitNotice" in caplog.text


@pytest.mark.asyncio
async def test_iterating_without_handler():
    stream = TwitterStream(FakeResponse([TWEET, LIMIT]))
    messages = [message async for message in stream]
    assert [type(message) for message in messages] == [Tweet, LimitNotice]


def test_iterating_with_handler_is_rejected():
    with pytest.raises(TypeError):
        TwitterStream(FakeResponse(), print).__aiter__()


@pytest.mark.asyncio
async def test_interrupted_stream_reports_error():
    received = []
    response = FakeResponse([TWEET], error=aiohttp.ClientPayloadError("connection reset"))
    stream = TwitterStream(response, received.append).start()
    with pytest.raises(StreamingConnectionError):
        await stream.wait()
    assert len(received) == 1
    assert isinstance(stream.error, StreamingConnectionError)


@pytest.mark.asyncio
async def test_close_stops_a_live_stream():
    received = []
    response = FakeResponse([TWEET], block=True)
    stream = TwitterStream(response, received.append).start()
    await asyncio.sleep(0.01)
    await stream.close()
    await stream.wait()
    assert received and isinstance(received[0], Tweet)
    assert stream.closed
    assert response.closed


@pytest.mark.asyncio
async def test_get_sends_query_parameters_and_headers():
    session = FakeSession(FakeResponse([TWEET]))
    client = StreamingClient(auth=Auth("token"), session=session)
    received = []
    stream = await client.get(
        "https://stream.twitter.com/1.1/statuses/sample.json",
        StatusSampleParameters(language=("en",)),
        received.append,
    )
    await stream.wait()
    method, url, options = session.requests[0]
    assert method == "GET"
    assert url == "https://stream.twitter.com/1.1/statuses/sample.json"
    assert options["params"] == {"language": "en", "stall_warnings": "false"}
    assert options["headers"]["Authorization"] == "Bearer token"
    assert options["headers"]["User-Agent"] == "twitter-streaming-client"
    assert stream in client.streams
    assert len(received) == 1


@pytest.mark.asyncio
async def test_post_sends_form_body():
    session = FakeSession(FakeResponse())
    client = StreamingClient(session=session)
    await client.post("https://stream.twitter.com/1.1/statuses/filter.json", StatusFilters(track=("python",)))
    method, _, options = session.requests[0]
    assert method == "POST"
    assert options["data"] == {"track": "python", "stall_warnings": "false"}
    assert "Authorization" not in options["headers"]


@pytest.mark.asyncio
async def test_rejected_request_raises_streaming_error():
    response = FakeResponse(status=420, body="Enhance Your Calm")
    client = StreamingClient(session=FakeSession(response))
    with pytest.raises(StreamingError) as excinfo:
        await client.get("https://stream.twitter.com/1.1/statuses/sample.json")
    assert excinfo.value.status_code == 420
    assert excinfo.value.body == "Enhance Your Calm"
    assert response.released
    assert client.streams == set()


@pytest.mark.asyncio
async def test_connection_failure_raises_connection_error():
    session = FakeSession(error=aiohttp.ClientConnectionError("refused"))
    client = StreamingClient(session=session)
    with pytest.raises(StreamingConnectionError):
        await client.get("https://stream.twitter.com/1.1/statuses/sample.json")


@pytest.mark.asyncio
async def test_close_closes_streams_but_not_borrowed_session():
    session = FakeSession(FakeResponse([TWEET], block=True))
    client = StreamingClient(session=session)
    stream = await client.get("https://stream.twitter.com/1.1/statuses/sample.json", handler=print)
    await client.close()
    assert stream.closed
    assert client.streams == set()
    assert not session.closed


@pytest.mark.asyncio
async def test_pre_processing_drops_finished_streams():
    session = FakeSession(FakeResponse([TWEET]))
    client = StreamingClient(session=session)
    stream = await client.get("https://stream.twitter.com/1.1/statuses/sample.json", handler=lambda m: None)
    await stream.wait()
    client.pre_processing()
    assert client.streams == set()


@pytest.mark.asyncio
async def test_malformed_envelope_is_skipped():
    received = []
    lines = [b'{"delete": {"status": null}}\r\n', b'{"id": 3, "text": "x", "user": "bob"}\r\n', TWEET, TWEET]
    stream = TwitterStream(FakeResponse(lines), received.append).start()
    await stream.wait()
    assert [type(message) for message in received] == [Tweet, Tweet]
    assert stream.error is None


@pytest.mark.asyncio
async def test_unexpected_reader_failure_is_reported(monkeypatch):
    def explode(payload):
        raise RuntimeError("decoder bug")

    monkeypatch.setattr("twitter_client.streaming.parse_message", explode)
    stream = TwitterStream(FakeResponse([TWEET]), print).start()
    with pytest.raises(RuntimeError, match="decoder bug"):
        await stream.wait()
    assert isinstance(stream.error, RuntimeError)


@pytest.mark.asyncio
async def test_pre_processing_drops_released_streams_without_handler():
    response = FakeResponse([TWEET])
    client = StreamingClient(session=FakeSession(response))
    stream = await client.get("https://stream.twitter.com/1.1/statuses/sample.json")
    client.pre_processing()
    assert stream in client.streams
    response.close()
    client.pre_processing()
    assert client.streams == set()

from __future__ import annotations

from unittest.mock import AsyncMock, Mock

import pytest

from chainhttp import (
    AsyncLoggingHttpClient,
    LoggingHttpClient,
    Response,
    StubTransport,
    TransportError,
)
from chainhttp.events import CollectingEventSink, LoggerEventSink, RequestLoggedEvent

TEST_URL = "https://api.example.com/data"


def fake_clock(*values: float) -> Mock:
    return Mock(side_effect=list(values))


#######################################
#     Tests for LoggingHttpClient     #
#######################################


def test_logging_client_delegates_and_logs(mock_inner: Mock, sink: CollectingEventSink) -> None:
    mock_inner.request.return_value = Response(201, b"CREATED")
    client = LoggingHttpClient(mock_inner, sink=sink)

    response = client.request("POST", TEST_URL, {"foo": "bar"})

    assert response == Response(201, b"CREATED")
    mock_inner.request.assert_called_once_with("POST", TEST_URL, {"foo": "bar"})
    assert len(sink) == 1
    event = sink.events[0]
    assert isinstance(event, RequestLoggedEvent)
    assert event.status_code == 201
    assert event.method == "POST"
    assert event.url == TEST_URL
    assert event.elapsed_ms >= 0


def test_logging_client_returns_same_response_object(
    mock_inner: Mock, ok_response: Response, sink: CollectingEventSink
) -> None:
    assert LoggingHttpClient(mock_inner, sink=sink).request("GET", TEST_URL) is ok_response


def test_logging_client_elapsed_time_from_clock(mock_inner: Mock, sink: CollectingEventSink) -> None:
    client = LoggingHttpClient(mock_inner, sink=sink, clock=fake_clock(10.0, 10.0125))
    client.request("GET", TEST_URL)
    assert sink.events[0].elapsed_ms == pytest.approx(12.5)


def test_logging_client_elapsed_time_never_negative(
    mock_inner: Mock, sink: CollectingEventSink
) -> None:
    client = LoggingHttpClient(mock_inner, sink=sink, clock=fake_clock(5.0, 4.0))
    client.request("GET", TEST_URL)
    assert sink.events[0].elapsed_ms == 0.0


def test_logging_client_logs_server_error(mock_inner: Mock, sink: CollectingEventSink) -> None:
    mock_inner.request.return_value = Response(503, b"Service Unavailable")
    response = LoggingHttpClient(mock_inner, sink=sink).request("GET", TEST_URL)
    assert response.status_code == 503
    assert [event.status_code for event in sink.events] == [503]


def test_logging_client_one_event_per_call(mock_inner: Mock, sink: CollectingEventSink) -> None:
    client = LoggingHttpClient(mock_inner, sink=sink)
    for _ in range(3):
        client.request("GET", TEST_URL)
    assert len(sink) == 3


def test_logging_client_no_event_on_transport_error(
    mock_inner: Mock, sink: CollectingEventSink
) -> None:
    error = TransportError(method="GET", url=TEST_URL, message="connection refused")
    mock_inner.request.side_effect = error
    client = LoggingHttpClient(mock_inner, sink=sink)

    with pytest.raises(TransportError) as exc_info:
        client.request("GET", TEST_URL)

    assert exc_info.value is error
    assert len(sink) == 0


def test_logging_client_default_sink() -> None:
    client = LoggingHttpClient(StubTransport())
    assert isinstance(client._sink, LoggerEventSink)


def test_logging_client_repr() -> None:
    assert repr(LoggingHttpClient(StubTransport())) == (
        "LoggingHttpClient(StubTransport(status_code=200))"
    )


############################################
#     Tests for AsyncLoggingHttpClient     #
############################################


@pytest.mark.asyncio
async def test_async_logging_client_delegates_and_logs(
    mock_async_inner: Mock, ok_response: Response, sink: CollectingEventSink
) -> None:
    client = AsyncLoggingHttpClient(mock_async_inner, sink=sink, clock=fake_clock(1.0, 1.002))

    response = await client.request("DELETE", TEST_URL)

    assert response is ok_response
    mock_async_inner.request.assert_awaited_once_with("DELETE", TEST_URL, None)
    assert sink.events == [
        RequestLoggedEvent(
            status_code=200, method="DELETE", url=TEST_URL, elapsed_ms=sink.events[0].elapsed_ms
        )
    ]
    assert sink.events[0].elapsed_ms == pytest.approx(2.0)


@pytest.mark.asyncio
async def test_async_logging_client_no_event_on_transport_error(
    mock_async_inner: Mock, sink: CollectingEventSink
) -> None:
    mock_async_inner.request = AsyncMock(
        side_effect=TransportError(method="GET", url=TEST_URL, message="timed out")
    )
    client = AsyncLoggingHttpClient(mock_async_inner, sink=sink)

    with pytest.raises(TransportError, match=r"timed out"):
        await client.request("GET", TEST_URL)
    assert len(sink) == 0

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, Mock, patch

import pytest

from chainhttp import AsyncBaseHttpClient, BaseHttpClient, Response
from chainhttp.events import CollectingEventSink

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def sink() -> CollectingEventSink:
    """Create an in-memory event sink."""
    return CollectingEventSink()


@pytest.fixture
def ok_response() -> Response:
    return Response(200, b"OK")


@pytest.fixture
def mock_inner(ok_response: Response) -> Mock:
    """Create a mock synchronous capability returning a 200
    response."""
    return Mock(spec=BaseHttpClient, request=Mock(return_value=ok_response))


@pytest.fixture
def mock_async_inner(ok_response: Response) -> Mock:
    """Create a mock asynchronous capability returning a 200
    response."""
    return Mock(spec=AsyncBaseHttpClient, request=AsyncMock(return_value=ok_response))

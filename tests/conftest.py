"""Test fixtures for aiowithings."""

import re

import pytest
import aiohttp
from aioresponses import aioresponses

from aiowithings import WithingsClient

API_PATTERN = r"https://wbsapi\.withings\.net"


def api_url(path: str) -> re.Pattern:
    """Match a signed API URL regardless of its query string."""
    return re.compile(rf"^{API_PATTERN}{re.escape(path)}(\?.*)?$")


def sent_requests(mock: aioresponses) -> list[tuple[str, dict[str, str]]]:
    """Return (method, query) for every request recorded by the mock."""
    return [
        (method, dict(url.query))
        for (method, url), calls in mock.requests.items()
        for _ in calls
    ]


@pytest.fixture
def mock_aioresponse():
    """Mock aiohttp responses."""
    with aioresponses() as m:
        yield m


@pytest.fixture
async def session():
    """Create aiohttp ClientSession."""
    async with aiohttp.ClientSession() as session:
        yield session


@pytest.fixture
def client(session):
    """Authenticated client."""
    return WithingsClient(
        session,
        consumer_key="consumer-key",
        consumer_secret="consumer-secret",
        token="access-token",
        secret="access-secret",
    )

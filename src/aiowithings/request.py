"""Signed requests against the Withings API."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

from yarl import URL

from .auth import sign_url
from .const import (
    API_BASE_URL,
    AUTH_ERROR_CODES,
    DEFAULT_HEADERS,
    ERROR_MESSAGES,
    STATUS_OK,
)
from .exceptions import WithingsAPIError, WithingsAuthError, WithingsResponseError

if TYPE_CHECKING:
    import aiohttp

    from .auth import OAuthSession

_LOGGER = logging.getLogger(__name__)


class WithingsRequest:
    """Request handle signed for one OAuth session.

    Without a session, requests are signed with the consumer credentials
    only.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        consumer_key: str,
        consumer_secret: str,
        oauth_session: OAuthSession | None = None,
        headers: Mapping[str, str] | None = None,
        base_url: str = API_BASE_URL,
    ) -> None:
        self._session = session
        self._consumer_key = consumer_key
        self._consumer_secret = consumer_secret
        self._oauth_session = oauth_session
        self._headers = {**DEFAULT_HEADERS, **(headers or {})}
        self._base_url = base_url

    def signed_url(self, method: str, path: str, params: Mapping[str, Any]) -> str:
        """Build the full URL for path with params and OAuth signature."""
        url = f"{self._base_url}{path}"
        if params:
            url = f"{url}?{urlencode(params)}"
        token_kwargs: dict[str, Any] = {}
        if self._oauth_session is not None:
            token_kwargs["resource_owner_key"] = self._oauth_session.token
            token_kwargs["resource_owner_secret"] = self._oauth_session.secret
        return sign_url(
            self._consumer_key, self._consumer_secret, url, method, **token_kwargs
        )

    async def send(
        self, method: str, path: str, params: Mapping[str, Any] | None = None
    ) -> dict[str, Any]:
        """Send a signed request and return the response body.

        HTTP and connection errors from aiohttp propagate unchanged.

        Raises:
            WithingsAuthError: status code indicates rejected credentials
            WithingsAPIError: any other non-zero status code
            WithingsResponseError: response is not a JSON object
        """
        method = method.upper()
        url = self.signed_url(method, path, params or {})
        _LOGGER.debug("%s %s", method, path)

        async with self._session.request(
            method, URL(url, encoded=True), headers=self._headers
        ) as response:
            response.raise_for_status()
            result = await response.json(content_type=None)

        _LOGGER.debug("API response from %s: %s", path, str(result)[:500])

        if not isinstance(result, dict):
            raise WithingsResponseError(
                f"Expected a JSON object from {path}, got {type(result).__name__}"
            )

        status = result.get("status", STATUS_OK)
        if status != STATUS_OK:
            message = ERROR_MESSAGES.get(status, f"Unknown status {status}")
            if status in AUTH_ERROR_CODES:
                raise WithingsAuthError(message, status)
            raise WithingsAPIError(message, status)

        body = result.get("body")
        if isinstance(body, dict):
            return body
        return result

    async def get(
        self, path: str, params: Mapping[str, Any] | None = None
    ) -> dict[str, Any]:
        return await self.send("GET", path, params)

    async def post(
        self, path: str, params: Mapping[str, Any] | None = None
    ) -> dict[str, Any]:
        return await self.send("POST", path, params)

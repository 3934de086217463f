"""OAuth 1.0a authentication for Withings."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import parse_qsl

from oauthlib.oauth1 import SIGNATURE_HMAC, SIGNATURE_TYPE_QUERY, Client
from pydantic import BaseModel, ConfigDict
from yarl import URL

from .const import ACCESS_TOKEN_URL, AUTHORIZE_URL, DEFAULT_HEADERS, REQUEST_TOKEN_URL
from .exceptions import WithingsAuthError

if TYPE_CHECKING:
    import aiohttp

_LOGGER = logging.getLogger(__name__)


class OAuthSession(BaseModel):
    """Access token pair used to sign requests on behalf of a user."""

    model_config = ConfigDict(frozen=True)

    token: str
    secret: str

    @classmethod
    def derive(cls, token: str, secret: str) -> OAuthSession:
        """Wrap a stored access token and secret."""
        return cls(token=token, secret=secret)


class RequestToken(BaseModel):
    """Temporary credentials from the first leg of the OAuth dance."""

    token: str
    secret: str


class AccessToken(BaseModel):
    """Access credentials granted by the user."""

    token: str
    secret: str
    user_id: int | None = None

    def to_session(self) -> OAuthSession:
        return OAuthSession.derive(self.token, self.secret)


def sign_url(
    consumer_key: str,
    consumer_secret: str,
    url: str,
    method: str = "GET",
    **client_kwargs: Any,
) -> str:
    """Sign url with HMAC-SHA1, placing the OAuth parameters in the query.

    Extra keyword arguments go to oauthlib's Client (resource_owner_key,
    resource_owner_secret, callback_uri, verifier).
    """
    client = Client(
        consumer_key,
        client_secret=consumer_secret,
        signature_method=SIGNATURE_HMAC,
        signature_type=SIGNATURE_TYPE_QUERY,
        **client_kwargs,
    )
    signed_url, _headers, _body = client.sign(url, http_method=method.upper())
    return signed_url


class WithingsAuth:
    """Three-legged OAuth flow against the Withings account service."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        consumer_key: str,
        consumer_secret: str,
        user_agent: str | None = None,
    ) -> None:
        """Initialize auth.

        Args:
            session: aiohttp ClientSession
            consumer_key: Application consumer key
            consumer_secret: Application consumer secret
            user_agent: Value of the User-Agent header
        """
        self._session = session
        self._consumer_key = consumer_key
        self._consumer_secret = consumer_secret
        self._headers = dict(DEFAULT_HEADERS)
        if user_agent:
            self._headers["User-Agent"] = user_agent

    def _sign(self, url: str, **client_kwargs: Any) -> str:
        return sign_url(
            self._consumer_key, self._consumer_secret, url, "GET", **client_kwargs
        )

    async def _fetch_credentials(self, signed_url: str) -> dict[str, str]:
        """GET a token endpoint and parse its form-encoded answer."""
        async with self._session.get(
            URL(signed_url, encoded=True), headers=self._headers
        ) as response:
            text = await response.text()
            if response.status != 200:
                _LOGGER.debug(
                    "Token endpoint returned %d: %s", response.status, text[:200]
                )
                raise WithingsAuthError(
                    f"Token request failed: {response.status}", response.status
                )

        values = dict(parse_qsl(text))
        if not values.get("oauth_token") or not values.get("oauth_token_secret"):
            raise WithingsAuthError("Token response is missing oauth_token")
        return values

    async def request_token(self, callback_url: str) -> RequestToken:
        """Obtain temporary credentials.

        Args:
            callback_url: Where Withings redirects the user after authorizing
        """
        _LOGGER.debug("Requesting OAuth request token")
        values = await self._fetch_credentials(
            self._sign(REQUEST_TOKEN_URL, callback_uri=callback_url)
        )
        return RequestToken(
            token=values["oauth_token"], secret=values["oauth_token_secret"]
        )

    def authorize_url(self, request_token: RequestToken) -> str:
        """Return the signed URL the user visits to grant access."""
        return self._sign(
            AUTHORIZE_URL,
            resource_owner_key=request_token.token,
            resource_owner_secret=request_token.secret,
        )

    async def access_token(
        self, request_token: RequestToken, verifier: str
    ) -> AccessToken:
        """Exchange an authorized request token for access credentials.

        Args:
            request_token: Token returned by request_token()
            verifier: oauth_verifier passed to the callback URL
        """
        _LOGGER.debug("Exchanging request token for access token")
        values = await self._fetch_credentials(
            self._sign(
                ACCESS_TOKEN_URL,
                resource_owner_key=request_token.token,
                resource_owner_secret=request_token.secret,
                verifier=verifier,
            )
        )
        user_id = values.get("userid")
        return AccessToken(
            token=values["oauth_token"],
            secret=values["oauth_token_secret"],
            user_id=int(user_id) if user_id else None,
        )

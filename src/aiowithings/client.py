"""Async client for the Withings API."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from .auth import AccessToken, OAuthSession, RequestToken, WithingsAuth
from .config import ClientConfig
from .const import (
    MEASURE_PATH,
    MEASURE_V2_PATH,
    NOTIFY_PATH,
    SLEEP_V2_PATH,
    USER_AGENT_PREFIX,
    VERSION,
)
from .exceptions import ClientConfigurationError, WithingsResponseError
from .models import (
    Activity,
    MeasurementGroup,
    Notification,
    Response,
    SleepSeries,
    SleepSummary,
    WithingsModel,
)
from .request import WithingsRequest
from .utils import normalize_date_params

if TYPE_CHECKING:
    import aiohttp

_LOGGER = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=WithingsModel)


class WithingsClient:
    """Async Withings API client.

    An authenticated client is created with a stored access token and
    secret. Without them the client can only run the OAuth flow that
    obtains them.

    Example:
        client = WithingsClient(
            session,
            consumer_key=key,
            consumer_secret=secret,
            token=access_token,
            secret=access_token_secret,
        )
        activities = await client.activities(user_id, startdateymd=date(2024, 1, 1))
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        config: Mapping[str, Any] | ClientConfig | None = None,
        *,
        configure: Callable[[ClientConfig], None] | None = None,
        version: str = VERSION,
        **options: Any,
    ) -> None:
        """Initialize client.

        Args:
            session: aiohttp ClientSession
            config: Mapping or ClientConfig with consumer_key,
                consumer_secret, token, secret and user_agent
            configure: Called with the config before the session is derived
            version: Version embedded in the default User-Agent
            **options: Same keys as config, taking precedence
        """
        self._session = session
        self._version = version
        self.config = ClientConfig.from_options(config, **options)

        if configure is not None:
            configure(self.config)

        if self.config.unknown_options:
            _LOGGER.debug(
                "Ignoring unknown client options: %s",
                ", ".join(self.config.unknown_options),
            )

        # Derived once; later changes to token/secret do not create a session
        self._oauth_session: OAuthSession | None = None
        if self.config.has_access_token:
            self._oauth_session = OAuthSession.derive(
                self.config.token, self.config.secret
            )
        self._default_user_agent: str | None = None

    @property
    def oauth_session(self) -> OAuthSession | None:
        """Access token pair used for signing, if the client is authenticated."""
        return self._oauth_session

    @property
    def authenticated(self) -> bool:
        return self._oauth_session is not None

    @property
    def user_agent(self) -> str:
        """Configured User-Agent, or the library default."""
        if self.config.user_agent:
            return self.config.user_agent
        if self._default_user_agent is None:
            self._default_user_agent = f"{USER_AGENT_PREFIX}/{self._version}"
        return self._default_user_agent

    @user_agent.setter
    def user_agent(self, value: str | None) -> None:
        self.config.user_agent = value

    def _check_configuration(self) -> None:
        if not self.config.has_consumer:
            raise ClientConfigurationError("Missing consumer_key or consumer_secret")

    # ========== OAuth Flow ==========

    @property
    def auth(self) -> WithingsAuth:
        """OAuth helper bound to this client's consumer credentials."""
        self._check_configuration()
        return WithingsAuth(
            self._session,
            self.config.consumer_key,
            self.config.consumer_secret,
            self.user_agent,
        )

    async def request_token(self, callback_url: str) -> RequestToken:
        return await self.auth.request_token(callback_url)

    def authorize_url(self, request_token: RequestToken) -> str:
        return self.auth.authorize_url(request_token)

    async def access_token(
        self, request_token: RequestToken, verifier: str
    ) -> AccessToken:
        return await self.auth.access_token(request_token, verifier)

    # ========== Dispatch ==========

    async def dispatch(
        self,
        http_method: str,
        path: str,
        model: type[ModelT],
        key: str | None,
        params: Mapping[str, Any],
    ) -> ModelT | list[ModelT]:
        """Send a signed request and map the response to model instances.

        Args:
            http_method: GET or POST
            path: API path, e.g. /v2/measure
            model: Model class built from the response
            key: Response field holding the list of results, or None for a
                single result
            params: Query parameters

        Returns:
            A single instance when key is None. Otherwise a list: one
            instance per element under key, or the whole response as the
            only element when key is missing from it.

        Raises:
            ClientConfigurationError: consumer credentials are missing
            WithingsResponseError: the value under key is not a list
        """
        self._check_configuration()

        params = normalize_date_params(params)
        request = WithingsRequest(
            self._session,
            self.config.consumer_key,
            self.config.consumer_secret,
            self._oauth_session,
            {"User-Agent": self.user_agent},
        )
        response = await request.send(http_method, path, params)

        if key is None:
            return model.model_validate(response)

        if key not in response:
            _LOGGER.debug("Key %s missing from %s response, using whole body", key, path)
            return [model.model_validate(response)]

        elements = response[key]
        if not isinstance(elements, list):
            raise WithingsResponseError(
                f"Expected a list under {key!r} in {path} response, "
                f"got {type(elements).__name__}"
            )
        return [model.model_validate(element) for element in elements]

    # ========== Measure Group ==========

    async def activities(self, user_id: int, **options: Any) -> list[Activity]:
        """Get daily activity summaries for a user."""
        return await self.dispatch(
            "GET",
            MEASURE_V2_PATH,
            Activity,
            "activities",
            {"action": "getactivity", "userid": user_id, **options},
        )

    async def body_measurements(
        self, user_id: int, **options: Any
    ) -> list[MeasurementGroup]:
        """Get body measurements taken by Withings devices."""
        return await self.dispatch(
            "GET",
            MEASURE_PATH,
            MeasurementGroup,
            "measuregrps",
            {"action": "getmeas", "userid": user_id, **options},
        )

    # ========== Sleep Group ==========

    async def sleep_series(self, user_id: int, **options: Any) -> list[SleepSeries]:
        """Get sleep state intervals for a user."""
        return await self.dispatch(
            "GET",
            SLEEP_V2_PATH,
            SleepSeries,
            "series",
            {"action": "get", "userid": user_id, **options},
        )

    async def sleep_summary(self, user_id: int, **options: Any) -> list[SleepSummary]:
        """Get nightly sleep summaries.

        The API derives the user from the access token, so user_id is not
        sent.
        """
        return await self.dispatch(
            "GET",
            SLEEP_V2_PATH,
            SleepSummary,
            "series",
            {"action": "getsummary", **options},
        )

    # ========== Notification Group ==========

    async def create_notification(self, user_id: int, **options: Any) -> Response:
        """Subscribe a callback URL to new data for a user.

        Pass callbackurl, comment and appli as options.
        """
        return await self.dispatch(
            "POST", NOTIFY_PATH, Response, None, {"action": "subscribe", **options}
        )

    async def get_notification(self, user_id: int, **options: Any) -> Notification:
        """Get a single notification subscription."""
        return await self.dispatch(
            "GET", NOTIFY_PATH, Notification, None, {"action": "get", **options}
        )

    async def list_notifications(
        self, user_id: int, **options: Any
    ) -> list[Notification]:
        """List notification subscriptions."""
        return await self.dispatch(
            "GET",
            NOTIFY_PATH,
            Notification,
            "profiles",
            {"action": "list", **options},
        )

    async def revoke_notification(self, user_id: int, **options: Any) -> Response:
        """Revoke a notification subscription."""
        return await self.dispatch(
            "GET", NOTIFY_PATH, Response, None, {"action": "revoke", **options}
        )

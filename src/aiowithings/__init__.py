"""Async Python client for the Withings API."""

from .auth import AccessToken, OAuthSession, RequestToken, WithingsAuth
from .client import WithingsClient
from .config import ClientConfig
from .const import VERSION
from .exceptions import (
    ClientConfigurationError,
    WithingsAPIError,
    WithingsAuthError,
    WithingsError,
    WithingsResponseError,
)
from .models import (
    Activity,
    Measure,
    MeasurementGroup,
    MeasureType,
    Notification,
    NotificationAppli,
    Response,
    SleepSeries,
    SleepState,
    SleepSummary,
    SleepSummaryData,
)
from .request import WithingsRequest
from .utils import normalize_date_params

__version__ = VERSION

__all__ = [
    "AccessToken",
    "Activity",
    "ClientConfig",
    "ClientConfigurationError",
    "Measure",
    "MeasureType",
    "MeasurementGroup",
    "Notification",
    "NotificationAppli",
    "OAuthSession",
    "RequestToken",
    "Response",
    "SleepSeries",
    "SleepState",
    "SleepSummary",
    "SleepSummaryData",
    "WithingsAPIError",
    "WithingsAuth",
    "WithingsAuthError",
    "WithingsClient",
    "WithingsError",
    "WithingsRequest",
    "WithingsResponseError",
    "normalize_date_params",
]

"""Constants for aiowithings."""

VERSION = "0.1.0"
USER_AGENT_PREFIX = "aiowithings"

# Withings API URLs
API_BASE_URL = "https://wbsapi.withings.net"

# OAuth 1.0a URLs
OAUTH_BASE_URL = "https://oauth.withings.com/account"
REQUEST_TOKEN_URL = f"{OAUTH_BASE_URL}/request_token"
AUTHORIZE_URL = f"{OAUTH_BASE_URL}/authorize"
ACCESS_TOKEN_URL = f"{OAUTH_BASE_URL}/access_token"

# API paths
MEASURE_V2_PATH = "/v2/measure"
MEASURE_PATH = "/measure"
SLEEP_V2_PATH = "/v2/sleep"
NOTIFY_PATH = "/notify"

# Default headers
DEFAULT_HEADERS = {
    "Accept": "application/json",
}

# Parameters sent as Unix epoch seconds
EPOCH_DATE_PARAMS = ("startdate", "enddate", "lastupdate")

# Parameters sent as YYYY-MM-DD
YMD_DATE_PARAMS = ("startdateymd", "enddateymd", "date")

# Status codes returned in the response envelope
STATUS_OK = 0

ERROR_MESSAGES = {
    100: "The hash is missing, invalid, or does not match the provided email",
    247: "The userid provided is absent, or incorrect",
    250: "The provided userid and/or Oauth credentials do not match",
    283: "Token is invalid or doesn't exist",
    286: "No such subscription was found",
    293: "The callback URL is either absent or incorrect",
    294: "No such subscription could be deleted",
    304: "The comment is either absent or incorrect",
    305: "Too many notifications are already set",
    342: "The signature (using Oauth) is invalid",
    343: "Wrong Notification Callback Url don't exist",
    601: "Too Many Request",
    2554: "Wrong action or wrong webservice",
    2555: "An unknown error occurred",
    2556: "Service is not defined",
}

AUTH_ERROR_CODES = frozenset({100, 247, 250, 283, 342})

"""Exceptions for aiowithings."""

from __future__ import annotations


class WithingsError(Exception):
    """Base exception for aiowithings."""


class ClientConfigurationError(WithingsError):
    """Client is missing its consumer key or consumer secret."""


class WithingsAPIError(WithingsError):
    """Withings API returned a non-zero status."""

    def __init__(self, message: str, status: int | None = None) -> None:
        """Initialize error.

        Args:
            message: Human readable message
            status: Status code from the response envelope, if any
        """
        super().__init__(message)
        self.status = status


class WithingsAuthError(WithingsAPIError):
    """Credentials were rejected by Withings."""


class WithingsResponseError(WithingsError):
    """Response did not have the expected shape."""

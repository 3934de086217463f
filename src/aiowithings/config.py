"""Client configuration for aiowithings."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict


class ClientConfig(BaseModel):
    """Consumer and access credentials for a WithingsClient.

    Unknown keys are kept in model_extra and never used.
    """

    model_config = ConfigDict(extra="allow")

    consumer_key: str | None = None
    consumer_secret: str | None = None
    token: str | None = None
    secret: str | None = None
    user_agent: str | None = None

    @classmethod
    def from_options(
        cls,
        options: Mapping[str, Any] | ClientConfig | None = None,
        **kwargs: Any,
    ) -> ClientConfig:
        """Build a config from a mapping, an existing config and/or keywords.

        Keyword arguments win over the mapping.
        """
        if isinstance(options, ClientConfig):
            options = options.model_dump()
        return cls.model_validate({**(options or {}), **kwargs})

    @property
    def has_consumer(self) -> bool:
        return bool(self.consumer_key) and bool(self.consumer_secret)

    @property
    def has_access_token(self) -> bool:
        return bool(self.token) and bool(self.secret)

    @property
    def unknown_options(self) -> list[str]:
        return sorted(self.model_extra or {})

"""Tests for client construction and configuration."""

import logging

from aiowithings import ClientConfig, OAuthSession, WithingsClient
from aiowithings.const import VERSION


async def test_session_derived_from_token_and_secret(session):
    client = WithingsClient(
        session,
        {"consumer_key": "k", "consumer_secret": "s", "token": "t", "secret": "x"},
    )
    assert client.authenticated
    assert client.oauth_session == OAuthSession(token="t", secret="x")


async def test_no_session_with_only_token(session):
    client = WithingsClient(session, consumer_key="k", consumer_secret="s", token="t")
    assert not client.authenticated
    assert client.oauth_session is None


async def test_no_session_with_only_secret(session):
    client = WithingsClient(session, consumer_key="k", consumer_secret="s", secret="x")
    assert client.oauth_session is None


async def test_configure_callback(session):
    def configure(config: ClientConfig) -> None:
        config.consumer_key = "k"
        config.consumer_secret = "s"
        config.token = "t"
        config.secret = "x"

    client = WithingsClient(session, configure=configure)
    assert client.config.consumer_key == "k"
    assert client.oauth_session == OAuthSession(token="t", secret="x")


async def test_session_not_rederived_after_construction(session):
    client = WithingsClient(session, consumer_key="k", consumer_secret="s")
    client.config.token = "t"
    client.config.secret = "x"
    assert client.oauth_session is None


async def test_keyword_options_override_mapping(session):
    client = WithingsClient(session, {"consumer_key": "a"}, consumer_key="b")
    assert client.config.consumer_key == "b"


async def test_config_instance_accepted(session):
    config = ClientConfig(consumer_key="k", consumer_secret="s")
    client = WithingsClient(session, config)
    assert client.config.has_consumer


async def test_unknown_options_kept_but_logged(session, caplog):
    with caplog.at_level(logging.DEBUG, logger="aiowithings.client"):
        client = WithingsClient(session, {"consumer_key": "k", "foo": "bar"})
    assert client.config.unknown_options == ["foo"]
    assert "foo" in caplog.text


async def test_default_user_agent(session):
    client = WithingsClient(session)
    assert client.user_agent == f"aiowithings/{VERSION}"


async def test_default_user_agent_uses_injected_version(session):
    client = WithingsClient(session, version="9.9.9")
    assert client.user_agent == "aiowithings/9.9.9"


async def test_configured_user_agent(session):
    client = WithingsClient(session, user_agent="MyApp/1.0")
    assert client.user_agent == "MyApp/1.0"
    client.user_agent = "MyApp/2.0"
    assert client.user_agent == "MyApp/2.0"

# Twitter Ads API Client
# File: config.py
# Version: v2

"""Configuration loading for the Twitter Ads API client."""

from __future__ import annotations

from dataclasses import dataclass
import os

API_VERSION = "5"

DEFAULT_DOMAIN = "https://ads-api.twitter.com"
SANDBOX_DOMAIN = "https://ads-api-sandbox.twitter.com"

DEFAULT_TIMEOUT = 60


def _parse_bool_env(name: str, default: bool = False) -> bool:
    """Parse a boolean-like environment variable.

    Accepts 1/0, true/false, yes/no, on/off (case-insensitive).
    """
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "on"}


def _parse_int_env(
    name: str,
    default: int,
    min_value: int | None = None,
    max_value: int | None = None,
) -> int:
    """Parse an int environment variable with clamping and safe fallback."""
    raw = os.getenv(name)
    if raw is None or not str(raw).strip():
        value = int(default)
    else:
        try:
            value = int(str(raw).strip())
        except ValueError:
            value = int(default)

    if min_value is not None and value < min_value:
        value = min_value
    if max_value is not None and value > max_value:
        value = max_value

    return value


@dataclass
class ClientConfig:
    """Credentials and transport options for talking to the Ads API.

    The four OAuth 1.0a values identify the app (consumer) and the user
    (access token) on whose behalf requests are signed.
    """

    consumer_key: str | None
    consumer_secret: str | None
    access_token: str | None
    access_token_secret: str | None

    sandbox: bool = False
    trace: bool = False

    timeout_seconds: int = DEFAULT_TIMEOUT
    verify_tls: bool = True

    @property
    def credentials_complete(self) -> bool:
        return all(
            (
                self.consumer_key,
                self.consumer_secret,
                self.access_token,
                self.access_token_secret,
            )
        )

    @property
    def domain(self) -> str:
        """Base URL implied by the sandbox flag."""
        return SANDBOX_DOMAIN if self.sandbox else DEFAULT_DOMAIN

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Create configuration from environment variables."""
        return cls(
            consumer_key=os.getenv("TWITTER_ADS_CONSUMER_KEY"),
            consumer_secret=os.getenv("TWITTER_ADS_CONSUMER_SECRET"),
            access_token=os.getenv("TWITTER_ADS_ACCESS_TOKEN"),
            access_token_secret=os.getenv("TWITTER_ADS_ACCESS_TOKEN_SECRET"),
            sandbox=_parse_bool_env("TWITTER_ADS_SANDBOX", default=False),
            trace=_parse_bool_env("TWITTER_ADS_TRACE", default=False),
            timeout_seconds=_parse_int_env(
                "TWITTER_ADS_TIMEOUT_SECONDS",
                default=DEFAULT_TIMEOUT,
                min_value=1,
                max_value=600,
            ),
            verify_tls=_parse_bool_env("TWITTER_ADS_VERIFY_TLS", default=True),
        )

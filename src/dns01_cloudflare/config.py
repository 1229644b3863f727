"""Configuration loading and validation from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dns01_cloudflare.exceptions import ConfigError

CLOUDFLARE_API_URL = "https://api.cloudflare.com/client/v4"
_DEFAULT_HTTP_TIMEOUT = 30


@dataclass(frozen=True)
class AppConfig:
    """Application configuration loaded from environment variables."""

    cloudflare_email: str = ""
    cloudflare_api_key: str = ""
    cloudflare_api_token: str = ""
    api_url: str = CLOUDFLARE_API_URL
    http_timeout: int = _DEFAULT_HTTP_TIMEOUT


def load_config() -> AppConfig:
    """Load configuration from environment variables.

    Credentials are read as-is; choosing between key and token is left to
    :func:`dns01_cloudflare.credentials.validate`.
    """
    raw_timeout = os.environ.get("CLOUDFLARE_HTTP_TIMEOUT", str(_DEFAULT_HTTP_TIMEOUT))
    try:
        http_timeout = int(raw_timeout)
    except ValueError:
        raise ConfigError(f"CLOUDFLARE_HTTP_TIMEOUT must be an integer, got: {raw_timeout!r}")
    if http_timeout < 1:
        raise ConfigError(f"CLOUDFLARE_HTTP_TIMEOUT must be a positive integer, got: {http_timeout}")

    return AppConfig(
        cloudflare_email=os.environ.get("CLOUDFLARE_EMAIL", ""),
        cloudflare_api_key=os.environ.get("CLOUDFLARE_API_KEY", ""),
        cloudflare_api_token=os.environ.get("CLOUDFLARE_API_TOKEN", ""),
        api_url=os.environ.get("CLOUDFLARE_API_URL") or CLOUDFLARE_API_URL,
        http_timeout=http_timeout,
    )

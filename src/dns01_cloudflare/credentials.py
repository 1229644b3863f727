"""Cloudflare credential validation."""

from __future__ import annotations

from dataclasses import dataclass

from dns01_cloudflare.exceptions import ConfigError


@dataclass(frozen=True)
class EmailKeyPair:
    """Global API key authentication, bound to the account email."""

    email: str
    api_key: str

    def auth_headers(self) -> dict[str, str]:
        return {"X-Auth-Email": self.email, "X-Auth-Key": self.api_key}


@dataclass(frozen=True)
class APIToken:
    """Scoped API token authentication."""

    token: str

    def auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


Credentials = EmailKeyPair | APIToken


def validate(email: str | None, api_key: str | None, api_token: str | None) -> Credentials:
    """Select the credential variant for the given authentication material.

    Args:
        email: Account email address, required with an API key.
        api_key: Global API key.
        api_token: Scoped API token.

    Returns:
        ``EmailKeyPair`` when an API key is given, ``APIToken`` otherwise.

    Raises:
        ConfigError: If both or neither of key and token are given, or the key
            comes without an email address.
    """
    if api_key and api_token:
        raise ConfigError("the Cloudflare API key and API token cannot be both present simultaneously")
    if not api_key and not api_token:
        raise ConfigError("no Cloudflare credential has been given (can be either an API key or an API token)")

    if api_key:
        if not email:
            raise ConfigError("the Cloudflare email address is required when using an API key")
        return EmailKeyPair(email=email, api_key=api_key)
    return APIToken(token=api_token)

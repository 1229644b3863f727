"""DNS provider factory: build the Cloudflare provider from configuration."""

from __future__ import annotations

from dns01_cloudflare.config import AppConfig
from dns01_cloudflare.credentials import validate
from dns01_cloudflare.dns.base import DnsProvider
from dns01_cloudflare.dns.cloudflare import CloudflareDnsProvider


def get_dns_provider(config: AppConfig) -> DnsProvider:
    """Instantiate the Cloudflare DNS provider.

    Credentials are validated before any client is built, so a bad
    combination fails without touching the network.

    Args:
        config: Application configuration.

    Returns:
        A configured DnsProvider instance.

    Raises:
        ConfigError: If the configured credentials are invalid.
    """
    credentials = validate(
        config.cloudflare_email,
        config.cloudflare_api_key,
        config.cloudflare_api_token,
    )
    return CloudflareDnsProvider(
        credentials=credentials,
        base_url=config.api_url,
        timeout=config.http_timeout,
    )

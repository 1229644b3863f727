"""Exceptions raised while resolving zones and managing challenge records."""

from __future__ import annotations

from typing import Any


class Dns01Error(Exception):
    """Base exception for all dns01_cloudflare errors."""


class ConfigError(Dns01Error, ValueError):
    """Invalid local configuration, detected before any network call."""


class ApiRequestError(Dns01Error):
    """A Cloudflare API request failed at the transport or provider level.

    The message mirrors the API response: one ``Error: <code>: <message>`` line
    per entry of the envelope's ``errors`` array, so provider text is kept verbatim.
    """

    def __init__(
        self,
        method: str,
        uri: str,
        errors: list[dict[str, Any]] | None = None,
        status_code: int | None = None,
        detail: str | None = None,
    ):
        self.method = method
        self.uri = uri
        self.errors = errors or []
        self.status_code = status_code
        self.detail = detail
        super().__init__(self._format())

    def _format(self) -> str:
        lines = [f'while querying the Cloudflare API for {self.method} "{self.uri}"']
        for error in self.errors:
            lines.append(f"\t Error: {error.get('code')}: {error.get('message')}")
        if self.detail:
            lines.append(f"\t Error: {self.detail}")
        if len(lines) == 1 and self.status_code is not None:
            lines.append(f"\t Error: HTTP {self.status_code}")
        return "\n".join(lines)


class ZoneError(Dns01Error):
    """Base class for zone resolution failures."""

    def __init__(self, message: str, fqdn: str):
        self.fqdn = fqdn
        super().__init__(message)


class ZoneLookupError(ZoneError):
    """A zone listing request failed; the search was aborted."""

    def __init__(self, fqdn: str, suffix: str, cause: Exception):
        self.suffix = suffix
        super().__init__(
            f"while attempting to find zones for domain {fqdn} (querying {suffix!r}): {cause}",
            fqdn,
        )


class AmbiguousZoneError(ZoneError):
    """More than one zone was listed for an exact name."""

    def __init__(self, fqdn: str, suffix: str, count: int):
        self.suffix = suffix
        self.count = count
        super().__init__(
            f"found {count} zones named {suffix!r} while resolving {fqdn}, expected at most one",
            fqdn,
        )


class ZoneNotFoundError(ZoneError):
    """No managed zone is authoritative for the FQDN."""

    def __init__(self, fqdn: str):
        super().__init__(f"no Cloudflare zone found for domain {fqdn}", fqdn)


class ProviderRequestError(Dns01Error):
    """The provider rejected a record create, list or delete request."""

"""Abstract base class for DNS providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Self


class DnsProvider(ABC):
    """Interface for DNS providers that manage ACME DNS-01 challenge TXT records."""

    def close(self) -> None:
        """Release resources. Override in subclasses that hold open connections."""

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    @abstractmethod
    def present(self, domain: str, fqdn: str, value: str) -> None:
        """Publish the TXT record for a DNS-01 challenge.

        Args:
            domain: Certificate domain (e.g. "example.com").
            fqdn: Dot-terminated record name (e.g. "_acme-challenge.example.com.").
            value: TXT record value (the ACME key authorization digest).
        """

    @abstractmethod
    def cleanup(self, domain: str, fqdn: str, value: str) -> None:
        """Retract the TXT record once the challenge is validated.

        Must succeed when the record is already gone.

        Args:
            domain: Certificate domain (e.g. "example.com").
            fqdn: Dot-terminated record name (e.g. "_acme-challenge.example.com.").
            value: TXT record value to remove; other values are left alone.
        """

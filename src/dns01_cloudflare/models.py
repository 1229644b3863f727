"""Data classes for zones, challenge records and challenge requests."""

from __future__ import annotations

from dataclasses import dataclass

CHALLENGE_TTL = 120


@dataclass(frozen=True)
class DnsZone:
    """A Cloudflare-managed authoritative zone."""

    id: str
    name: str

    @classmethod
    def from_dict(cls, data: dict) -> DnsZone:
        return cls(id=data["id"], name=data["name"])


@dataclass(frozen=True)
class TxtRecord:
    """A DNS-01 challenge TXT record within a zone."""

    zone_id: str
    name: str
    value: str
    id: str | None = None
    ttl: int = CHALLENGE_TTL

    def to_payload(self) -> dict:
        """Body of a record creation request."""
        return {
            "type": "TXT",
            "name": self.name,
            "content": self.value,
            "ttl": self.ttl,
        }

    def matches(self, value: str) -> bool:
        # TXT content may come back wrapped in quotes
        return self.value == value or self.value == f'"{value}"'

    @classmethod
    def from_dict(cls, zone_id: str, data: dict) -> TxtRecord:
        return cls(
            zone_id=zone_id,
            name=data["name"],
            value=data.get("content", ""),
            id=data.get("id"),
            ttl=data.get("ttl", CHALLENGE_TTL),
        )


@dataclass(frozen=True)
class DnsChallengeInfo:
    """DNS-01 challenge details for a single domain."""

    domain: str
    fqdn: str
    value: str

    def to_dict(self) -> dict:
        return {
            "domain": self.domain,
            "fqdn": self.fqdn,
            "value": self.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> DnsChallengeInfo:
        return cls(
            domain=data["domain"],
            fqdn=data["fqdn"],
            value=data["value"],
        )

"""Cloudflare DNS provider: publish and retract challenge TXT records."""

from __future__ import annotations

import logging
from urllib.parse import urlencode

from dns01_cloudflare.config import CLOUDFLARE_API_URL
from dns01_cloudflare.credentials import Credentials
from dns01_cloudflare.dns.base import DnsProvider
from dns01_cloudflare.dns.client import ApiClient, CloudflareClient
from dns01_cloudflare.dns.util import un_fqdn
from dns01_cloudflare.dns.zones import find_nearest_zone_for_fqdn
from dns01_cloudflare.exceptions import ApiRequestError, ProviderRequestError, ZoneError
from dns01_cloudflare.models import DnsZone, TxtRecord

logger = logging.getLogger(__name__)

_RECORDS_PER_PAGE = 1000


class CloudflareDnsProvider(DnsProvider):
    """DNS provider backed by the Cloudflare API.

    Holds no state between calls besides the API client: the owning zone is
    resolved again for every :meth:`present` and :meth:`cleanup`.
    """

    def __init__(
        self,
        credentials: Credentials,
        base_url: str = CLOUDFLARE_API_URL,
        timeout: int = 30,
        _client: ApiClient | None = None,
    ) -> None:
        self._client = _client or CloudflareClient(credentials, base_url=base_url, timeout=timeout)

    def _resolve_zone(self, operation: str, fqdn: str) -> DnsZone:
        try:
            return find_nearest_zone_for_fqdn(self._client, fqdn)
        except ZoneError as err:
            err.add_note(f"while {operation} the TXT record {fqdn}")
            raise

    def _find_txt_records(self, zone: DnsZone, fqdn: str, value: str) -> list[TxtRecord]:
        """List TXT records named ``fqdn`` in the zone that carry ``value``."""
        name = un_fqdn(fqdn)
        query = urlencode({"per_page": _RECORDS_PER_PAGE, "type": "TXT", "name": name})
        try:
            results = self._client.make_request("GET", f"/zones/{zone.id}/dns_records?{query}") or []
        except ApiRequestError as err:
            raise ProviderRequestError(f"failed to list TXT records {name} in zone {zone.name}: {err}") from err
        records = [TxtRecord.from_dict(zone.id, r) for r in results]
        return [r for r in records if r.name.lower() == name.lower() and r.matches(value)]

    def present(self, domain: str, fqdn: str, value: str) -> None:
        zone = self._resolve_zone("presenting", fqdn)
        if self._find_txt_records(zone, fqdn, value):
            logger.info("TXT record %s already present in Cloudflare zone %s", fqdn, zone.name)
            return

        record = TxtRecord(zone_id=zone.id, name=un_fqdn(fqdn), value=value)
        try:
            self._client.make_request("POST", f"/zones/{zone.id}/dns_records", record.to_payload())
        except ApiRequestError as err:
            raise ProviderRequestError(f"failed to create TXT record {record.name} in zone {zone.name}: {err}") from err
        logger.info("Created TXT record %s in Cloudflare zone %s for %s", fqdn, zone.name, domain)

    def cleanup(self, domain: str, fqdn: str, value: str) -> None:
        zone = self._resolve_zone("cleaning up", fqdn)
        records = self._find_txt_records(zone, fqdn, value)
        if not records:
            logger.warning("TXT record %s not found in Cloudflare, skipping delete", fqdn)
            return

        for record in records:
            try:
                self._client.make_request("DELETE", f"/zones/{zone.id}/dns_records/{record.id}")
            except ApiRequestError as err:
                raise ProviderRequestError(
                    f"failed to delete TXT record {record.name} ({record.id}) in zone {zone.name}: {err}"
                ) from err
        logger.info("Deleted %d TXT record(s) %s from Cloudflare zone %s for %s", len(records), fqdn, zone.name, domain)

    def close(self) -> None:
        """Close the underlying API client."""
        close = getattr(self._client, "close", None)
        if close is not None:
            close()

"""Resolve the Cloudflare zone that owns a domain name."""

from __future__ import annotations

import logging

from dns01_cloudflare.dns.client import ApiClient
from dns01_cloudflare.dns.util import candidate_suffixes
from dns01_cloudflare.exceptions import (
    AmbiguousZoneError,
    ApiRequestError,
    ZoneLookupError,
    ZoneNotFoundError,
)
from dns01_cloudflare.models import DnsZone

logger = logging.getLogger(__name__)


def find_nearest_zone_for_fqdn(client: ApiClient, fqdn: str) -> DnsZone:
    """Find the most specific managed zone for an FQDN.

    Each candidate suffix is looked up with an exact-name zone listing, from
    the full name down to its two-label parent. The first suffix that lists a
    zone wins. A failed request aborts the search rather than being treated
    as "no zone here", so e.g. an expired token fails at the first query.

    Args:
        client: API client used for ``GET /zones?name=<suffix>``.
        fqdn: Domain name, with or without the trailing dot.

    Returns:
        The zone whose name is the longest suffix of ``fqdn``.

    Raises:
        ZoneLookupError: If a listing request failed.
        AmbiguousZoneError: If a listing returned more than one zone.
        ZoneNotFoundError: If no suffix is a managed zone.
    """
    for suffix in candidate_suffixes(fqdn):
        logger.debug("Looking up Cloudflare zone %s for %s", suffix, fqdn)
        try:
            zones = client.make_request("GET", f"/zones?name={suffix}") or []
        except ApiRequestError as err:
            raise ZoneLookupError(fqdn, suffix, err) from err

        if len(zones) > 1:
            raise AmbiguousZoneError(fqdn, suffix, len(zones))
        if zones:
            zone = DnsZone.from_dict(zones[0])
            logger.debug("Resolved %s to Cloudflare zone %s (%s)", fqdn, zone.name, zone.id)
            return zone

    raise ZoneNotFoundError(fqdn)

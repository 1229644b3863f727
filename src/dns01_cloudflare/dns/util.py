"""DNS name utility functions."""

from __future__ import annotations

from collections.abc import Iterator

_CHALLENGE_LABEL = "_acme-challenge"


def un_fqdn(name: str) -> str:
    """Strip a single trailing dot from a domain name."""
    return name.removesuffix(".")


def challenge_fqdn(domain: str) -> str:
    """Return the dot-terminated DNS-01 record name for a certificate domain.

    A wildcard domain shares the record of its base domain, so
    ``*.example.com`` and ``example.com`` both map to
    ``_acme-challenge.example.com.``.
    """
    base = un_fqdn(domain).removeprefix("*.")
    return f"{_CHALLENGE_LABEL}.{base}."


def candidate_suffixes(fqdn: str) -> Iterator[str]:
    """Yield the zone names that could own ``fqdn``, most specific first.

    The bare top-level domain is never yielded, so a name with fewer than two
    labels has no candidates.

    Example:
        ``_acme-challenge.sub.example.com.`` yields
        ``_acme-challenge.sub.example.com``, ``sub.example.com``, ``example.com``.
    """
    labels = un_fqdn(fqdn).split(".")
    for i in range(len(labels) - 1):
        yield ".".join(labels[i:])

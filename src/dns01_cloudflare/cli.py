"""Command-line entry point and challenge handlers."""

from __future__ import annotations

import argparse
import logging
import sys

from dns01_cloudflare.config import load_config
from dns01_cloudflare.credentials import validate
from dns01_cloudflare.dns import get_dns_provider
from dns01_cloudflare.dns.client import CloudflareClient
from dns01_cloudflare.dns.util import challenge_fqdn
from dns01_cloudflare.dns.zones import find_nearest_zone_for_fqdn
from dns01_cloudflare.exceptions import Dns01Error
from dns01_cloudflare.models import DnsChallengeInfo, DnsZone

logger = logging.getLogger(__name__)


# Handler: publish the challenge TXT record
def create_dns_txt_record(input: dict) -> None:
    challenge = DnsChallengeInfo.from_dict(input)
    with get_dns_provider(load_config()) as provider:
        provider.present(challenge.domain, challenge.fqdn, challenge.value)


# Handler: retract the challenge TXT record
def delete_dns_txt_record(input: dict) -> None:
    challenge = DnsChallengeInfo.from_dict(input)
    with get_dns_provider(load_config()) as provider:
        provider.cleanup(challenge.domain, challenge.fqdn, challenge.value)


def find_zone(fqdn: str) -> DnsZone:
    config = load_config()
    credentials = validate(config.cloudflare_email, config.cloudflare_api_key, config.cloudflare_api_token)
    client = CloudflareClient(credentials, base_url=config.api_url, timeout=config.http_timeout)
    try:
        return find_nearest_zone_for_fqdn(client, fqdn)
    finally:
        client.close()


def _challenge_input(args: argparse.Namespace) -> dict:
    return DnsChallengeInfo(
        domain=args.domain,
        fqdn=args.fqdn or challenge_fqdn(args.domain),
        value=args.value,
    ).to_dict()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dns01-cloudflare",
        description="Publish and retract ACME DNS-01 challenge records in Cloudflare",
        epilog="Credentials are read from CLOUDFLARE_EMAIL, CLOUDFLARE_API_KEY and CLOUDFLARE_API_TOKEN.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("present", "create the challenge TXT record"),
        ("cleanup", "delete the challenge TXT record"),
    ):
        cmd = commands.add_parser(name, help=help_text)
        cmd.add_argument("domain", help="certificate domain, e.g. example.com")
        cmd.add_argument("value", help="TXT record value")
        cmd.add_argument("--fqdn", help="record name (default: _acme-challenge.<domain>.)")

    zone = commands.add_parser("find-zone", help="print the Cloudflare zone owning a name")
    zone.add_argument("fqdn", help="fully qualified domain name")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "present":
            create_dns_txt_record(_challenge_input(args))
        elif args.command == "cleanup":
            delete_dns_txt_record(_challenge_input(args))
        else:
            zone = find_zone(args.fqdn)
            print(f"{zone.id} {zone.name}")
    except Dns01Error as err:
        logger.error("%s", err)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

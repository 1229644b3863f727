"""Tests for DnsProvider ABC."""

import pytest

from dns01_cloudflare.dns.base import DnsProvider


def test_cannot_instantiate_abc():
    with pytest.raises(TypeError, match="abstract"):
        DnsProvider()


def test_concrete_subclass_works():
    class FakeProvider(DnsProvider):
        def present(self, domain, fqdn, value):
            pass

        def cleanup(self, domain, fqdn, value):
            pass

    provider = FakeProvider()
    assert isinstance(provider, DnsProvider)


def test_context_manager_calls_close():
    closed = []

    class FakeProvider(DnsProvider):
        def present(self, domain, fqdn, value):
            pass

        def cleanup(self, domain, fqdn, value):
            pass

        def close(self):
            closed.append(True)

    with FakeProvider() as provider:
        assert isinstance(provider, FakeProvider)

    assert closed == [True]

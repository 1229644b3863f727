"""Tests for DNS utility functions."""

from dns01_cloudflare.dns.util import candidate_suffixes, challenge_fqdn, un_fqdn


class TestUnFqdn:
    def test_strips_trailing_dot(self):
        assert un_fqdn("example.com.") == "example.com"

    def test_strips_only_one_dot(self):
        assert un_fqdn("example.com..") == "example.com."

    def test_leaves_relative_name_alone(self):
        assert un_fqdn("example.com") == "example.com"


class TestChallengeFqdn:
    def test_base_domain(self):
        assert challenge_fqdn("example.com") == "_acme-challenge.example.com."

    def test_wildcard_domain(self):
        assert challenge_fqdn("*.example.com") == "_acme-challenge.example.com."

    def test_subdomain(self):
        assert challenge_fqdn("sub.example.com") == "_acme-challenge.sub.example.com."

    def test_dot_terminated_domain(self):
        assert challenge_fqdn("example.com.") == "_acme-challenge.example.com."


class TestCandidateSuffixes:
    def test_most_specific_first_down_to_two_labels(self):
        assert list(candidate_suffixes("_acme-challenge.test.sub.domain.com.")) == [
            "_acme-challenge.test.sub.domain.com",
            "test.sub.domain.com",
            "sub.domain.com",
            "domain.com",
        ]

    def test_two_label_name(self):
        assert list(candidate_suffixes("example.com")) == ["example.com"]

    def test_single_label_name(self):
        assert list(candidate_suffixes("com.")) == []

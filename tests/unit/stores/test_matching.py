"""Tests for the filter-matching rules."""

import pytest

from binding_store.schemas import ApiKeyAuth, Binding, Service
from binding_store.stores.matching import (
    auth_method_matches,
    binding_matches,
    binding_matches_dn,
    field_matches,
    select_copies,
    service_matches,
)

BINDING = Binding(name="b1", service="s1", host="host1", dn="cn=alice")


class TestFieldMatches:
    """Test the wildcard rule."""

    @pytest.mark.parametrize(
        "wanted,actual,expected",
        [
            ("", "anything", True),
            ("", "", True),
            ("s1", "s1", True),
            ("s1", "s2", False),
            ("s1", "", False),
            ("S1", "s1", False),
        ],
    )
    def test_field_matches(self, wanted, actual, expected):
        """Test empty wanted matches anything; otherwise exact and case sensitive."""
        assert field_matches(wanted, actual) is expected


class TestRecordMatchers:
    """Test the per-collection predicates."""

    def test_service_matches(self):
        service = Service(name="s1", hosts=["host1"])

        assert service_matches(service, "")
        assert service_matches(service, "s1")
        assert not service_matches(service, "s10")

    def test_binding_matches_filters_independently(self):
        assert binding_matches(BINDING, "", "")
        assert binding_matches(BINDING, "s1", "")
        assert binding_matches(BINDING, "", "host1")
        assert binding_matches(BINDING, "s1", "host1")
        assert not binding_matches(BINDING, "s1", "host2")
        assert not binding_matches(BINDING, "s2", "")

    def test_binding_matches_dn_is_exact(self):
        assert binding_matches_dn(BINDING, "cn=alice", "host1")
        assert not binding_matches_dn(BINDING, "", "host1")
        assert not binding_matches_dn(BINDING, "cn=alice", "")

    def test_auth_method_matches(self):
        auth_method = ApiKeyAuth(service="s1", host="host1", port=9000, access_key="key1")

        assert auth_method_matches(auth_method, "s1", "host1", "api-key")
        assert not auth_method_matches(auth_method, "s1", "host1", "headers")
        assert not auth_method_matches(auth_method, "", "", "")


class TestSelectCopies:
    """Test select_copies."""

    def test_returns_deep_copies_in_order(self):
        """Test order is kept and nested lists are not shared."""
        services = [
            Service(name="s1", hosts=["host1"]),
            Service(name="s2", hosts=["host2"]),
            Service(name="s3", hosts=["host3"]),
        ]

        selected = select_copies(services, lambda s: s.name != "s2")

        assert [s.name for s in selected] == ["s1", "s3"]
        assert selected[0] == services[0]
        assert selected[0] is not services[0]
        assert selected[0].hosts is not services[0].hosts

    def test_no_match_is_empty_list(self):
        assert select_copies([BINDING], lambda b: False) == []

# tests/test_proxies/test_availability.py

"""
Tests for proxy availability resolution.
"""

import pytest

from imbus.proxies.availability import available_proxies, resolve_proxies
from imbus.validation import NoComputableProxyError


class TestAvailableProxies:
    """Computable proxies per combination of optional tables."""

    @pytest.mark.parametrize("has_species, has_gear, expected", [
        (False, False, ["Feff"]),
        (False, True, ["Feff", "Fgear"]),
        (True, False, ["Feff", "Fdist"]),
        (True, True, ["Feff", "Fdist", "Frealised"]),
    ])
    def test_combinations(self, has_species, has_gear, expected):
        assert available_proxies(has_species, has_gear) == expected

    def test_fgear_excluded_with_species(self):
        """Fgear is superseded once species distribution is present."""
        assert "Fgear" not in available_proxies(True, True)


class TestResolveProxies:
    """Intersection of requested and computable proxies."""

    def test_all_requested_gear_only(self):
        resolved = resolve_proxies(["Feff", "Fgear", "Fdist", "Frealised"], False, True)
        assert resolved == ["Feff", "Fgear"]

    def test_canonical_order(self):
        resolved = resolve_proxies(["Frealised", "Feff", "Fdist"], True, True)
        assert resolved == ["Feff", "Fdist", "Frealised"]

    def test_single_string_accepted(self):
        assert resolve_proxies("Feff", False, False) == ["Feff"]

    def test_empty_intersection_raises(self):
        with pytest.raises(NoComputableProxyError) as e:
            resolve_proxies(["Fdist", "Frealised"], False, True)
        assert e.value.requested == ["Fdist", "Frealised"]
        assert e.value.available == ["Feff", "Fgear"]
        assert "Fdist" in str(e.value) and "Fgear" in str(e.value)

    def test_empty_request_raises(self):
        with pytest.raises(NoComputableProxyError):
            resolve_proxies([], True, True)

    def test_unknown_proxy_raises(self):
        with pytest.raises(ValueError, match="Unknown proxies"):
            resolve_proxies(["Feff", "Fbogus"], False, False)

"""Tests for CIDR parsing helpers."""

import ipaddress

import pytest

from field_validators.cidr import is_rfc1918, parse_cidr


class TestParseCidr:
    """Test CIDR parsing."""

    def test_host_bits_are_kept_in_address(self):
        address, network = parse_cidr("10.0.0.5/24")
        assert address == ipaddress.ip_address("10.0.0.5")
        assert network == ipaddress.ip_network("10.0.0.0/24")

    def test_ipv6(self):
        address, network = parse_cidr("2001:db8::1/64")
        assert address.version == 6
        assert network.prefixlen == 64

    @pytest.mark.parametrize(
        "cidr, reason",
        [
            ("10.0.0.0", "Missing prefix length"),
            ("10.0.0.0/", "decimal number"),
            ("10.0.0.0/255.0.0.0", "decimal number"),
            ("10.0.0.0/-8", "decimal number"),
            ("10.0.0.0/33", "Error:"),
            ("300.0.0.0/8", "Error:"),
            ("not-a-cidr/8", "Error:"),
            ("fe80::1%eth0/64", "invalid CIDR address"),
        ],
    )
    def test_invalid(self, cidr, reason):
        with pytest.raises(ValueError, match=reason):
            parse_cidr(cidr)


class TestIsRfc1918:
    """Test private range membership."""

    @pytest.mark.parametrize(
        "address", ["10.0.0.1", "10.255.255.255", "172.16.0.1", "172.31.255.255", "192.168.1.1"]
    )
    def test_private(self, address):
        assert is_rfc1918(ipaddress.ip_address(address))

    @pytest.mark.parametrize(
        "address", ["8.8.8.8", "172.15.255.255", "172.32.0.0", "192.169.0.1", "fd00::1"]
    )
    def test_public(self, address):
        assert not is_rfc1918(ipaddress.ip_address(address))

"""CIDR parsing helpers."""

import ipaddress
from typing import Tuple, Union

from .patterns import RFC1918_NETWORKS

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]
IPNetwork = Union[ipaddress.IPv4Network, ipaddress.IPv6Network]

def parse_cidr(cidr: str) -> Tuple[IPAddress, IPNetwork]:
    """
    Parse CIDR notation into its address and network.
    Host bits may be set: "10.0.0.5/24" gives 10.0.0.5 and 10.0.0.0/24.
    Raises ValueError with the reason when the value is not a CIDR.
    """
    address_str, sep, prefix_str = cidr.partition("/")
    if not sep:
        raise ValueError(f"invalid CIDR address: {cidr}. Missing prefix length.")
    if not (prefix_str.isascii() and prefix_str.isdigit()):
        raise ValueError(
            f"invalid CIDR address: {cidr}. Prefix length must be a decimal number."
        )

    try:
        address = ipaddress.ip_address(address_str)
    except ValueError as e:
        raise ValueError(f"invalid CIDR address: {cidr}. Error: {str(e)}")
    if getattr(address, "scope_id", None):
        raise ValueError(f"invalid CIDR address: {cidr}. Zone ids are not allowed.")

    try:
        if address.version == 4:
            network = ipaddress.IPv4Network((address, int(prefix_str)), strict=False)
        else:
            network = ipaddress.IPv6Network((address, int(prefix_str)), strict=False)
    except ValueError as e:
        raise ValueError(f"invalid CIDR address: {cidr}. Error: {str(e)}")

    return address, network

def is_rfc1918(address: IPAddress) -> bool:
    """Check whether an address falls inside a private RFC1918 block."""
    return any(address in network for network in RFC1918_NETWORKS)

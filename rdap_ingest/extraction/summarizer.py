"""Turn an inclusive address range into the CIDR blocks that cover it."""

from __future__ import annotations

import ipaddress
from ipaddress import IPv4Address, IPv4Network, IPv6Address, IPv6Network
from pathlib import Path
from typing import Union

from ..errors import InvalidAddressError

IPAddress = Union[IPv4Address, IPv6Address]
IPNetwork = Union[IPv4Network, IPv6Network]


def parse_address(value: str, path: str | Path | None = None) -> IPAddress:
    """Parse ``value`` as an IP address.

    IPv4-mapped IPv6 addresses (``::ffff:a.b.c.d``) are unwrapped to their
    4-byte form so that they classify and summarize as IPv4.
    """
    try:
        address = ipaddress.ip_address(value.strip())
    except ValueError as exc:
        raise InvalidAddressError(f"invalid IP address {value!r}", path) from exc

    if isinstance(address, IPv6Address) and address.ipv4_mapped is not None:
        return address.ipv4_mapped
    return address


def summarize_range(start: IPAddress, end: IPAddress, path: str | Path | None = None) -> list[IPNetwork]:
    """Return the minimal ascending list of networks covering ``[start, end]``.

    Blocks are taken greedily from ``start``: each one is the largest block
    aligned on the current address that does not run past ``end``. An empty
    list is returned when ``start`` is after ``end``.
    """
    if start.version != end.version:
        raise InvalidAddressError(
            f"start address {start} and end address {end} are of different families",
            path,
        )

    if start > end:
        return []

    return list(ipaddress.summarize_address_range(start, end))

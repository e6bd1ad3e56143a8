from __future__ import annotations

import logging
from ipaddress import IPv4Address, IPv6Address
from pathlib import Path

from ..errors import InvalidAddressError
from ..models import Event, NormalizedRecord, RawRegistryDocument, Remark
from ..parsers import load_document
from ..settings import (
    DEFAULT_COUNTRY_CODE,
    IP_NETWORK_CLASS,
    IPV4_NET_TYPE,
    IPV6_NET_TYPE,
    LAST_CHANGED_ACTION,
    SOURCE_LABEL,
)
from ..utils import dedupe_preserving_order
from .countries import extract_country_codes
from .summarizer import IPAddress, parse_address, summarize_range

logger = logging.getLogger(__name__)


def _net_type(address: IPAddress, path: str | Path | None) -> str:
    if isinstance(address, IPv4Address):
        return IPV4_NET_TYPE
    if isinstance(address, IPv6Address):
        return IPV6_NET_TYPE
    raise InvalidAddressError(f"invalid IP version for {address!r}", path)


def _join_remarks(remarks: list[Remark]) -> str:
    return "\n".join("\n".join(remark.description) for remark in remarks)


def _last_changed(events: list[Event]) -> str:
    last_modified = ""
    for event in events:
        if event.action == LAST_CHANGED_ACTION:
            last_modified = event.date
    return last_modified


def transform_document(document: RawRegistryDocument, path: str | Path | None = None) -> list[NormalizedRecord]:
    """Flatten one registry document into one record per covering CIDR block.

    Documents that are not IP networks yield no records. An unparseable start
    or end address raises :class:`InvalidAddressError`; every other gap in the
    document falls back to an empty value.
    """
    if document.object_class_name != IP_NETWORK_CLASS:
        return []

    start = parse_address(document.start_address, path)
    end = parse_address(document.end_address, path)
    net_type = _net_type(start, path)

    cidrs = summarize_range(start, end, path)
    if not cidrs:
        logger.warning("%s: start address %s is after end address %s", path or document.name, start, end)
        return []

    remarks = _join_remarks(document.remarks)
    last_modified = _last_changed(document.events)
    countries = dedupe_preserving_order(extract_country_codes(document.entities))
    country = countries[0] if countries else DEFAULT_COUNTRY_CODE
    asn = document.origin_autnums[0] if document.origin_autnums else 0

    return [
        NormalizedRecord(
            cidr=str(cidr),
            netname=document.name,
            asn=asn,
            remarks=remarks,
            type=net_type,
            countries=list(countries),
            country=country,
            last_modified=last_modified,
            source=SOURCE_LABEL,
        )
        for cidr in cidrs
    ]


def parse_file(path: str | Path) -> list[NormalizedRecord]:
    return transform_document(load_document(path), path)

from __future__ import annotations

import json

import pytest

from rdap_ingest.errors import InvalidAddressError
from rdap_ingest.extraction.transformer import parse_file, transform_document
from rdap_ingest.models import RawRegistryDocument

SILVERSTAR_EXPECTED = (
    '{"cidr":"217.147.184.0/21","netname":"SILVERSTAR-11","asn":26223,'
    '"remarks":"Geofeed https://raw.githubusercontent.com/SSC-DevOPS/SSC-Geofeed/main/geofeed.csv",'
    '"type":"inetnum","countries":["US"],"country":"US",'
    '"last-modified":"2023-05-22T17:10:08-04:00","source":"ARIN"}'
)


def test_silverstar_document(silverstar_path) -> None:
    records = parse_file(silverstar_path)

    assert len(records) == 1
    assert records[0].to_json() == SILVERSTAR_EXPECTED


def test_non_network_documents_yield_nothing(network_payload) -> None:
    document = RawRegistryDocument.model_validate(network_payload(objectClassName="autnum"))
    assert transform_document(document) == []

    # the address is never looked at for other object classes
    document = RawRegistryDocument.model_validate(network_payload(start="garbage", objectClassName="entity"))
    assert transform_document(document) == []


def test_one_record_per_cidr_with_shared_fields(network_payload) -> None:
    document = RawRegistryDocument.model_validate(network_payload(start="10.0.0.1", end="10.0.0.10"))

    records = transform_document(document)

    assert [record.cidr for record in records] == [
        "10.0.0.1/32",
        "10.0.0.2/31",
        "10.0.0.4/30",
        "10.0.0.8/31",
        "10.0.0.10/32",
    ]
    shared = {json.dumps(record.model_dump(exclude={"cidr"})) for record in records}
    assert len(shared) == 1


def test_ipv6_document_type(network_payload) -> None:
    document = RawRegistryDocument.model_validate(network_payload(start="2001:db8::", end="2001:db8::ffff"))
    records = transform_document(document)
    assert [record.cidr for record in records] == ["2001:db8::/112"]
    assert records[0].type == "inet6num"


def test_remark_blocks_joined_with_newlines(network_payload) -> None:
    payload = network_payload(
        remarks=[
            {"title": "Comments", "description": ["line one", "line two"]},
            {"title": "Geofeed", "description": ["https://example.net/geofeed.csv"]},
            {"title": "Empty"},
        ]
    )
    record = transform_document(RawRegistryDocument.model_validate(payload))[0]
    assert record.remarks == "line one\nline two\nhttps://example.net/geofeed.csv\n"


def test_last_changed_event_keeps_latest_entry(network_payload) -> None:
    payload = network_payload(
        events=[
            {"eventAction": "last changed", "eventDate": "2020-01-01T00:00:00-05:00"},
            {"eventAction": "registration", "eventDate": "2019-01-01T00:00:00-05:00"},
            {"eventAction": "last changed", "eventDate": "2021-06-01T00:00:00-04:00"},
        ]
    )
    record = transform_document(RawRegistryDocument.model_validate(payload))[0]
    assert record.last_modified == "2021-06-01T00:00:00-04:00"


def test_missing_optional_fields_use_defaults() -> None:
    document = RawRegistryDocument.model_validate(
        {
            "objectClassName": "ip network",
            "startAddress": "192.0.2.0",
            "endAddress": "192.0.2.255",
            "remarks": None,
            "entities": None,
        }
    )

    record = transform_document(document)[0]

    assert record.netname == ""
    assert record.asn == 0
    assert record.remarks == ""
    assert record.last_modified == ""
    assert record.countries == []
    assert record.country == "ZZ"
    assert '"countries":[]' in record.to_json()


def test_countries_deduplicated_in_first_seen_order(network_payload) -> None:
    payload = network_payload(
        entities=[
            {"vcardArray": ["vcard", [["adr", {"label": "Ottawa\nCanada"}, "text", []]]]},
            {"vcardArray": ["vcard", [["adr", {"label": "Austin\nUnited States"}, "text", []]]]},
            {"vcardArray": ["vcard", [["adr", {"label": "Toronto\nCanada"}, "text", []]]]},
        ]
    )
    record = transform_document(RawRegistryDocument.model_validate(payload))[0]
    assert record.countries == ["CA", "US"]
    assert record.country == "CA"


def test_first_origin_as_is_used(network_payload) -> None:
    payload = network_payload(arin_originas0_originautnums=[64500, 64501])
    assert transform_document(RawRegistryDocument.model_validate(payload))[0].asn == 64500


def test_transform_is_repeatable(silverstar_path) -> None:
    first = [record.to_json() for record in parse_file(silverstar_path)]
    second = [record.to_json() for record in parse_file(silverstar_path)]
    assert first == second


@pytest.mark.parametrize(
    ("start", "end"),
    [
        ("not-an-ip", "10.0.0.255"),
        ("10.0.0.0", ""),
        ("10.0.0.0", "2001:db8::"),
    ],
)
def test_bad_addresses_are_hard_errors(network_payload, start: str, end: str) -> None:
    document = RawRegistryDocument.model_validate(network_payload(start=start, end=end))
    with pytest.raises(InvalidAddressError):
        transform_document(document, "doc.json")


def test_reversed_range_yields_nothing(network_payload) -> None:
    document = RawRegistryDocument.model_validate(network_payload(start="10.0.1.0", end="10.0.0.0"))
    assert transform_document(document) == []


def test_malformed_embedded_data_degrades_to_defaults(network_payload) -> None:
    from rdap_ingest.parsers import parse_json_text

    payload = network_payload(
        entities=[None, "org-handle", {"vcardArray": "vcard"}, {"vcardArray": {"kind": "adr"}}],
        remarks=[None],
        events=[None, {"eventAction": "last changed", "eventDate": "2024-02-02T00:00:00Z"}],
    )

    records = transform_document(parse_json_text(json.dumps(payload)))

    assert [record.cidr for record in records] == ["10.0.0.0/24"]
    assert records[0].countries == []
    assert records[0].country == "ZZ"
    assert records[0].remarks == ""
    assert records[0].last_modified == "2024-02-02T00:00:00Z"

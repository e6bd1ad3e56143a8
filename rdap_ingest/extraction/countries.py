from __future__ import annotations

from functools import lru_cache
from typing import Any, Iterable

import pycountry

from ..models import Entity

ADDRESS_KIND = "adr"

# Short names registries use that ISO 3166 lists under a longer form.
COUNTRY_ALIASES = {
    "bolivia": "BO",
    "brunei": "BN",
    "cape verde": "CV",
    "czech republic": "CZ",
    "great britain": "GB",
    "iran": "IR",
    "ivory coast": "CI",
    "laos": "LA",
    "macedonia": "MK",
    "micronesia": "FM",
    "moldova": "MD",
    "north korea": "KP",
    "palestine": "PS",
    "russia": "RU",
    "south korea": "KR",
    "swaziland": "SZ",
    "syria": "SY",
    "taiwan": "TW",
    "tanzania": "TZ",
    "turkey": "TR",
    "uk": "GB",
    "united states of america": "US",
    "vatican": "VA",
    "venezuela": "VE",
    "vietnam": "VN",
}


@lru_cache(maxsize=1024)
def lookup_country_code(name: str) -> str | None:
    """Resolve a country name or ISO code to its alpha-2 code, ``None`` if unknown."""
    candidate = name.strip()
    if not candidate:
        return None
    try:
        country = pycountry.countries.lookup(candidate)
    except LookupError:
        return COUNTRY_ALIASES.get(candidate.lower())
    return country.alpha_2


def _address_labels(vcard_array: list[Any]) -> Iterable[str]:
    # vcardArray looks like ["vcard", [[name, params, type, value], ...]], but
    # nothing guarantees it, so every level is shape-checked and skipped on
    # mismatch.
    for vcard in vcard_array:
        if not isinstance(vcard, list):
            continue
        for prop in vcard:
            if not isinstance(prop, list) or len(prop) < 2:
                continue
            if prop[0] != ADDRESS_KIND:
                continue
            params = prop[1]
            if not isinstance(params, dict):
                continue
            label = params.get("label")
            if isinstance(label, str):
                yield label


def extract_country_codes(entities: Iterable[Entity]) -> list[str]:
    """Country codes found on the last line of each postal address label.

    Order follows the entities and their vCard properties; duplicates are kept.
    Labels whose last line does not resolve to a country are ignored.
    """
    codes: list[str] = []
    for entity in entities:
        for label in _address_labels(entity.vcard_array):
            last_line = label.split("\n")[-1]
            code = lookup_country_code(last_line)
            if code is None:
                continue
            codes.append(code)
    return codes

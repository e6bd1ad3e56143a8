from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


def _network_payload(
    start: str = "10.0.0.0",
    end: str = "10.0.0.255",
    name: str = "TEST-NET",
    country: str = "United States",
    **overrides: Any,
) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "objectClassName": "ip network",
        "startAddress": start,
        "endAddress": end,
        "name": name,
        "remarks": [],
        "events": [],
        "entities": [
            {
                "vcardArray": [
                    "vcard",
                    [["adr", {"label": f"1 Main St\nSpringfield\n{country}"}, "text", [""] * 7]],
                ]
            }
        ],
        "status": ["active"],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def network_payload():
    return _network_payload


@pytest.fixture
def silverstar_path() -> Path:
    return FIXTURES_DIR / "test_silverstar.json"


@pytest.fixture
def write_document(tmp_path: Path):
    def _write(relative: str, payload: dict[str, Any] | str) -> Path:
        target = tmp_path / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        text = payload if isinstance(payload, str) else json.dumps(payload)
        target.write_text(text, encoding="utf-8")
        return target

    return _write

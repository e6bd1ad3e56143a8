from __future__ import annotations

import json
from pathlib import Path
import sys

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from rdap_ingest.extraction.transformer import parse_file  # noqa: E402
from rdap_ingest.services.run_service import run_pipeline  # noqa: E402

FIXTURES_DIR = REPO_ROOT / "tests" / "fixtures"


def fail(message: str) -> None:
    print(f"SMOKE_FAIL: {message}")
    raise SystemExit(1)


def main() -> None:
    records = parse_file(FIXTURES_DIR / "test_silverstar.json")
    if len(records) != 1:
        fail(f"expected one record from the fixture, got {len(records)}")

    payload = json.loads(records[0].to_json())
    if payload.get("cidr") != "217.147.184.0/21":
        fail(f"unexpected cidr: {payload.get('cidr')}")
    if payload.get("countries") != ["US"]:
        fail(f"unexpected countries: {payload.get('countries')}")

    result = run_pipeline(FIXTURES_DIR, workers=2)
    if result.failures:
        fail(f"pipeline reported failures: {result.failures}")
    if not result.records:
        fail("pipeline produced no records")

    print("SMOKE_OK")


if __name__ == "__main__":
    main()

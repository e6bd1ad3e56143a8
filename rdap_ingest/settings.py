from __future__ import annotations

import os
from pathlib import Path


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


DEFAULT_TARGET_DIR = Path(os.environ.get("RDAP_INGEST_TARGET_DIR", "./.cache/arin-rir/"))
DEFAULT_POOL_SIZE = _env_int("RDAP_INGEST_WORKERS", os.cpu_count() or 1)
LOG_LEVEL = os.environ.get("RDAP_INGEST_LOG_LEVEL", "INFO")

TERMINAL_PACING_SECONDS = 0.1
QUEUE_POLL_SECONDS = 0.05

IP_NETWORK_CLASS = "ip network"
LAST_CHANGED_ACTION = "last changed"
IPV4_NET_TYPE = "inetnum"
IPV6_NET_TYPE = "inet6num"
DEFAULT_COUNTRY_CODE = "ZZ"
SOURCE_LABEL = "ARIN"

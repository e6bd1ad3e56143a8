from __future__ import annotations

import time
from typing import Iterable, TextIO

from ..models import NormalizedRecord


def write_records(records: Iterable[NormalizedRecord], stream: TextIO, pacing_seconds: float = 0.0) -> int:
    """Write one compact JSON line per record; return the number written."""
    written = 0
    for record in records:
        stream.write(record.to_json())
        stream.write("\n")
        written += 1
        if pacing_seconds > 0:
            stream.flush()
            time.sleep(pacing_seconds)
    stream.flush()
    return written

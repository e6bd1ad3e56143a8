from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .models import NormalizedRecord


class PipelineState(str, Enum):
    RUNNING = "RUNNING"
    DRAINING = "DRAINING"
    DONE = "DONE"


@dataclass
class FileFailure:
    path: str
    error_type: str
    message: str


@dataclass
class PipelineResult:
    records: list[NormalizedRecord]
    failures: list[FileFailure] = field(default_factory=list)
    files_processed: int = 0
    state: PipelineState = PipelineState.DONE

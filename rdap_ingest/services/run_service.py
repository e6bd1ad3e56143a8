"""Concurrent ingestion of a directory of registry documents.

A single producer thread walks the target directory and feeds paths into a
bounded queue. ``workers`` consumer threads parse and transform each file and
hand the resulting records to a shared :class:`ResultCollector`. The first
failing file cancels the shared :class:`CancellationToken`: the producer stops
walking, workers stop taking paths, and records already collected are kept.
"""

from __future__ import annotations

import logging
import queue
import threading
from pathlib import Path

from ..domain import FileFailure, PipelineResult, PipelineState
from ..extraction.transformer import parse_file
from ..models import NormalizedRecord
from ..settings import DEFAULT_POOL_SIZE, QUEUE_POLL_SECONDS
from .cancellation import CancellationToken
from .inventory import walk_files

logger = logging.getLogger(__name__)


class ResultCollector:
    """Lock-guarded accumulator owned by one pipeline run."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: list[NormalizedRecord] = []
        self._failures: list[FileFailure] = []
        self._files_processed = 0

    def add(self, records: list[NormalizedRecord]) -> None:
        # one extend per file keeps a file's records contiguous
        with self._lock:
            self._records.extend(records)
            self._files_processed += 1

    def fail(self, failure: FileFailure) -> None:
        with self._lock:
            self._failures.append(failure)

    def records(self) -> list[NormalizedRecord]:
        with self._lock:
            return list(self._records)

    def failures(self) -> list[FileFailure]:
        with self._lock:
            return list(self._failures)

    @property
    def files_processed(self) -> int:
        with self._lock:
            return self._files_processed


class IngestionPipeline:
    def __init__(self, root: str | Path, workers: int = DEFAULT_POOL_SIZE) -> None:
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self.root = Path(root)
        self.workers = workers
        self.token = CancellationToken()
        self.collector = ResultCollector()
        self._paths: queue.Queue[Path] = queue.Queue(maxsize=workers)
        self._source_done = threading.Event()
        self._state = PipelineState.RUNNING
        self._state_lock = threading.Lock()

    @property
    def state(self) -> PipelineState:
        with self._state_lock:
            return self._state

    def _set_state(self, state: PipelineState) -> None:
        with self._state_lock:
            # DONE is terminal and DRAINING never goes back to RUNNING
            if self._state is PipelineState.DONE:
                return
            if state is PipelineState.RUNNING and self._state is PipelineState.DRAINING:
                return
            self._state = state

    def cancel(self, reason: str) -> None:
        if self.token.cancel():
            logger.warning("Cancelling ingestion of %s: %s", self.root, reason)
        self._set_state(PipelineState.DRAINING)

    def _record_failure(self, path: Path | str, exc: BaseException) -> None:
        self.collector.fail(FileFailure(path=str(path), error_type=type(exc).__name__, message=str(exc)))
        self.cancel(f"failed to process {path}")

    def _offer(self, path: Path) -> bool:
        while not self.token.is_cancelled():
            try:
                self._paths.put(path, timeout=QUEUE_POLL_SECONDS)
                return True
            except queue.Full:
                continue
        return False

    def _produce(self) -> None:
        try:
            for path in walk_files(self.root, self.token):
                if not self._offer(path):
                    break
        except OSError as exc:
            logger.error("Error walking '%s': %s", self.root, exc)
            self._record_failure(self.root, exc)
        finally:
            self._source_done.set()
            self._set_state(PipelineState.DRAINING)

    def _next_path(self) -> Path | None:
        while not self.token.is_cancelled():
            try:
                return self._paths.get(timeout=QUEUE_POLL_SECONDS)
            except queue.Empty:
                if self._source_done.is_set() and self._paths.empty():
                    return None
        return None

    def _consume(self, index: int) -> None:
        while True:
            path = self._next_path()
            if path is None:
                return
            if self.token.is_cancelled():
                # dequeued just as another worker failed
                return
            logger.debug("Worker #%d: processing file %s", index, path)
            try:
                records = parse_file(path)
            except Exception as exc:  # noqa: BLE001
                logger.error("Error parsing '%s': %s", path, exc)
                self._record_failure(path, exc)
                return
            self.collector.add(records)

    def run(self) -> PipelineResult:
        logger.info("Ingesting %s with %d workers", self.root, self.workers)

        threads = [
            threading.Thread(target=self._consume, args=(index,), name=f"rdap-worker-{index}", daemon=True)
            for index in range(self.workers)
        ]
        producer = threading.Thread(target=self._produce, name="rdap-walker", daemon=True)

        producer.start()
        for thread in threads:
            thread.start()

        producer.join()
        for thread in threads:
            thread.join()

        self._set_state(PipelineState.DONE)
        result = PipelineResult(
            records=self.collector.records(),
            failures=self.collector.failures(),
            files_processed=self.collector.files_processed,
            state=self.state,
        )
        logger.info(
            "Finished %s: %d files processed, %d records, %d failures",
            self.root,
            result.files_processed,
            len(result.records),
            len(result.failures),
        )
        return result


def run_pipeline(root: str | Path, workers: int = DEFAULT_POOL_SIZE) -> PipelineResult:
    return IngestionPipeline(root, workers).run()

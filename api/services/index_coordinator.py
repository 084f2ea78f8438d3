# Copyright (c) 2024 RAG-KB Contributors
# SPDX-License-Identifier: MIT

"""Single-flight indexing coordinator.

At most one run exists per process. A run walks the namespace, indexes each
file (extract, chunk, embed, upsert), then deletes stale vector points.
Per-file failures are recorded and skipped; vector store failures abort the
run. Outcomes are only visible through StatusPublisher.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Iterator, Optional, Set

from errors import EngineUnavailableError, IndexingFault, IndexingInProgressError
from value_objects import FileIndexResult, IndexingStats

logger = logging.getLogger(__name__)

SHUTDOWN_MESSAGE = "Indexing interrupted by shutdown"
MANUAL_REASON = "manual"


class _RunInterrupted(Exception):
    """Raised inside a run when shutdown was requested"""
    pass


class IndexCoordinator:
    """Runs indexing on a background thread, one run at a time"""

    def __init__(self, store, processor, vector_store, status, dimension: int):
        """
        Args:
            store: NamespaceStore to walk
            processor: DocumentProcessor producing vector points per file
            vector_store: VectorStoreInterface implementation
            status: StatusPublisher holding the single-flight flag
            dimension: Embedding dimension for the vector collection
        """
        self.store = store
        self.processor = processor
        self.vector_store = vector_store
        self.status = status
        self.dimension = dimension
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def trigger(self) -> None:
        """Start a run and return immediately

        Raises:
            IndexingInProgressError: If a run is already active
            EngineUnavailableError: If the coordinator is shutting down
        """
        if self._stop.is_set():
            raise EngineUnavailableError("Indexing engine is shutting down")
        if not self._start(MANUAL_REASON):
            raise IndexingInProgressError()

    def request_reindex(self, reason: str) -> bool:
        """Start a run if none is active; the request is dropped otherwise"""
        if self._stop.is_set():
            return False
        started = self._start(reason)
        if not started:
            logger.info(f"Reindex request ({reason}) dropped: indexing already in progress")
        return started

    def wait_until_idle(self, timeout: Optional[float] = None) -> bool:
        """Join the current run; True when no run is left active"""
        thread = self._thread
        if thread is not None:
            thread.join(timeout)
            return not thread.is_alive()
        return True

    def shutdown(self, grace_seconds: float = 30.0) -> bool:
        """Stop accepting runs and let the active one stop after its current file"""
        self._stop.set()
        idle = self.wait_until_idle(grace_seconds)
        if not idle:
            logger.warning(f"Indexing run did not stop within {grace_seconds}s")
        return idle

    def _start(self, reason: str) -> bool:
        if not self.status.begin_run():
            return False
        logger.info(f"Indexing started ({reason})")
        thread = threading.Thread(target=self._run, name="index-run", daemon=True)
        self._thread = thread
        try:
            thread.start()
        except RuntimeError:
            self.status.end_run()
            raise
        return True

    @contextmanager
    def _scoped_run(self) -> Iterator[None]:
        """Release the indexing slot on every exit path"""
        try:
            yield
        finally:
            self.status.end_run()

    def _run(self) -> None:
        with self._scoped_run():
            try:
                stats = self._index_all()
            except _RunInterrupted:
                logger.warning(SHUTDOWN_MESSAGE)
                self.status.record_fault(SHUTDOWN_MESSAGE)
            except IndexingFault as e:
                logger.error(f"Indexing aborted: {e}")
                self.status.record_fault(str(e))
            except Exception as e:
                logger.exception("Indexing aborted by unexpected error")
                self.status.record_fault(f"Indexing failed: {e}")
            else:
                self.status.record_success(stats)
                logger.info(f"Indexing complete: {stats}")

    def _index_all(self) -> IndexingStats:
        self.vector_store.ensure_collection(self.dimension)
        files = self.store.walk_files()
        stats = IndexingStats()
        live_ids: Set[str] = set()
        failed: Set[str] = set()

        for processed, entry in enumerate(files):
            if self._stop.is_set():
                raise _RunInterrupted()
            self.status.record_progress(entry.path, processed, len(files))
            if not self.store.exists(entry.path):
                logger.info(f"Skipping {entry.path}: deleted during indexing")
                continue

            result = self._index_file(entry.path)
            if result is None:
                failed.add(entry.path)
            else:
                live_ids.update(result.point_ids)
                stats = stats.add_file(result.chunk_count)

        self.status.record_progress(None, len(files), len(files))
        if self._stop.is_set():
            raise _RunInterrupted()
        self._delete_stale_points(live_ids, failed)
        return stats

    def _index_file(self, file_path: str) -> Optional[FileIndexResult]:
        """Index one file; None when it failed and was recorded"""
        try:
            points = self.processor.process_file(file_path, self.store.disk_path(file_path))
        except IndexingFault:
            raise
        except Exception as e:
            logger.warning(f"Failed to index {file_path}: {e}")
            self.status.record_failed_file(file_path)
            return None

        self.vector_store.upsert(points)
        logger.debug(f"Indexed {file_path}: {len(points)} chunks")
        return FileIndexResult(file_path=file_path, point_ids=frozenset(p.id for p in points))

    def _delete_stale_points(self, live_ids: Set[str], failed: Set[str]) -> None:
        """Drop points of deleted files and of chunks that no longer exist

        Points of files that failed this run are kept.
        """
        stale = [
            point_id for point_id, file_path in self.vector_store.list_points()
            if point_id not in live_ids and file_path not in failed
        ]
        if stale:
            self.vector_store.delete(stale)
            logger.info(f"Removed {len(stale)} stale vector points")

# Copyright (c) 2024 RAG-KB Contributors
# SPDX-License-Identifier: MIT

"""Index status and runtime config.

StatusPublisher owns the IndexStatus record. Readers get snapshot copies;
the run-lifecycle mutators are called by IndexCoordinator only.
"""

import copy
import logging
import threading
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import List, Optional

from errors import InvalidIntervalError
from value_objects import IndexingStats

logger = logging.getLogger(__name__)


@dataclass
class IndexStatus:
    """Snapshot of the indexing engine state"""
    is_indexing: bool = False
    last_indexed_at: Optional[datetime] = None
    total_files: int = 0
    total_chunks: int = 0
    failed_files: List[str] = field(default_factory=list)
    last_error: str = ""
    auto_index_interval_minutes: int = 60
    upload_dir: str = ""
    files_total: int = 0
    files_processed: int = 0
    current_file: Optional[str] = None
    next_run_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        data = asdict(self)
        for key in ('last_indexed_at', 'next_run_at'):
            if data[key] is not None:
                data[key] = data[key].isoformat()
        return data


def validate_interval(minutes) -> int:
    """Return minutes if it is a positive integer

    Raises:
        InvalidIntervalError: For bools, non-integers and values <= 0
    """
    if isinstance(minutes, bool) or not isinstance(minutes, int):
        raise InvalidIntervalError("auto_index_interval_minutes must be an integer")
    if minutes <= 0:
        raise InvalidIntervalError("auto_index_interval_minutes must be greater than 0")
    return minutes


class StatusPublisher:
    """Thread-safe holder of IndexStatus"""

    def __init__(self, upload_dir: str, interval_minutes: int = 60):
        self._status = IndexStatus(
            auto_index_interval_minutes=validate_interval(interval_minutes),
            upload_dir=str(upload_dir),
        )
        self._scheduler = None
        self._lock = threading.Lock()
        # Held across the interval write and the timer re-arm
        self._config_lock = threading.Lock()

    def attach_scheduler(self, scheduler) -> None:
        """Register the scheduler re-armed by update_config"""
        self._scheduler = scheduler

    def get_status(self) -> IndexStatus:
        """Return a copy of the current status"""
        with self._lock:
            snapshot = copy.deepcopy(self._status)
        if self._scheduler is not None:
            snapshot.next_run_at = self._scheduler.next_run_at
        return snapshot

    @property
    def interval_minutes(self) -> int:
        with self._lock:
            return self._status.auto_index_interval_minutes

    def update_config(self, auto_index_interval_minutes) -> IndexStatus:
        """Set the auto-index interval and re-arm the periodic timer

        An indexing run in flight is not affected.

        Raises:
            InvalidIntervalError: Unless the value is a positive integer
        """
        minutes = validate_interval(auto_index_interval_minutes)
        with self._config_lock:
            with self._lock:
                self._status.auto_index_interval_minutes = minutes
            if self._scheduler is not None:
                self._scheduler.reschedule(minutes)
        logger.info(f"Auto-index interval set to {minutes} minute(s)")
        return self.get_status()

    # Run lifecycle

    def begin_run(self) -> bool:
        """Claim the single indexing slot; False if a run is active"""
        with self._lock:
            if self._status.is_indexing:
                return False
            self._status.is_indexing = True
            self._status.failed_files = []
            self._status.files_total = 0
            self._status.files_processed = 0
            self._status.current_file = None
            return True

    def record_progress(self, current_file: Optional[str], files_processed: int, files_total: int) -> None:
        with self._lock:
            self._status.current_file = current_file
            self._status.files_processed = files_processed
            self._status.files_total = files_total

    def record_failed_file(self, file_path: str) -> None:
        with self._lock:
            self._status.failed_files.append(file_path)

    def record_success(self, stats: IndexingStats) -> None:
        """Publish totals of a run that finished without a fatal fault"""
        with self._lock:
            self._status.total_files = stats.files
            self._status.total_chunks = stats.chunks
            self._status.last_indexed_at = datetime.now(timezone.utc)
            self._status.last_error = ""

    def record_fault(self, message: str) -> None:
        with self._lock:
            self._status.last_error = message

    def end_run(self) -> None:
        """Release the indexing slot"""
        with self._lock:
            self._status.is_indexing = False
            self._status.current_file = None

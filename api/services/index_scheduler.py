# Copyright (c) 2024 RAG-KB Contributors
# SPDX-License-Identifier: MIT

"""Periodic auto-index timer.

A single threading.Timer is armed at a time. Each tick asks the coordinator
for a reindex (dropped silently if a run is active) and re-arms for the
current interval. reschedule() replaces the pending timer; a timer that was
superseded but fired anyway is ignored via the generation counter.
"""

import logging
import threading
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

logger = logging.getLogger(__name__)

SCHEDULED_REASON = "scheduled"


class IndexScheduler:
    """Fires tick() every interval_minutes"""

    def __init__(self, tick: Callable[[str], bool], interval_minutes: int,
                 initial_delay_seconds: Optional[float] = None,
                 timer_factory: Callable = threading.Timer):
        """
        Args:
            tick: Called with the reason string on each firing
            interval_minutes: Period between ticks
            initial_delay_seconds: Delay of the first tick after start();
                None means one interval
            timer_factory: threading.Timer compatible constructor
        """
        self.tick = tick
        self.interval_minutes = interval_minutes
        self.initial_delay_seconds = initial_delay_seconds
        self._timer_factory = timer_factory
        self._timer = None
        self._generation = 0
        self._next_run_at: Optional[datetime] = None
        self._stopped = False
        self._lock = threading.Lock()

    @property
    def next_run_at(self) -> Optional[datetime]:
        with self._lock:
            return self._next_run_at

    def start(self) -> None:
        """Arm the first tick"""
        delay = self.initial_delay_seconds
        if delay is None:
            delay = self.interval_minutes * 60
        with self._lock:
            self._stopped = False
            self._arm(delay)
        logger.info(f"Auto-index scheduled: first run in {delay:.0f}s, "
                    f"then every {self.interval_minutes} minute(s)")

    def reschedule(self, interval_minutes: int) -> None:
        """Discard the pending tick and fire interval_minutes from now"""
        with self._lock:
            self.interval_minutes = interval_minutes
            if self._stopped:
                return
            self._arm(interval_minutes * 60)

    def stop(self) -> None:
        """Cancel the pending timer; no further ticks fire"""
        with self._lock:
            self._stopped = True
            self._generation += 1
            self._cancel()
            self._next_run_at = None

    def _arm(self, delay_seconds: float) -> None:
        """Replace the pending timer (caller holds the lock)"""
        self._cancel()
        self._generation += 1
        generation = self._generation
        timer = self._timer_factory(delay_seconds, self._fire, args=(generation,))
        timer.daemon = True
        self._timer = timer
        self._next_run_at = datetime.now(timezone.utc) + timedelta(seconds=delay_seconds)
        timer.start()

    def _cancel(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation or self._stopped:
                return
            self._timer = None
            self._next_run_at = None

        try:
            started = self.tick(SCHEDULED_REASON)
            if not started:
                logger.info("Scheduled indexing skipped: a run is already active")
        except Exception:
            logger.exception("Scheduled indexing tick failed")

        with self._lock:
            if generation == self._generation and not self._stopped:
                self._arm(self.interval_minutes * 60)

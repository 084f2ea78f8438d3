# Copyright (c) 2024 RAG-KB Contributors
# SPDX-License-Identifier: MIT

"""Services layer for the indexing engine.

- Single-flight background indexing (IndexCoordinator)
- Periodic auto-index timer (IndexScheduler)
- Status snapshot and runtime config (StatusPublisher)
"""

from .index_coordinator import IndexCoordinator
from .index_scheduler import IndexScheduler
from .index_status import IndexStatus, StatusPublisher

__all__ = ['IndexCoordinator', 'IndexScheduler', 'IndexStatus', 'StatusPublisher']

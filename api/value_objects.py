"""
Value objects for the namespace service.

Principles:
- Immutable data structures
- Named instead of primitive types (no Primitive Obsession)
- Small, focused classes with single responsibility
"""

from dataclasses import dataclass, field
from typing import FrozenSet

@dataclass(frozen=True)
class IndexingStats:
    """Immutable statistics about an indexing run.

    Replaces dict usage like {'files': 0, 'chunks': 0}.
    """
    files: int = 0
    chunks: int = 0

    def add_file(self, chunks: int) -> 'IndexingStats':
        """Return new stats with file and chunks added."""
        return IndexingStats(
            files=self.files + 1,
            chunks=self.chunks + chunks
        )

    def __str__(self) -> str:
        return f"{self.files} files, {self.chunks} chunks"

@dataclass(frozen=True)
class FileIndexResult:
    """Point ids written for a single successfully indexed file."""
    file_path: str
    point_ids: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def chunk_count(self) -> int:
        return len(self.point_ids)

@dataclass(frozen=True)
class RollbackResult:
    """Outcome of a rollback request.

    reindex_triggered is False when reindexing was not requested, the engine
    is unavailable, or a run was already active (the request is dropped).
    """
    file_path: str
    rolled_back_to: int
    reindex_triggered: bool = False

"""Process-local vector store.

Keeps points in a dict guarded by a lock. Nothing survives a restart, so it
is meant for development setups without a Qdrant server and for tests.
"""

import threading
from typing import Dict, Iterable, List, Tuple

from pipeline.interfaces.vector_store import VectorPoint, VectorStoreInterface


class InMemoryVectorStore(VectorStoreInterface):
    """Dict-backed VectorStoreInterface implementation"""

    def __init__(self):
        self._points: Dict[str, VectorPoint] = {}
        self._dimension = None
        self._lock = threading.Lock()

    def ensure_collection(self, dimension: int) -> None:
        with self._lock:
            if self._dimension is None:
                self._dimension = dimension

    def upsert(self, points: List[VectorPoint]) -> None:
        with self._lock:
            for point in points:
                if self._dimension is not None and len(point.vector) != self._dimension:
                    raise ValueError(
                        f"Vector dimension {len(point.vector)} != collection dimension {self._dimension}"
                    )
                self._points[point.id] = point

    def list_points(self) -> Iterable[Tuple[str, str]]:
        with self._lock:
            return [(pid, p.file_path) for pid, p in self._points.items()]

    def delete(self, point_ids: List[str]) -> None:
        with self._lock:
            for pid in point_ids:
                self._points.pop(pid, None)

    def points_for(self, file_path: str) -> List[VectorPoint]:
        """Stored points of one file ordered by chunk index"""
        with self._lock:
            points = [p for p in self._points.values() if p.file_path == file_path]
        return sorted(points, key=lambda p: p.chunk_index)

    def __len__(self) -> int:
        with self._lock:
            return len(self._points)

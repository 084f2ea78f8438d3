"""Vector store interface: the external upsert/cleanup boundary.

Implementations translate connectivity failures into
VectorStoreUnavailableError, which the coordinator treats as fatal.
"""

import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple


def point_id(file_path: str, chunk_index: int) -> str:
    """Deterministic point id for (file_path, chunk_index)"""
    return str(uuid.uuid5(uuid.NAMESPACE_URL, f"{file_path}#{chunk_index}"))


@dataclass
class VectorPoint:
    """One embedded chunk keyed by (file_path, chunk_index)"""
    file_path: str
    chunk_index: int
    vector: List[float]
    text: str
    payload: Dict = field(default_factory=dict)

    @property
    def id(self) -> str:
        return point_id(self.file_path, self.chunk_index)


class VectorStoreInterface(ABC):
    """Interface for vector store backends."""

    @abstractmethod
    def ensure_collection(self, dimension: int) -> None:
        """Create the backing collection when missing."""
        pass

    @abstractmethod
    def upsert(self, points: List[VectorPoint]) -> None:
        """Insert or replace points by id."""
        pass

    @abstractmethod
    def list_points(self) -> Iterable[Tuple[str, str]]:
        """All stored (point_id, file_path) pairs."""
        pass

    @abstractmethod
    def delete(self, point_ids: List[str]) -> None:
        """Delete points by id; unknown ids are ignored."""
        pass

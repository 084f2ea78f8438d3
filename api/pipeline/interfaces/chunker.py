"""Chunker interface for text chunking strategies."""

from abc import ABC, abstractmethod
from typing import List

from domain_models import ChunkData


class ChunkerInterface(ABC):
    """Interface for text chunking implementations.

    Contract (Liskov Substitution):
        - chunkify() must return List[ChunkData] with dense chunk_index from 0
        - Empty or whitespace-only input returns an empty list
    """

    @abstractmethod
    def chunkify(self, source: str) -> List[ChunkData]:
        """Chunk source text into units sized for the embedder.

        Args:
            source: Source text to chunk

        Returns:
            List of chunks in document order
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of this chunker."""
        pass

"""Embedder interface for text embedding generation.

Defines the contract for embedding providers (SentenceTransformers, ...).
"""

from abc import ABC, abstractmethod
from typing import List


class EmbedderInterface(ABC):
    """Interface for text embedding implementations.

    Contract (Liskov Substitution):
        - embed() must return List[List[float]], one vector per input text
        - Each inner list has length == dimension
        - Empty input returns empty list
    """

    @abstractmethod
    def embed(self, texts: List[str]) -> List[List[float]]:
        """Generate embeddings for a list of texts.

        Args:
            texts: List of texts to embed

        Returns:
            List of embeddings (each is a list of floats with length == dimension)
        """
        pass

    @property
    @abstractmethod
    def dimension(self) -> int:
        """Embedding vector dimension."""
        pass

    @property
    @abstractmethod
    def model_name(self) -> str:
        """Name/identifier of the embedding model."""
        pass

"""SentenceTransformer embedder adapter.

Encodes texts in batches: sentence-transformers is optimized for batch
operations, encoding 32 texts at once is much faster than 32 individual
encode calls.
"""

import logging
import math
import time
from typing import List

import numpy as np

from pipeline.interfaces.embedder import EmbedderInterface

logger = logging.getLogger(__name__)


class SentenceTransformerEmbedder(EmbedderInterface):
    """Embedder implementation using SentenceTransformers."""

    def __init__(self, model, batch_size: int = 32, show_progress: bool = False):
        """Initialize with SentenceTransformer model.

        Args:
            model: SentenceTransformer model instance (or compatible encode())
            batch_size: Number of texts per batch (default 32, optimal for CPU)
            show_progress: Show the library's progress bar per batch
        """
        self._model = model
        self.batch_size = batch_size
        self.show_progress = show_progress

    @classmethod
    def load(cls, model_name: str, batch_size: int = 32,
             show_progress: bool = False) -> 'SentenceTransformerEmbedder':
        """Load a model by name and wrap it"""
        from sentence_transformers import SentenceTransformer

        logger.info(f"Loading embedding model: {model_name}")
        return cls(SentenceTransformer(model_name), batch_size, show_progress)

    def embed(self, texts: List[str]) -> List[List[float]]:
        """Encode texts in batches.

        Args:
            texts: List of texts to encode

        Returns:
            List of embeddings (each is a list of floats)
        """
        if not texts:
            return []

        total_batches = math.ceil(len(texts) / self.batch_size)
        result = []
        for batch_num in range(total_batches):
            batch = texts[batch_num * self.batch_size:(batch_num + 1) * self.batch_size]
            result.extend(self._encode_batch(batch))
        return result

    def _encode_batch(self, texts: List[str]) -> List[List[float]]:
        start_time = time.perf_counter()
        embeddings = self._model.encode(
            texts,
            show_progress_bar=self.show_progress,
            convert_to_numpy=True,
            normalize_embeddings=True
        )
        elapsed = time.perf_counter() - start_time
        logger.debug(f"Encoded {len(texts)} texts in {elapsed:.3f}s")
        return np.asarray(embeddings, dtype=np.float32).tolist()

    @property
    def dimension(self) -> int:
        """Embedding vector dimension."""
        return self._model.get_sentence_embedding_dimension()

    @property
    def model_name(self) -> str:
        """Name/identifier of the embedding model."""
        # SentenceTransformer models have a _name_or_path attribute
        return getattr(self._model, '_name_or_path', 'unknown')

"""Vector store backends for the indexing pipeline.

Available backends:
- QdrantVectorStore: Qdrant server via qdrant-client (default)
- InMemoryVectorStore: Process-local store for development and tests
"""

from pipeline.vector_stores.memory_store import InMemoryVectorStore
from pipeline.vector_stores.qdrant_store import QdrantVectorStore

__all__ = ['InMemoryVectorStore', 'QdrantVectorStore']

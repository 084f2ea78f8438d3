"""Pipeline interfaces for the indexing engine.

Provides abstract base classes for pipeline components:
- ExtractorInterface: Document text extraction
- ChunkerInterface: Text chunking strategies
- EmbedderInterface: Text embedding generation
- VectorStoreInterface: Vector upsert/cleanup boundary

Depend on abstractions, not concretions: the coordinator only talks to
these interfaces, so every external service is swappable in tests.
"""

from pipeline.interfaces.extractor import ExtractorInterface
from pipeline.interfaces.chunker import ChunkerInterface
from pipeline.interfaces.embedder import EmbedderInterface
from pipeline.interfaces.vector_store import VectorPoint, VectorStoreInterface

__all__ = [
    'ExtractorInterface',
    'ChunkerInterface',
    'EmbedderInterface',
    'VectorPoint',
    'VectorStoreInterface',
]

"""Chunker implementations for the indexing pipeline.

Available chunkers:
- FixedChunker: Fixed-size character chunking with overlap
"""

from pipeline.chunkers.fixed_chunker import FixedChunker

__all__ = ['FixedChunker']

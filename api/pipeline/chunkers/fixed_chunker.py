"""Fixed-size chunker for simple character-based splitting.

Splits text into chunks of at most `max_chars` characters, preferring to
break at paragraph, line, sentence or word boundaries, with `overlap_chars`
of context carried into the next chunk.
"""

import logging
from typing import List

from domain_models import ChunkData
from pipeline.interfaces.chunker import ChunkerInterface

logger = logging.getLogger(__name__)

# Sentence terminators, CJK full-width first
SENTENCE_BREAKS = ("。", "？", "！", ". ", "? ", "! ")


class FixedChunker(ChunkerInterface):
    """Fixed-size character chunker.

    Best for:
    - Mixed-format corpora where structure is not reliable
    - Text that mixes Latin and CJK scripts
    """

    def __init__(self, max_chars: int = 1000, overlap_chars: int = 200):
        """Initialize fixed chunker.

        Args:
            max_chars: Maximum characters per chunk (default: 1000)
            overlap_chars: Character overlap between chunks (default: 200)
        """
        if max_chars <= 0:
            raise ValueError("max_chars must be positive")
        if not 0 <= overlap_chars < max_chars:
            raise ValueError("overlap_chars must be in [0, max_chars)")
        self.max_chars = max_chars
        self.overlap_chars = overlap_chars

    @property
    def name(self) -> str:
        return "fixed"

    def chunkify(self, source: str) -> List[ChunkData]:
        """Chunk text into fixed-size pieces.

        Args:
            source: Source text to chunk

        Returns:
            List of ChunkData with dense chunk_index
        """
        text = (source or "").strip()
        if not text:
            return []
        if len(text) <= self.max_chars:
            return [ChunkData(content=text, chunk_index=0)]

        chunks: List[ChunkData] = []
        start = 0
        while start < len(text):
            end = min(start + self.max_chars, len(text))
            if end < len(text):
                end = self._find_break_point(text, start, end)

            chunk_text = text[start:end].strip()
            if chunk_text:
                chunks.append(ChunkData(content=chunk_text, chunk_index=len(chunks)))
            if end >= len(text):
                break

            # Step back by the overlap, but always make progress
            next_start = end - self.overlap_chars
            start = next_start if next_start > start else end

        logger.debug(f"Split {len(text)} chars into {len(chunks)} chunks")
        return chunks

    @staticmethod
    def _find_break_point(text: str, start: int, max_end: int) -> int:
        """Find a good break point in text[start:max_end].

        Prefers breaking at:
        1. Paragraph breaks (double newline)
        2. Line breaks
        3. Sentence endings
        4. Word boundaries (spaces)
        """
        para_break = text.rfind('\n\n', start, max_end)
        if para_break > start:
            return para_break + 2

        line_break = text.rfind('\n', start, max_end)
        if line_break > start:
            return line_break + 1

        for punct in SENTENCE_BREAKS:
            sent_break = text.rfind(punct, start, max_end)
            if sent_break > start:
                return sent_break + len(punct)

        space = text.rfind(' ', start, max_end)
        if space > start:
            return space + 1

        # Last resort: hard break at the limit
        return max_end

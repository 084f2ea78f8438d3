"""Per-file document processing: extract, chunk, embed

Turns one namespace file into the VectorPoints that represent it in the
vector store. Storage is left to the caller.
"""
import logging
from pathlib import Path
from typing import List

from domain_models import ChunkData, FileFormat
from pipeline.interfaces.vector_store import VectorPoint

logger = logging.getLogger(__name__)


class DocumentProcessor:
    """Coordinates extraction, chunking and embedding for one file"""

    def __init__(self, extractor, chunker, embedder):
        """
        Args:
            extractor: ExtractionRouter (or anything with extract(path, format))
            chunker: ChunkerInterface implementation
            embedder: EmbedderInterface implementation
        """
        self.extractor = extractor
        self.chunker = chunker
        self.embedder = embedder

    def process_file(self, file_path: str, disk_path: Path) -> List[VectorPoint]:
        """Build vector points for the file at namespace path file_path

        A file whose extracted text is empty yields no points.

        Raises:
            ExtractionError: If the file cannot be parsed
        """
        file_format = FileFormat.from_path(file_path)
        result = self.extractor.extract(disk_path, file_format)
        chunks = self._chunk(result.text)
        if not chunks:
            logger.info(f"No text extracted from {file_path}")
            return []

        vectors = self.embedder.embed([chunk.content for chunk in chunks])
        return [
            VectorPoint(
                file_path=file_path,
                chunk_index=chunk.chunk_index,
                vector=vector,
                text=chunk.content,
                payload={
                    "format": file_format.value if file_format else None,
                    "extraction_method": result.method,
                },
            )
            for chunk, vector in zip(chunks, vectors)
        ]

    def _chunk(self, text: str) -> List[ChunkData]:
        if not text.strip():
            return []
        return self.chunker.chunkify(text)

"""Component factory for creating indexing engine objects"""

import logging

from config import default_config
from ingestion import DocumentProcessor, ExtractionRouter
from pipeline.chunkers import FixedChunker
from pipeline.embedders import SentenceTransformerEmbedder
from pipeline.vector_stores import InMemoryVectorStore, QdrantVectorStore

logger = logging.getLogger(__name__)


class ComponentFactory:
    """Creates engine components from configuration

    Design principles:
    - Single responsibility: object creation
    - Small methods
    - Dependency injection pattern
    """

    def __init__(self, config=default_config):
        self.config = config

    def create_embedder(self):
        """Load the SentenceTransformer model"""
        cfg = self.config.embedding
        logger.info(f"Loading embedding model {cfg.model_name}")
        return SentenceTransformerEmbedder.load(
            cfg.model_name,
            batch_size=cfg.batch_size,
            show_progress=cfg.show_progress,
        )

    def create_vector_store(self):
        """Create the configured vector store backend"""
        cfg = self.config.vector_store
        if cfg.backend == "memory":
            logger.warning("Using in-memory vector store; points are lost on restart")
            return InMemoryVectorStore()
        return QdrantVectorStore(
            url=cfg.url,
            collection=cfg.collection,
            api_key=cfg.api_key,
            timeout_seconds=cfg.timeout_seconds,
            retry_attempts=cfg.retry_attempts,
        )

    def create_chunker(self):
        return FixedChunker(max_chars=self.config.chunks.size, overlap_chars=self.config.chunks.overlap)

    def create_processor(self, embedder):
        return DocumentProcessor(ExtractionRouter(), self.create_chunker(), embedder)

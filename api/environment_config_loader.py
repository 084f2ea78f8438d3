"""
Environment configuration loader.

Logic for reading environment variables lives with the data source
(environment) rather than in the Config dataclasses.
"""
import os
from pathlib import Path

from config import (
    Config, PathConfig, IndexingConfig, ChunkConfig, EmbeddingConfig,
    VectorStoreConfig, VersionConfig, LoggingConfig
)

class EnvironmentConfigLoader:
    """Loads configuration from environment variables.

    Single Responsibility: Environment access logic.
    """

    def __init__(self, environ=None):
        self.environ = os.environ if environ is None else environ

    def load(self) -> Config:
        """Create Config from environment variables"""
        return Config(
            paths=self._load_path_config(),
            indexing=self._load_indexing_config(),
            chunks=self._load_chunk_config(),
            embedding=self._load_embedding_config(),
            vector_store=self._load_vector_store_config(),
            versions=self._load_version_config(),
            logging=self._load_logging_config()
        )

    def _load_path_config(self) -> PathConfig:
        """Load upload directory from environment"""
        return PathConfig(
            upload_dir=Path(self._get_optional("UPLOAD_DIR", str(PathConfig.upload_dir)))
        )

    def _load_indexing_config(self) -> IndexingConfig:
        """Load background indexing configuration from environment"""
        return IndexingConfig(
            auto_index_interval_minutes=self._get_int("AUTO_INDEX_INTERVAL_MINUTES", 60),
            initial_delay_seconds=self._get_float("INDEX_INITIAL_DELAY_SECONDS", 60.0),
            shutdown_grace_seconds=self._get_float("SHUTDOWN_GRACE_SECONDS", 30.0)
        )

    def _load_chunk_config(self) -> ChunkConfig:
        """Load chunking configuration from environment"""
        return ChunkConfig(
            size=self._get_int("CHUNK_SIZE", 1000),
            overlap=self._get_int("CHUNK_OVERLAP", 200)
        )

    def _load_embedding_config(self) -> EmbeddingConfig:
        """Load embedding model configuration from environment"""
        return EmbeddingConfig(
            model_name=self._get_optional("MODEL_NAME", EmbeddingConfig.model_name),
            batch_size=self._get_int("EMBEDDING_BATCH_SIZE", 32),
            show_progress=self._get_bool("EMBEDDING_SHOW_PROGRESS", False)
        )

    def _load_vector_store_config(self) -> VectorStoreConfig:
        """Load vector store connection settings from environment"""
        return VectorStoreConfig(
            backend=self._get_optional("VECTOR_STORE", "qdrant").lower(),
            url=self._get_optional("QDRANT_URL", VectorStoreConfig.url),
            api_key=self._get_optional("QDRANT_API_KEY", ""),
            collection=self._get_optional("QDRANT_COLLECTION", VectorStoreConfig.collection),
            timeout_seconds=self._get_float("QDRANT_TIMEOUT_SECONDS", 10.0),
            retry_attempts=self._get_int("QDRANT_RETRY_ATTEMPTS", 3)
        )

    def _load_version_config(self) -> VersionConfig:
        """Load version history configuration from environment"""
        return VersionConfig(
            max_versions=self._get_int("MAX_VERSIONS", 10)
        )

    def _load_logging_config(self) -> LoggingConfig:
        """Load logging configuration from environment"""
        return LoggingConfig(
            level=self._get_optional("LOG_LEVEL", "INFO").upper()
        )

    def _get_optional(self, key: str, default: str) -> str:
        """Get optional string environment variable"""
        return self.environ.get(key, default)

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable"""
        value = self.environ.get(key, str(default).lower())
        return value.lower() == "true"

    def _get_int(self, key: str, default: int) -> int:
        """Get integer environment variable"""
        value = self.environ.get(key, str(default))
        return int(value)

    def _get_float(self, key: str, default: float) -> float:
        """Get float environment variable"""
        value = self.environ.get(key, str(default))
        return float(value)

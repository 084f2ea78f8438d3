"""
Configuration constants for the RAG document namespace service
"""
from pathlib import Path
from dataclasses import dataclass, field

VERSIONS_DIR_NAME = ".versions"

@dataclass
class PathConfig:
    """File path configuration"""
    upload_dir: Path = Path("/app/uploads")

@dataclass
class IndexingConfig:
    """Background indexing configuration"""
    auto_index_interval_minutes: int = 60
    initial_delay_seconds: float = 60.0  # Let services settle before the first scheduled run
    shutdown_grace_seconds: float = 30.0

@dataclass
class ChunkConfig:
    """Text chunking configuration (characters)"""
    size: int = 1000
    overlap: int = 200

@dataclass
class EmbeddingConfig:
    """Embedding model configuration"""
    model_name: str = "BAAI/bge-small-en-v1.5"
    batch_size: int = 32
    show_progress: bool = False

@dataclass
class VectorStoreConfig:
    """Vector store boundary configuration

    backend: 'qdrant' (default) or 'memory' (process-local, for development)
    """
    backend: str = "qdrant"
    url: str = "http://localhost:6333"
    api_key: str = ""
    collection: str = "documents"
    timeout_seconds: float = 10.0
    retry_attempts: int = 3

@dataclass
class VersionConfig:
    """File version history configuration"""
    max_versions: int = 10

@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "INFO"

@dataclass
class Config:
    """Main configuration container"""
    paths: PathConfig = field(default_factory=PathConfig)
    indexing: IndexingConfig = field(default_factory=IndexingConfig)
    chunks: ChunkConfig = field(default_factory=ChunkConfig)
    embedding: EmbeddingConfig = field(default_factory=EmbeddingConfig)
    vector_store: VectorStoreConfig = field(default_factory=VectorStoreConfig)
    versions: VersionConfig = field(default_factory=VersionConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> 'Config':
        """Create config from environment - delegates to EnvironmentConfigLoader"""
        from environment_config_loader import EnvironmentConfigLoader
        return EnvironmentConfigLoader().load()

# Default instance
default_config = Config.from_env()

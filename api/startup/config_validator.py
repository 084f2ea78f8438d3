"""
Configuration validator for startup checks.

Validates configuration settings early to provide clear error messages
before the application attempts to use invalid paths or settings.
"""
import logging
import os
from typing import List

logger = logging.getLogger(__name__)

SUPPORTED_VECTOR_STORES = ("qdrant", "memory")


class ConfigValidationError(Exception):
    """Configuration validation failed"""
    pass


class ConfigValidator:
    """Validates configuration settings on startup"""

    def __init__(self, config):
        self.config = config
        self.errors: List[str] = []

    def validate(self) -> None:
        """Validate all configuration settings

        Raises:
            ConfigValidationError: If validation fails
        """
        self._validate_upload_dir()
        self._validate_indexing()
        self._validate_chunks()
        self._validate_versions()
        self._validate_vector_store()

        if self.errors:
            error_msg = "Configuration validation failed:\n" + "\n".join(
                f"  - {error}" for error in self.errors
            )
            raise ConfigValidationError(error_msg)

    def _validate_upload_dir(self) -> None:
        """Validate upload directory, creating it when missing"""
        upload_dir = self.config.paths.upload_dir

        if upload_dir.exists() and not upload_dir.is_dir():
            self.errors.append(
                f"Upload path is not a directory: {upload_dir}\n"
                f"    Update UPLOAD_DIR to point to a directory"
            )
            return

        if not upload_dir.exists():
            self._create_upload_dir(upload_dir)
            return

        if not os.access(upload_dir, os.W_OK):
            self.errors.append(
                f"Upload directory is not writable: {upload_dir}\n"
                f"    Fix with: chmod +w {upload_dir}"
            )

    def _create_upload_dir(self, upload_dir):
        """Create upload directory if it doesn't exist"""
        try:
            upload_dir.mkdir(parents=True, exist_ok=True)
            logger.info(f"Created upload directory: {upload_dir}")
        except PermissionError:
            self.errors.append(
                f"Cannot create upload directory (permission denied): {upload_dir}\n"
                f"    Fix with: sudo mkdir -p {upload_dir} && sudo chown $USER {upload_dir}"
            )
        except OSError as e:
            self.errors.append(
                f"Cannot create upload directory: {upload_dir}\n"
                f"    Error: {e}"
            )

    def _validate_indexing(self) -> None:
        """Validate scheduling settings"""
        indexing = self.config.indexing
        if indexing.auto_index_interval_minutes <= 0:
            self.errors.append(
                f"AUTO_INDEX_INTERVAL_MINUTES must be positive, got {indexing.auto_index_interval_minutes}"
            )
        if indexing.initial_delay_seconds < 0:
            self.errors.append(
                f"INDEX_INITIAL_DELAY_SECONDS must not be negative, got {indexing.initial_delay_seconds}"
            )
        if indexing.shutdown_grace_seconds < 0:
            self.errors.append(
                f"SHUTDOWN_GRACE_SECONDS must not be negative, got {indexing.shutdown_grace_seconds}"
            )

    def _validate_chunks(self) -> None:
        """Validate chunk size and overlap"""
        chunks = self.config.chunks
        if chunks.size <= 0:
            self.errors.append(f"CHUNK_SIZE must be positive, got {chunks.size}")
        elif not 0 <= chunks.overlap < chunks.size:
            self.errors.append(
                f"CHUNK_OVERLAP must be between 0 and CHUNK_SIZE ({chunks.size}), got {chunks.overlap}"
            )

    def _validate_versions(self) -> None:
        """Validate version cap"""
        if self.config.versions.max_versions <= 0:
            self.errors.append(
                f"MAX_VERSIONS must be positive, got {self.config.versions.max_versions}"
            )

    def _validate_vector_store(self) -> None:
        """Validate vector store backend name"""
        backend = self.config.vector_store.backend
        if backend not in SUPPORTED_VECTOR_STORES:
            self.errors.append(
                f"Unknown VECTOR_STORE '{backend}'. Supported: {', '.join(SUPPORTED_VECTOR_STORES)}"
            )

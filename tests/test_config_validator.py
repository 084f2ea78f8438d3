"""
Tests for configuration validator
"""
import os
from dataclasses import replace

import pytest

from config import ChunkConfig, Config, IndexingConfig, PathConfig, VectorStoreConfig, VersionConfig
from startup.config_validator import ConfigValidationError, ConfigValidator


def _config(tmp_path, **sections) -> Config:
    config = Config(paths=PathConfig(upload_dir=tmp_path / "uploads"))
    return replace(config, **sections)


def test_valid_config_passes(tmp_path):
    """Valid configuration passes and the upload dir is created"""
    config = _config(tmp_path)

    ConfigValidator(config).validate()

    assert (tmp_path / "uploads").is_dir()


def test_upload_path_is_a_file(tmp_path):
    """Upload path pointing at a file fails"""
    upload = tmp_path / "uploads"
    upload.write_text("not a dir")

    with pytest.raises(ConfigValidationError) as exc_info:
        ConfigValidator(_config(tmp_path)).validate()

    assert "not a directory" in str(exc_info.value)


@pytest.mark.skipif(os.geteuid() == 0, reason="root ignores directory permissions")
def test_upload_dir_not_writable(tmp_path):
    """Read-only upload directory fails"""
    upload = tmp_path / "uploads"
    upload.mkdir()
    upload.chmod(0o500)
    try:
        with pytest.raises(ConfigValidationError) as exc_info:
            ConfigValidator(_config(tmp_path)).validate()
        assert "not writable" in str(exc_info.value)
    finally:
        upload.chmod(0o700)


@pytest.mark.parametrize("indexing", [
    IndexingConfig(auto_index_interval_minutes=0),
    IndexingConfig(initial_delay_seconds=-1),
    IndexingConfig(shutdown_grace_seconds=-1),
])
def test_invalid_indexing_settings(tmp_path, indexing):
    with pytest.raises(ConfigValidationError):
        ConfigValidator(_config(tmp_path, indexing=indexing)).validate()


@pytest.mark.parametrize("chunks", [
    ChunkConfig(size=0, overlap=0),
    ChunkConfig(size=100, overlap=100),
    ChunkConfig(size=100, overlap=-1),
])
def test_invalid_chunk_settings(tmp_path, chunks):
    with pytest.raises(ConfigValidationError):
        ConfigValidator(_config(tmp_path, chunks=chunks)).validate()


def test_invalid_max_versions(tmp_path):
    with pytest.raises(ConfigValidationError):
        ConfigValidator(_config(tmp_path, versions=VersionConfig(max_versions=0))).validate()


def test_unknown_vector_store(tmp_path):
    with pytest.raises(ConfigValidationError) as exc_info:
        ConfigValidator(_config(tmp_path, vector_store=VectorStoreConfig(backend="pinecone"))).validate()

    assert "pinecone" in str(exc_info.value)


def test_all_errors_reported_together(tmp_path):
    config = _config(
        tmp_path,
        versions=VersionConfig(max_versions=0),
        vector_store=VectorStoreConfig(backend="pinecone"),
    )

    with pytest.raises(ConfigValidationError) as exc_info:
        ConfigValidator(config).validate()

    message = str(exc_info.value)
    assert "MAX_VERSIONS" in message
    assert "VECTOR_STORE" in message

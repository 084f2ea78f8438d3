"""
Tests for StartupManager wiring
"""
from dataclasses import replace

import pytest

from app_state import AppState
from config import VersionConfig
from errors import EngineUnavailableError
from startup import ComponentFactory, StartupManager
from startup.config_validator import ConfigValidationError


@pytest.fixture
def fake_factory(test_config, embedder_factory):
    class FakeFactory(ComponentFactory):
        def create_embedder(self):
            return embedder_factory()
    return FakeFactory(test_config)


@pytest.fixture
def broken_factory(test_config):
    class BrokenFactory(ComponentFactory):
        def create_embedder(self):
            raise OSError("model download failed")
    return BrokenFactory(test_config)


class TestInitialize:
    """Test successful startup"""

    def test_builds_all_components(self, test_config, fake_factory, timer_factory):
        state = AppState()

        StartupManager(state, config=test_config, factory=fake_factory, timer_factory=timer_factory).initialize()

        assert state.is_engine_available()
        assert state.get_store().root == test_config.paths.upload_dir.resolve()
        assert state.namespace.version_manager.reindexer is state.get_coordinator()
        assert state.get_status_publisher().get_status().upload_dir == str(test_config.paths.upload_dir)

    def test_scheduler_armed_with_initial_delay(self, test_config, fake_factory, timer_factory):
        state = AppState()

        StartupManager(state, config=test_config, factory=fake_factory, timer_factory=timer_factory).initialize()

        assert timer_factory.last.interval == test_config.indexing.initial_delay_seconds
        assert state.get_status_publisher().get_status().next_run_at is not None

    def test_invalid_config_aborts(self, test_config, fake_factory, timer_factory):
        config = replace(test_config, versions=VersionConfig(max_versions=0))

        with pytest.raises(ConfigValidationError):
            StartupManager(AppState(), config=config, factory=fake_factory,
                           timer_factory=timer_factory).initialize()


class TestEngineUnavailable:
    """Test startup when the engine cannot be built"""

    def test_file_management_still_works(self, test_config, broken_factory, timer_factory):
        state = AppState()

        StartupManager(state, config=test_config, factory=broken_factory, timer_factory=timer_factory).initialize()

        assert not state.is_engine_available()
        assert "model download failed" in state.engine_unavailable_message()
        state.get_store().create_or_update_file("a.txt", "content")
        assert state.request_reindex("write:a.txt") is False
        assert timer_factory.timers == []

    def test_engine_accessors_raise(self, test_config, broken_factory, timer_factory):
        state = AppState()
        StartupManager(state, config=test_config, factory=broken_factory, timer_factory=timer_factory).initialize()

        with pytest.raises(EngineUnavailableError):
            state.get_coordinator()
        with pytest.raises(EngineUnavailableError):
            state.get_status_publisher()


class TestShutdown:
    """Test shutdown"""

    def test_shutdown_cancels_timer(self, test_config, fake_factory, timer_factory):
        state = AppState()
        manager = StartupManager(state, config=test_config, factory=fake_factory, timer_factory=timer_factory)
        manager.initialize()

        manager.shutdown()

        assert timer_factory.last.cancelled
        assert state.request_reindex("scheduled") is False

    def test_shutdown_without_engine(self, test_config, broken_factory, timer_factory):
        state = AppState()
        manager = StartupManager(state, config=test_config, factory=broken_factory, timer_factory=timer_factory)
        manager.initialize()

        manager.shutdown()

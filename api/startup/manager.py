"""Startup manager - orchestrates application initialization.

Facade over focused phase classes:
- Configuration: validate config
- Namespace: ledger, store, version manager, uploader
- Component: status publisher, embedder, vector store, processor
- Indexing: coordinator and periodic scheduler
"""
import logging

from app_state import AppState
from config import default_config
from startup.component_factory import ComponentFactory
from startup.phases import (
    ConfigurationPhase,
    NamespacePhase,
    ComponentPhase,
    IndexingPhase,
)

logger = logging.getLogger(__name__)


class StartupManager:
    """Manages application startup and shutdown."""

    def __init__(self, app_state: AppState, config=default_config,
                 factory: ComponentFactory = None, timer_factory=None):
        self.state = app_state
        self.config = config
        self._config_phase = ConfigurationPhase(config)
        self._namespace_phase = NamespacePhase(app_state, config)
        self._component_phase = ComponentPhase(app_state, config, factory or ComponentFactory(config))
        self._indexing_phase = IndexingPhase(app_state, config, timer_factory)

    def initialize(self):
        """Initialize all components"""
        logger.info("Initializing RAG namespace service...")
        self._config_phase.execute()
        self._namespace_phase.execute()
        self._component_phase.init_status()
        if self._component_phase.init_engine():
            self._indexing_phase.execute()
            self._indexing_phase.start()
            logger.info("RAG namespace service ready")
        else:
            logger.warning(f"RAG namespace service ready without indexing: "
                           f"{self.state.engine_unavailable_message()}")

    def shutdown(self):
        """Stop the scheduler and give an active run the grace period to stop"""
        grace = self.config.indexing.shutdown_grace_seconds
        if not self.state.shutdown(grace):
            logger.warning("Shutdown proceeding with indexing run still active")

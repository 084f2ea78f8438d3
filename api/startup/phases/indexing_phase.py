"""Indexing phase.

Wires the coordinator and periodic scheduler once the engine is built.
"""
import logging

from services import IndexCoordinator, IndexScheduler

logger = logging.getLogger(__name__)


class IndexingPhase:
    """Creates the single-flight coordinator and its timer."""

    def __init__(self, state, config, timer_factory=None):
        """
        Args:
            state: AppState instance
            config: Application configuration
            timer_factory: Optional threading.Timer replacement for the scheduler
        """
        self.state = state
        self.config = config
        self.timer_factory = timer_factory

    def execute(self):
        engine = self.state.engine
        indexing = self.state.indexing
        indexing.coordinator = IndexCoordinator(
            store=self.state.namespace.store,
            processor=engine.processor,
            vector_store=engine.vector_store,
            status=indexing.status,
            dimension=engine.embedder.dimension,
        )
        self.state.namespace.version_manager.reindexer = indexing.coordinator

        kwargs = {}
        if self.timer_factory is not None:
            kwargs['timer_factory'] = self.timer_factory
        indexing.scheduler = IndexScheduler(
            tick=indexing.coordinator.request_reindex,
            interval_minutes=indexing.status.interval_minutes,
            initial_delay_seconds=self.config.indexing.initial_delay_seconds,
            **kwargs,
        )
        indexing.status.attach_scheduler(indexing.scheduler)

    def start(self):
        """Arm the periodic timer"""
        self.state.start_scheduler()

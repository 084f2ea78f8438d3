"""Component initialization phase.

Builds the indexing engine: embedding model, vector store and per-file
processor. A failure leaves the engine unavailable instead of aborting
startup, so file management keeps working.
"""
import logging

from services import StatusPublisher

logger = logging.getLogger(__name__)


class ComponentPhase:
    """Initializes the status publisher and engine components."""

    def __init__(self, state, config, factory):
        """Initialize with application state.

        Args:
            state: AppState instance to populate with components
            config: Application configuration
            factory: ComponentFactory creating the engine objects
        """
        self.state = state
        self.config = config
        self.factory = factory

    def init_status(self):
        self.state.indexing.status = StatusPublisher(
            upload_dir=str(self.config.paths.upload_dir),
            interval_minutes=self.config.indexing.auto_index_interval_minutes,
        )

    def init_engine(self) -> bool:
        """Build embedder, vector store and processor; False on failure"""
        engine = self.state.engine
        try:
            engine.embedder = self.factory.create_embedder()
            engine.vector_store = self.factory.create_vector_store()
            engine.processor = self.factory.create_processor(engine.embedder)
        except Exception as e:
            # Any library failure here (model download, client setup) disables indexing only
            logger.exception("Indexing engine failed to initialize")
            engine.embedder = engine.vector_store = engine.processor = None
            engine.unavailable_reason = str(e) or type(e).__name__
            return False
        logger.info(f"Indexing engine ready (model: {engine.embedder.model_name}, "
                    f"vector store: {self.config.vector_store.backend})")
        return True

from typing import Optional

from errors import EngineUnavailableError


class NamespaceServices:
    """Document tree and version history

    Always available; file management keeps working when the indexing
    engine could not be built.
    """

    def __init__(self):
        self.ledger = None
        self.store = None
        self.version_manager = None
        self.uploader = None
        self.adapter = None  # AsyncNamespaceAdapter used by routes


class EngineServices:
    """Embedding model, vector store and per-file processor"""

    def __init__(self):
        self.embedder = None
        self.vector_store = None
        self.processor = None
        self.unavailable_reason: Optional[str] = None


class IndexingComponents:
    """Status publisher, single-flight coordinator and periodic timer"""

    def __init__(self):
        self.status = None
        self.coordinator = None
        self.scheduler = None


class AppState:
    """Application state container

    Composes focused state objects; delegation methods hide internal
    structure from route handlers (Law of Demeter).
    """

    def __init__(self):
        self.namespace = NamespaceServices()
        self.engine = EngineServices()
        self.indexing = IndexingComponents()

    # === Service Access Delegation (for route handlers) ===

    def get_namespace(self):
        """Get async namespace adapter for non-blocking file operations"""
        return self.namespace.adapter

    def get_store(self):
        """Get sync namespace store"""
        return self.namespace.store

    def get_coordinator(self):
        """Get index coordinator

        Raises:
            EngineUnavailableError: If the indexing engine failed to start
        """
        if self.indexing.coordinator is None:
            raise EngineUnavailableError(self.engine_unavailable_message())
        return self.indexing.coordinator

    def get_status_publisher(self):
        """Get status publisher

        Raises:
            EngineUnavailableError: If the indexing engine failed to start
        """
        if self.indexing.coordinator is None or self.indexing.status is None:
            raise EngineUnavailableError(self.engine_unavailable_message())
        return self.indexing.status

    # === State Access Delegation ===

    def is_engine_available(self) -> bool:
        return self.indexing.coordinator is not None

    def engine_unavailable_message(self) -> str:
        reason = self.engine.unavailable_reason or "not initialized"
        return f"Indexing engine unavailable: {reason}"

    def is_indexing_in_progress(self) -> bool:
        if self.indexing.status is None:
            return False
        return self.indexing.status.get_status().is_indexing

    def request_reindex(self, reason: str) -> bool:
        """Best-effort reindex after a mutation; False when not started"""
        if self.indexing.coordinator is None:
            return False
        return self.indexing.coordinator.request_reindex(reason)

    # === Lifecycle Management Delegation ===

    def start_scheduler(self):
        """Arm the periodic auto-index timer"""
        if self.indexing.scheduler:
            self.indexing.scheduler.start()

    def stop_scheduler(self):
        """Cancel the periodic auto-index timer"""
        if self.indexing.scheduler:
            self.indexing.scheduler.stop()

    def shutdown(self, grace_seconds: float = 30.0) -> bool:
        """Stop the timer and wait for an active run to stop"""
        self.stop_scheduler()
        if self.indexing.coordinator:
            return self.indexing.coordinator.shutdown(grace_seconds)
        return True

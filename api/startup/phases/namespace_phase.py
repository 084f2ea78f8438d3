"""Namespace initialization phase.

Builds the version ledger, the namespace store and the operations on top
of them. Nothing here depends on the indexing engine.
"""
import logging

from namespace import AsyncNamespaceAdapter, NamespaceStore, VersionLedger
from operations import FileUploader, VersionManager

logger = logging.getLogger(__name__)


class NamespacePhase:
    """Populates AppState.namespace"""

    def __init__(self, state, config):
        self.state = state
        self.config = config

    def execute(self):
        root = self.config.paths.upload_dir
        ns = self.state.namespace
        ns.ledger = VersionLedger(root, max_versions=self.config.versions.max_versions)
        ns.store = NamespaceStore(root, ns.ledger)
        ns.version_manager = VersionManager(ns.store, ns.ledger)
        ns.uploader = FileUploader(ns.store)
        ns.adapter = AsyncNamespaceAdapter(ns.store, ns.version_manager, ns.uploader)
        logger.info(f"Namespace ready at {root}")

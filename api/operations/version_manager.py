"""Version history and rollback for namespace files

Combines the live content owned by NamespaceStore with the snapshots owned
by VersionLedger, and optionally asks the index coordinator to reindex
after a rollback.
"""
import logging
from typing import Optional

from domain_models import FileHistory
from errors import NotFoundError
from namespace import paths
from value_objects import RollbackResult

logger = logging.getLogger(__name__)


def rollback_comment(version: int) -> str:
    return f"Auto-saved before rollback to v{version}"


class VersionManager:
    """History view and non-destructive rollback"""

    def __init__(self, store, ledger, reindexer=None):
        """
        Args:
            store: NamespaceStore owning live content
            ledger: VersionLedger owning snapshots
            reindexer: Optional object with request_reindex(reason) -> bool;
                None while the indexing engine is unavailable
        """
        self.store = store
        self.ledger = ledger
        self.reindexer = reindexer

    def get_history(self, path: str) -> FileHistory:
        """Current size/modified_at plus retained versions (ascending)

        Raises:
            NotFoundError: If no file exists at path
        """
        path = paths.normalize(path, allow_root=False)
        entry = self.store.stat_file(path)
        return FileHistory(
            file_path=path,
            current_size=entry.size,
            current_modified_at=entry.modified_at,
            versions=self.ledger.get_versions(path),
        )

    def rollback(self, path: str, version: int, reindex: bool = False) -> RollbackResult:
        """Restore a retained version as the live content

        The current live content is snapshotted first, so a rollback never
        destroys data and can itself be rolled back. The restored version
        becomes the live content and leaves the retained history.

        Raises:
            NotFoundError: If the file or the version does not exist
        """
        path = paths.normalize(path, allow_root=False)
        with self.store.write_lock():
            self.store.stat_file(path)
            content = self.ledger.read_version(path, version)
            self.store.create_or_update_file(path, content, comment=rollback_comment(version))
            self.ledger.discard_version(path, version)

        logger.info(f"Rolled back {path} to v{version}")
        return RollbackResult(
            file_path=path,
            rolled_back_to=version,
            reindex_triggered=self._request_reindex(path) if reindex else False,
        )

    def _request_reindex(self, path: str) -> bool:
        """Best-effort reindex; dropped when a run is active or the engine is down"""
        if self.reindexer is None:
            logger.info(f"Reindex after rollback of {path} skipped: indexing engine unavailable")
            return False
        return self.reindexer.request_reindex(f"rollback:{path}")

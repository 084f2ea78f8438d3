"""
Async adapter for the namespace using thread pool execution.

Wraps the sync NamespaceStore, VersionManager and FileUploader and provides
an async interface using asyncio.to_thread() so filesystem work never blocks
the event loop serving API requests.

Thread safety is provided by the store's write lock and the ledger's
internal lock.
"""

import asyncio
from typing import List, Tuple, Union

from domain_models import Entry, FileHistory
from value_objects import RollbackResult


class AsyncNamespaceAdapter:
    """Async facade over the namespace operations for route handlers"""

    def __init__(self, store, version_manager, uploader):
        """Initialize adapter.

        Args:
            store: NamespaceStore instance to wrap
            version_manager: VersionManager for history and rollback
            uploader: FileUploader for multipart uploads
        """
        self._store = store
        self._versions = version_manager
        self._uploader = uploader

    async def list(self, path: str = "") -> List[Entry]:
        return await asyncio.to_thread(self._store.list, path)

    async def create_directory(self, path: str) -> Entry:
        return await asyncio.to_thread(self._store.create_directory, path)

    async def create_or_update_file(self, path: str, content: Union[bytes, str]) -> Entry:
        return await asyncio.to_thread(self._store.create_or_update_file, path, content)

    async def delete(self, path: str) -> None:
        await asyncio.to_thread(self._store.delete, path)

    async def upload(self, directory: str, files: List[Tuple[str, bytes]]):
        return await asyncio.to_thread(self._uploader.upload, directory, files)

    async def get_history(self, path: str) -> FileHistory:
        return await asyncio.to_thread(self._versions.get_history, path)

    async def rollback(self, path: str, version: int,
                       reindex: bool = False) -> RollbackResult:
        return await asyncio.to_thread(self._versions.rollback, path, version, reindex)

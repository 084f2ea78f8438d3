"""Namespace layer: the document tree and its version history.

- Path rules (paths)
- Version history ring buffers (VersionLedger, VersionRing)
- File/directory CRUD (NamespaceStore)
- Non-blocking wrapper for API routes (AsyncNamespaceAdapter)
"""

from .ledger import VersionLedger, VersionRing
from .store import NamespaceStore
from .async_adapter import AsyncNamespaceAdapter

__all__ = ['VersionLedger', 'VersionRing', 'NamespaceStore', 'AsyncNamespaceAdapter']

"""Startup modules for component initialization.

Phase classes provide focused responsibilities for startup:
- ConfigurationPhase: config validation
- NamespacePhase: ledger, store, version manager, uploader
- ComponentPhase: status publisher and indexing engine
- IndexingPhase: coordinator and periodic scheduler
"""

from .component_factory import ComponentFactory
from .manager import StartupManager
from .phases import (
    ConfigurationPhase,
    NamespacePhase,
    ComponentPhase,
    IndexingPhase,
)

__all__ = [
    'ComponentFactory',
    'StartupManager',
    'ConfigurationPhase',
    'NamespacePhase',
    'ComponentPhase',
    'IndexingPhase',
]

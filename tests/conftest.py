"""
Pytest configuration and shared fixtures

Common fixtures used across multiple test files are defined here.
Engine components are replaced by the in-memory vector store and a
deterministic fake embedder so no model download or Qdrant server is needed.
"""
import hashlib
import sys
from pathlib import Path
from typing import List

import pytest

# Add api directory to path for imports
api_path = Path(__file__).parent.parent / "api"
sys.path.insert(0, str(api_path))

from config import Config, IndexingConfig, PathConfig, VectorStoreConfig  # noqa: E402
from pipeline.interfaces.embedder import EmbedderInterface  # noqa: E402


# =============================================================================
# Fakes
# =============================================================================

class FakeEmbedder(EmbedderInterface):
    """Deterministic embedder: vectors derived from a hash of the text.

    Texts containing fail_marker raise, to simulate per-file embedding errors.
    """

    def __init__(self, dimension: int = 8, fail_marker: str = None):
        self._dimension = dimension
        self.fail_marker = fail_marker
        self.calls = 0

    def embed(self, texts: List[str]) -> List[List[float]]:
        self.calls += 1
        vectors = []
        for text in texts:
            if self.fail_marker and self.fail_marker in text:
                raise RuntimeError("embedding failed")
            digest = hashlib.sha256(text.encode("utf-8")).digest()
            vectors.append([b / 255.0 for b in digest[:self._dimension]])
        return vectors

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def model_name(self) -> str:
        return "fake-embedder"


class FakeTimer:
    """threading.Timer stand-in that only fires when told to"""

    def __init__(self, interval, function, args=None, kwargs=None):
        self.interval = interval
        self.function = function
        self.args = args or ()
        self.kwargs = kwargs or {}
        self.daemon = False
        self.started = False
        self.cancelled = False
        self.fired = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        self.fired = True
        self.function(*self.args, **self.kwargs)


class FakeTimerFactory:
    """Records every timer created by the scheduler"""

    def __init__(self):
        self.timers: List[FakeTimer] = []

    def __call__(self, interval, function, args=None, kwargs=None):
        timer = FakeTimer(interval, function, args, kwargs)
        self.timers.append(timer)
        return timer

    @property
    def last(self) -> FakeTimer:
        return self.timers[-1]

    @property
    def armed(self) -> List[FakeTimer]:
        return [t for t in self.timers if t.started and not t.cancelled and not t.fired]


# =============================================================================
# Namespace Fixtures
# =============================================================================

@pytest.fixture
def upload_dir(tmp_path):
    """Empty upload directory"""
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def ledger(upload_dir):
    from namespace import VersionLedger
    return VersionLedger(upload_dir, max_versions=10)


@pytest.fixture
def store(upload_dir, ledger):
    from namespace import NamespaceStore
    return NamespaceStore(upload_dir, ledger)


# =============================================================================
# Engine Fixtures
# =============================================================================

@pytest.fixture
def fake_embedder():
    return FakeEmbedder()


@pytest.fixture
def memory_vector_store():
    from pipeline.vector_stores import InMemoryVectorStore
    return InMemoryVectorStore()


@pytest.fixture
def timer_factory():
    return FakeTimerFactory()


@pytest.fixture
def test_config(tmp_path):
    """Config pointing at a temporary upload dir with the in-memory store"""
    return Config(
        paths=PathConfig(upload_dir=tmp_path / "uploads"),
        indexing=IndexingConfig(auto_index_interval_minutes=60, initial_delay_seconds=60.0,
                                shutdown_grace_seconds=5.0),
        vector_store=VectorStoreConfig(backend="memory"),
    )


@pytest.fixture
def embedder_factory():
    """Build FakeEmbedder instances with custom options"""
    return FakeEmbedder

"""Version ledger: capped, append-only history of prior file contents.

Each file's history is a VersionRing, a fixed-capacity structure that evicts
its oldest record when a new one is appended past capacity. Version numbers
are a permanent per-file write counter and are never renumbered.

Storage layout under the upload directory:

    .versions/<namespace path>/meta.json   record metadata
    .versions/<namespace path>/v<N>.bin    content of version N
"""
import json
import logging
import os
import shutil
import threading
from collections import deque
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from config import VERSIONS_DIR_NAME
from domain_models import VersionRecord
from errors import NotFoundError

logger = logging.getLogger(__name__)

DEFAULT_MAX_VERSIONS = 10
META_FILE = "meta.json"


class VersionRing:
    """Fixed-capacity, ascending version history of one file"""

    def __init__(self, file_path: str, capacity: int = DEFAULT_MAX_VERSIONS,
                 records: Iterable[VersionRecord] = (), last_version: int = 0):
        self.file_path = file_path
        self.capacity = capacity
        self._records = deque(sorted(records, key=lambda r: r.version), maxlen=capacity)
        # Write counter; survives eviction and discards so numbers are never reused
        self.last_version = max([last_version] + [r.version for r in self._records])

    @property
    def next_version(self) -> int:
        return self.last_version + 1

    def append(self, record: VersionRecord) -> Optional[VersionRecord]:
        """Append a record, returning the evicted oldest record if any"""
        if record.version <= self.last_version:
            raise ValueError(
                f"Version {record.version} is not newer than {self.last_version}"
            )
        evicted = self._records[0] if len(self._records) == self.capacity else None
        self._records.append(record)
        self.last_version = record.version
        return evicted

    def get(self, version: int) -> Optional[VersionRecord]:
        for record in self._records:
            if record.version == version:
                return record
        return None

    def remove(self, version: int) -> Optional[VersionRecord]:
        record = self.get(version)
        if record is not None:
            self._records.remove(record)
        return record

    def records(self) -> List[VersionRecord]:
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def to_meta(self) -> dict:
        return {
            'max_versions': self.capacity,
            'last_version': self.last_version,
            'versions': [r.to_dict() for r in self._records],
        }


class VersionLedger:
    """Persistent per-file version rings keyed by namespace path

    Thread-safe: an internal lock guards the ring cache and the on-disk
    metadata. Callers that need several ledger calls to be atomic with a
    live-content write hold the namespace store's write lock.
    """

    def __init__(self, root: Path, max_versions: int = DEFAULT_MAX_VERSIONS):
        self.root = Path(root)
        self.versions_root = self.root / VERSIONS_DIR_NAME
        self.max_versions = max_versions
        self._rings: Dict[str, VersionRing] = {}
        self._lock = threading.Lock()

    # === Writes ===

    def record_version(self, path: str, content: bytes, comment: str) -> VersionRecord:
        """Snapshot content as the next version of path"""
        with self._lock:
            ring = self._ring(path)
            record = VersionRecord(
                file_path=path,
                version=ring.next_version,
                created_at=datetime.now(timezone.utc),
                size=len(content),
                comment=comment,
            )
            ver_dir = self._dir_for(path)
            ver_dir.mkdir(parents=True, exist_ok=True)
            self._write_atomic(self._blob_path(path, record.version), content)

            evicted = ring.append(record)
            if evicted is not None:
                self._blob_path(path, evicted.version).unlink(missing_ok=True)
                logger.debug(f"Evicted v{evicted.version} of {path}")
            self._write_meta(path, ring)
            return record

    def discard_version(self, path: str, version: int) -> bool:
        """Drop a single retained version; returns False if it was not present"""
        with self._lock:
            ring = self._ring(path)
            if ring.remove(version) is None:
                return False
            self._blob_path(path, version).unlink(missing_ok=True)
            self._write_meta(path, ring)
            return True

    def delete_history(self, path: str) -> None:
        """Delete the history of path and of every descendant path"""
        with self._lock:
            prefix = f"{path}/"
            for key in [k for k in self._rings if k == path or k.startswith(prefix)]:
                del self._rings[key]
            ver_dir = self._dir_for(path)
            if ver_dir.exists():
                shutil.rmtree(ver_dir)
            self._prune_empty_parents(ver_dir.parent)

    # === Reads ===

    def get_versions(self, path: str) -> List[VersionRecord]:
        with self._lock:
            return self._ring(path).records()

    def version_count(self, path: str) -> int:
        with self._lock:
            return len(self._ring(path))

    def read_version(self, path: str, version: int) -> bytes:
        """Stored content of a retained version

        Raises:
            NotFoundError: If the version is not retained for path
        """
        with self._lock:
            if self._ring(path).get(version) is None:
                raise NotFoundError(f"Version {version} not found for {path}")
            blob = self._blob_path(path, version)
            try:
                return blob.read_bytes()
            except FileNotFoundError:
                raise NotFoundError(f"Version file for v{version} of {path} is missing") from None

    # === Internals ===

    def _ring(self, path: str) -> VersionRing:
        """Cached ring for path, loaded from disk on first access (lock held)"""
        ring = self._rings.get(path)
        if ring is None:
            ring = self._load(path)
            self._rings[path] = ring
        return ring

    def _load(self, path: str) -> VersionRing:
        meta_path = self._dir_for(path) / META_FILE
        if not meta_path.is_file():
            return VersionRing(path, self.max_versions)

        data = json.loads(meta_path.read_text(encoding="utf-8"))
        records = sorted(
            (VersionRecord.from_dict(path, item) for item in data.get('versions', [])),
            key=lambda r: r.version,
        )
        # Honour a lowered cap for histories written under a larger one
        excess, kept = records[:-self.max_versions], records[-self.max_versions:]
        for record in excess:
            self._blob_path(path, record.version).unlink(missing_ok=True)
        ring = VersionRing(path, self.max_versions, kept, last_version=int(data.get('last_version', 0)))
        if excess:
            self._write_meta(path, ring)
        return ring

    def _write_meta(self, path: str, ring: VersionRing) -> None:
        payload = json.dumps(ring.to_meta(), indent=2).encode("utf-8")
        self._write_atomic(self._dir_for(path) / META_FILE, payload)

    def _dir_for(self, path: str) -> Path:
        return self.versions_root / path

    def _blob_path(self, path: str, version: int) -> Path:
        return self._dir_for(path) / f"v{version}.bin"

    def _prune_empty_parents(self, directory: Path) -> None:
        """Remove now-empty history directories up to the versions root"""
        while directory != self.versions_root and self.versions_root in directory.parents:
            try:
                directory.rmdir()
            except OSError:
                return
            directory = directory.parent

    @staticmethod
    def _write_atomic(target: Path, data: bytes) -> None:
        tmp = target.with_name(target.name + ".tmp")
        tmp.write_bytes(data)
        os.replace(tmp, target)

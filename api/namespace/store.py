"""Namespace store: hierarchical file/directory tree rooted at the upload dir.

Writes (create/update/delete) are serialized by a single re-entrant write
lock. Reads never take it, so listings and indexing walks are not blocked
behind writers for longer than a single filesystem call.
"""
import logging
import os
import shutil
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, List, Union

from domain_models import Entry, FileFormat
from errors import ConflictError, NotFoundError, PathValidationError
from namespace import paths
from namespace.ledger import VersionLedger

logger = logging.getLogger(__name__)

UPDATE_COMMENT = "Auto-saved before update"


class NamespaceStore:
    """CRUD over the namespace with path semantics

    Consults the version ledger before any overwrite of live content.
    """

    def __init__(self, root: Path, ledger: VersionLedger):
        self.resolver = paths.PathResolver(root)
        self.root = self.resolver.root
        self.ledger = ledger
        self._write_lock = threading.RLock()

    @contextmanager
    def write_lock(self) -> Iterator[None]:
        """Hold the global write lock across several store/ledger calls"""
        with self._write_lock:
            yield

    # === Writes ===

    def create_directory(self, path: str) -> Entry:
        """Create path and all missing ancestors (like mkdir -p)

        Raises:
            ConflictError: If a file exists at path or at an ancestor
        """
        path = paths.normalize(path, allow_root=False)
        with self._write_lock:
            for segment_path in paths.ancestors(path) + [path]:
                disk = self.resolver.resolve(segment_path)
                if disk.is_file():
                    raise ConflictError(f"A file already exists at '{segment_path}'")
                if not disk.exists():
                    disk.mkdir()
            logger.info(f"Created directory: {path}")
            return self._entry(path, self.resolver.resolve(path))

    def create_or_update_file(self, path: str, content: Union[bytes, str],
                              comment: str = UPDATE_COMMENT) -> Entry:
        """Create a file or overwrite it, snapshotting the previous content

        Raises:
            ConflictError: If a directory exists at path or a file at an ancestor
        """
        path = paths.normalize(path, allow_root=False)
        data = content.encode("utf-8") if isinstance(content, str) else bytes(content)
        with self._write_lock:
            disk = self.resolver.resolve(path)
            if disk.is_dir():
                raise ConflictError(f"A directory already exists at '{path}'")
            self._ensure_parents(path)

            if disk.is_file():
                self.ledger.record_version(path, disk.read_bytes(), comment)

            tmp = disk.with_name(disk.name + paths.TEMP_SUFFIX)
            tmp.write_bytes(data)
            os.replace(tmp, disk)
            logger.info(f"Wrote file: {path} ({len(data)} bytes)")
            return self._entry(path, disk)

    def delete(self, path: str) -> None:
        """Delete a file, or a directory with all descendants and their histories

        Raises:
            NotFoundError: If nothing exists at path
        """
        path = paths.normalize(path, allow_root=False)
        with self._write_lock:
            disk = self.resolver.resolve(path)
            if not disk.exists():
                raise NotFoundError(f"Path not found: {path}")
            if disk.is_dir():
                shutil.rmtree(disk)
            else:
                disk.unlink()
            self.ledger.delete_history(path)
            logger.info(f"Deleted: {path}")

    # === Reads ===

    def list(self, path: str = "") -> List[Entry]:
        """Immediate children of a directory, directories first then by name

        Raises:
            NotFoundError: If path does not exist or is a file
        """
        path = paths.normalize(path)
        disk = self.resolver.resolve(path)
        if not disk.is_dir():
            raise NotFoundError(f"Directory not found: {path or '/'}")

        entries = []
        for child in self._children(disk):
            try:
                entries.append(self._entry(paths.join(path, child.name), child))
            except FileNotFoundError:
                continue  # Removed between scandir and stat
        entries.sort(key=lambda e: (not e.is_dir, e.name))
        return entries

    def stat(self, path: str) -> Entry:
        path = paths.normalize(path)
        disk = self.resolver.resolve(path)
        if not disk.exists():
            raise NotFoundError(f"Path not found: {path}")
        return self._entry(path, disk)

    def stat_file(self, path: str) -> Entry:
        """Entry of an existing file

        Raises:
            NotFoundError: If path is absent or a directory
        """
        entry = self.stat(path)
        if entry.is_dir:
            raise NotFoundError(f"File not found: {path}")
        return entry

    def read_file(self, path: str) -> bytes:
        path = paths.normalize(path, allow_root=False)
        disk = self.resolver.resolve(path)
        if not disk.is_file():
            raise NotFoundError(f"File not found: {path}")
        return disk.read_bytes()

    def exists(self, path: str) -> bool:
        try:
            return self.resolver.resolve(paths.normalize(path)).exists()
        except PathValidationError:
            return False

    def walk_files(self, path: str = "") -> List[Entry]:
        """All files below path, depth-first in name order"""
        path = paths.normalize(path)
        disk = self.resolver.resolve(path)
        files: List[Entry] = []
        if disk.is_dir():
            self._walk(path, disk, files)
        return files

    def disk_path(self, path: str) -> Path:
        """Filesystem location of a namespace path (for format extractors)"""
        return self.resolver.resolve(paths.normalize(path))

    # === Internals ===

    def _walk(self, path: str, disk: Path, files: List[Entry]) -> None:
        for child in sorted(self._children(disk), key=lambda c: c.name):
            child_path = paths.join(path, child.name)
            try:
                if child.is_dir(follow_symlinks=False):
                    self._walk(child_path, Path(child.path), files)
                elif child.is_file():
                    files.append(self._file_entry(child_path, Path(child.path), with_versions=False))
            except FileNotFoundError:
                continue

    @staticmethod
    def _children(disk: Path) -> List[os.DirEntry]:
        with os.scandir(disk) as it:
            return [child for child in it if not paths.is_hidden(child.name)]

    def _ensure_parents(self, path: str) -> None:
        for ancestor in paths.ancestors(path):
            disk = self.resolver.resolve(ancestor)
            if disk.is_file():
                raise ConflictError(f"A file already exists at '{ancestor}'")
            if not disk.exists():
                disk.mkdir()

    def _entry(self, path: str, disk: Union[Path, os.DirEntry]) -> Entry:
        if disk.is_dir():
            return Entry(path=path, is_dir=True, modified_at=_mtime(disk.stat()))
        return self._file_entry(path, disk)

    def _file_entry(self, path: str, disk, with_versions: bool = True) -> Entry:
        stat = disk.stat()
        return Entry(
            path=path,
            is_dir=False,
            modified_at=_mtime(stat),
            size=stat.st_size,
            format=FileFormat.from_path(path),
            version_count=self.ledger.version_count(path) if with_versions else None,
        )


def _mtime(stat: os.stat_result) -> datetime:
    return datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc)

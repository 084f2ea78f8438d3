"""Upload handling

Writes uploaded files into a namespace directory through the store so that
overwrites are versioned like any other update.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from errors import PathValidationError
from namespace import paths

logger = logging.getLogger(__name__)


@dataclass
class UploadSummary:
    """Names written and the resulting file count of the target directory"""
    uploaded_files: List[str] = field(default_factory=list)
    total_files_in_dir: int = 0


class FileUploader:
    """Stores uploaded files under a target directory"""

    def __init__(self, store):
        self.store = store

    def upload(self, directory: str, files: List[Tuple[str, bytes]]) -> UploadSummary:
        """Write each (filename, content) pair into directory

        The target directory is created when missing. Client-side folder
        components in filenames are dropped.

        Raises:
            PathValidationError: If a filename is empty or reserved
            ConflictError: If a name collides with an existing directory
        """
        directory = paths.normalize(directory)
        summary = UploadSummary()
        if directory:
            self.store.create_directory(directory)

        for filename, content in files:
            name = self._safe_name(filename)
            self.store.create_or_update_file(paths.join(directory, name), content)
            summary.uploaded_files.append(name)

        summary.total_files_in_dir = sum(1 for e in self.store.list(directory) if not e.is_dir)
        logger.info(f"Uploaded {len(summary.uploaded_files)} file(s) to /{directory}")
        return summary

    @staticmethod
    def _safe_name(filename: str) -> str:
        name = (filename or "").replace("\\", "/").rsplit("/", 1)[-1].strip()
        if not name:
            raise PathValidationError("Uploaded file has no name")
        return paths.normalize(name, allow_root=False)

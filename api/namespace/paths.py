"""Namespace path rules.

Namespace paths are slash-separated, case-sensitive and relative to the
upload directory. The empty string denotes the root.
"""
from pathlib import Path

from config import VERSIONS_DIR_NAME
from errors import PathValidationError

TEMP_SUFFIX = ".tmp-write"


def normalize(raw: str, allow_root: bool = True) -> str:
    """Normalize a client-supplied path.

    Strips surrounding slashes and rejects traversal, empty segments and the
    reserved names (the versions directory and temporary write files).

    Raises:
        PathValidationError: If the path is malformed or denotes the root
            while allow_root is False
    """
    if raw is None:
        raw = ""
    if "\x00" in raw or "\\" in raw:
        raise PathValidationError(f"Invalid character in path: {raw!r}")

    path = raw.strip().strip("/")
    if not path:
        if not allow_root:
            raise PathValidationError("Path cannot be empty")
        return ""

    for segment in path.split("/"):
        if segment in ("", ".", ".."):
            raise PathValidationError(f"Invalid path segment in {raw!r}")
        if segment == VERSIONS_DIR_NAME:
            raise PathValidationError(f"'{VERSIONS_DIR_NAME}' is reserved")
        if segment.endswith(TEMP_SUFFIX):
            raise PathValidationError(f"Names ending in '{TEMP_SUFFIX}' are reserved")
    return path


def join(parent: str, name: str) -> str:
    """Join a namespace directory and a child name"""
    return f"{parent}/{name}" if parent else name


def ancestors(path: str) -> list[str]:
    """Proper ancestors of path, outermost first (root excluded)"""
    segments = path.split("/")
    return ["/".join(segments[:i]) for i in range(1, len(segments))]


def is_hidden(name: str) -> bool:
    """Names that live on disk but are not part of the namespace"""
    return name == VERSIONS_DIR_NAME or name.endswith(TEMP_SUFFIX)


class PathResolver:
    """Maps namespace paths onto the upload directory on disk"""

    def __init__(self, root: Path):
        self.root = Path(root).resolve()

    def resolve(self, path: str) -> Path:
        """Resolve a normalized namespace path inside the root

        Raises:
            PathValidationError: If the resolved path escapes the root
                (e.g. through a symlink)
        """
        target = (self.root / path) if path else self.root
        resolved = target.resolve()
        if resolved != self.root and self.root not in resolved.parents:
            raise PathValidationError("Path traversal not allowed")
        return target

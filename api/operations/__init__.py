"""Operations layer for the namespace service.

This package handles API-facing operations that span components:
- Version history and rollback (VersionManager)
- Multipart upload handling (FileUploader)

Principles:
- Single Responsibility Principle
- Dependency Injection
"""

from .version_manager import VersionManager
from .file_uploader import FileUploader

__all__ = ['VersionManager', 'FileUploader']

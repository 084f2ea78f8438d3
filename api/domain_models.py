"""Domain models for the document namespace and indexing pipeline"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional


class FileFormat(str, Enum):
    """Document formats recognised by the extraction layer"""
    PLAIN_TEXT = "PlainText"
    PDF = "Pdf"
    DOCX = "Docx"
    XLSX = "Xlsx"
    PPTX = "Pptx"

    @classmethod
    def from_extension(cls, extension: str) -> Optional['FileFormat']:
        """Map a file extension (with or without leading dot) to a format"""
        ext = extension.lower().lstrip('.')
        return _EXTENSION_FORMATS.get(ext)

    @classmethod
    def from_path(cls, path: str) -> Optional['FileFormat']:
        name = path.rsplit('/', 1)[-1]
        if '.' not in name:
            return None
        return cls.from_extension(name.rsplit('.', 1)[-1])


_EXTENSION_FORMATS = {
    **{ext: FileFormat.PLAIN_TEXT for ext in (
        'txt', 'md', 'rs', 'py', 'js', 'ts', 'json', 'yaml', 'yml', 'toml'
    )},
    'pdf': FileFormat.PDF,
    'docx': FileFormat.DOCX,
    'xlsx': FileFormat.XLSX,
    'pptx': FileFormat.PPTX,
}


@dataclass
class Entry:
    """A node in the namespace

    size, format and version_count are only meaningful for files.
    """
    path: str
    is_dir: bool
    modified_at: Optional[datetime] = None
    size: Optional[int] = None
    format: Optional[FileFormat] = None
    version_count: Optional[int] = None

    @property
    def name(self) -> str:
        return self.path.rsplit('/', 1)[-1]

    def to_dict(self) -> dict:
        """Convert to the wire shape used by listings"""
        return {
            'name': self.name,
            'path': self.path,
            'is_dir': self.is_dir,
            'size': self.size,
            'format': self.format.value if self.format else None,
            'modified_at': self.modified_at,
            'version_count': self.version_count,
        }


@dataclass(frozen=True)
class VersionRecord:
    """Immutable snapshot metadata of a prior file content"""
    file_path: str
    version: int
    created_at: datetime
    size: int
    comment: str

    def to_dict(self) -> dict:
        return {
            'version': self.version,
            'created_at': self.created_at.isoformat(),
            'size': self.size,
            'comment': self.comment,
        }

    @classmethod
    def from_dict(cls, file_path: str, data: dict) -> 'VersionRecord':
        return cls(
            file_path=file_path,
            version=int(data['version']),
            created_at=datetime.fromisoformat(data['created_at']),
            size=int(data['size']),
            comment=data.get('comment', ''),
        )


@dataclass
class FileHistory:
    """Live file metadata plus its retained versions (ascending)"""
    file_path: str
    current_size: int
    current_modified_at: datetime
    versions: List[VersionRecord] = field(default_factory=list)


@dataclass
class ExtractionResult:
    """Result of text extraction from document"""
    pages: list[tuple[str, Optional[int]]]  # List of (text, page_num) tuples
    method: str  # 'text', 'pypdfium2', 'docx', ...

    @property
    def text(self) -> str:
        """All extracted text joined in page order"""
        return '\n\n'.join(text for text, _ in self.pages if text)

    @property
    def page_count(self) -> int:
        """Number of pages extracted"""
        return len(self.pages)


@dataclass
class ChunkData:
    """Represents a single chunk of text with its position in the file"""
    content: str
    chunk_index: int
